"""Tests for the theme contrast audit."""

from __future__ import annotations

from typing import Any

from chromagate.themes.accessibility import audit_theme
from chromagate.themes.constants import CRITICAL_CONTRAST_PAIRS, REQUIRED_COLOR_KEYS
from chromagate.themes.sanitizer import sanitize_theme


def _colors(**overrides: str) -> dict[str, str]:
    colors = {key: "#808080" for key in REQUIRED_COLOR_KEYS}
    colors.update(
        text="#000000",
        textSecondary="#595959",
        background="#ffffff",
        surface="#ffffff",
    )
    colors.update(overrides)
    return colors


def _theme(colors: dict[str, str]) -> dict[str, Any]:
    return {"id": "audit", "name": "Audit", "mode": "light", "colors": colors}


def test_accessible_theme_has_no_issues() -> None:
    report = audit_theme(_theme(_colors()))
    assert report.is_accessible is True
    assert report.issues == []


def test_low_contrast_pairs_are_reported() -> None:
    report = audit_theme(_theme(_colors(textSecondary="#cccccc")))
    assert report.is_accessible is False
    pairs = [issue.pair for issue in report.issues]
    assert pairs == [("textSecondary", "background"), ("textSecondary", "surface")]
    assert report.issues[0].contrast.ratio == 1.61
    assert report.issues[0].contrast.grade == "Fail"


def test_aa_only_pairs_are_not_issues() -> None:
    # #767676 on white passes AA but misses AAA.
    report = audit_theme(_theme(_colors(textSecondary="#767676")))
    assert report.is_accessible is True


def test_audit_accepts_sanitized_theme() -> None:
    theme = sanitize_theme(_theme(_colors(surface="#111111")))
    assert theme is not None
    report = audit_theme(theme)
    assert [issue.pair for issue in report.issues] == [
        ("text", "surface"),
        ("textSecondary", "surface"),
    ]


def test_missing_or_invalid_roles_never_raise() -> None:
    report = audit_theme({"colors": {"text": "not-a-color"}})
    # Fallbacks are black text on a white background for every pair.
    assert report.is_accessible is True
    assert audit_theme({"colors": "broken"}).is_accessible is True
    assert audit_theme({}).is_accessible is True


def test_every_critical_pair_is_checked() -> None:
    colors = _colors(text="#ffffff", textSecondary="#ffffff")
    report = audit_theme(_theme(colors))
    assert [issue.pair for issue in report.issues] == list(CRITICAL_CONTRAST_PAIRS)
