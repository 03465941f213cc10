"""Tests for theme sanitization and fallback merging."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from chromagate.themes.constants import REQUIRED_COLOR_KEYS, UNSAFE_TEXT_CHARS
from chromagate.themes.models import Theme
from chromagate.themes.sanitizer import build_validated_theme, sanitize_text, sanitize_theme


def _base_theme(**overrides: Any) -> dict[str, Any]:
    theme: dict[str, Any] = {
        "id": "ocean",
        "name": "Ocean",
        "mode": "dark",
        "colors": {key: "#112233" for key in REQUIRED_COLOR_KEYS},
    }
    theme.update(overrides)
    return theme


@pytest.fixture
def fallback() -> Theme:
    theme = sanitize_theme(
        _base_theme(id="fallback", name="Fallback", mode="light", description="safe")
    )
    assert theme is not None
    return theme


def test_sanitize_text_strips_unsafe_characters() -> None:
    assert sanitize_text("  <b>Bold</b> ('quoted') \\ \"x\"  ") == "bBold/b quoted  x"
    assert not set(sanitize_text(UNSAFE_TEXT_CHARS + "ok")) & set(UNSAFE_TEXT_CHARS)


def test_sanitize_theme_cleans_text_fields() -> None:
    theme = sanitize_theme(
        _base_theme(
            name="<script>alert('x')</script>Ocean",
            description=' "Deep" blues ',
            author="(anon)",
            tags=["<b>", " calm ", "()"],
        )
    )
    assert theme is not None
    assert theme.name == "scriptalertx/scriptOcean"
    assert theme.description == "Deep blues"
    assert theme.author == "anon"
    # Tags emptied by stripping are dropped.
    assert theme.tags == ("b", "calm")


def test_sanitize_theme_canonicalizes_colors() -> None:
    colors = {key: "#ABCDEF" for key in REQUIRED_COLOR_KEYS}
    colors["text"] = "RGB( 1,2,3 )"
    colors["hover"] = "HSLA(10, 20%, 30%, 0.50)"
    colors["sparkle"] = "#fff"
    theme = sanitize_theme(_base_theme(colors=colors))
    assert theme is not None
    assert theme.colors["primary"] == "#abcdef"
    assert theme.colors["text"] == "rgb(1, 2, 3)"
    assert theme.colors["hover"] == "hsla(10, 20%, 30%, 0.5)"
    assert "sparkle" not in theme.colors


def test_sanitize_theme_is_idempotent() -> None:
    first = sanitize_theme(
        _base_theme(name="  <i>Ocean</i> ", tags=["x"], createdAt="2024-01-01T00:00:00Z")
    )
    assert first is not None
    second = sanitize_theme(first)
    assert second == first
    assert sanitize_theme(first.to_dict()) == first


def test_sanitized_theme_colors_are_read_only() -> None:
    theme = sanitize_theme(_base_theme())
    assert theme is not None

    with pytest.raises(TypeError):
        theme.colors["text"] = "url(javascript:alert(1))"  # type: ignore[index]
    assert theme.colors["text"] == "#112233"

    exported = theme.to_dict()
    exported["colors"]["text"] = "#000000"
    assert theme.colors["text"] == "#112233"


def test_sanitized_theme_is_hashable() -> None:
    first = sanitize_theme(_base_theme(tags=["calm"]))
    second = sanitize_theme(_base_theme(tags=["calm"]))
    assert first is not None and second is not None
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_theme_copies_colors_on_construction() -> None:
    source = _base_theme()
    theme = Theme.from_sanitized(source)
    source["colors"]["text"] = "#ffffff"
    assert theme.colors["text"] == "#112233"


def test_sanitize_theme_preserves_passthrough_fields() -> None:
    theme = sanitize_theme(
        _base_theme(isBuiltIn=True, createdAt="2024-01-01", updatedAt="2024-02-01T00:00:00Z")
    )
    assert theme is not None
    assert theme.is_built_in is True
    assert theme.created_at == "2024-01-01"
    assert theme.updated_at == "2024-02-01T00:00:00Z"


@pytest.mark.parametrize(
    "candidate",
    [
        None,
        "theme",
        _base_theme(mode="system"),
        _base_theme(colors={"primary": "#fff"}),
        # Nothing remains of the id once markup characters are removed.
        _base_theme(id="<>()"),
    ],
)
def test_sanitize_theme_refuses_invalid_input(candidate: object) -> None:
    assert sanitize_theme(candidate) is None


def test_sanitize_theme_refuses_bad_optional_color() -> None:
    theme = _base_theme()
    theme["colors"]["focus"] = "url(evil)"
    assert sanitize_theme(theme) is None


def test_sanitize_theme_does_not_mutate_input() -> None:
    candidate = _base_theme(name="<Ocean>")
    snapshot = {**candidate, "colors": dict(candidate["colors"])}
    sanitize_theme(candidate)
    assert candidate == snapshot


def test_sanitize_theme_logs_rejection(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="chromagate.themes.sanitizer"):
        sanitize_theme(_base_theme(mode="sepia"))
    assert "theme rejected by validation" in caplog.text


def test_build_validated_theme_accepts_valid_edit(fallback: Theme) -> None:
    theme, warnings = build_validated_theme(_base_theme(name="Edited"), fallback)
    assert warnings == []
    assert theme.id == "ocean"
    assert theme.name == "Edited"
    assert theme.mode == "dark"
    # Metadata the edit does not touch comes from the fallback.
    assert theme.description == "safe"


def test_build_validated_theme_falls_back_per_field(fallback: Theme) -> None:
    theme, warnings = build_validated_theme(
        {"id": "", "name": "Kept", "mode": "auto", "colors": {"primary": "#000"}},
        fallback,
    )
    assert theme.id == "fallback"
    assert theme.name == "Kept"
    assert theme.mode == "light"
    assert theme.colors == fallback.colors
    assert warnings == [
        "Invalid or missing theme ID, using fallback",
        "Invalid colors object, using fallback colors",
        "Invalid theme mode, using fallback",
    ]


def test_build_validated_theme_skips_bad_optional_color(fallback: Theme) -> None:
    colors = {key: "#000000" for key in REQUIRED_COLOR_KEYS}
    colors["info"] = "#00f"
    colors["muted"] = "nope"
    theme, warnings = build_validated_theme(_base_theme(colors=colors), fallback)
    assert warnings == ["Invalid color value for muted, using fallback"]
    assert theme.colors["info"] == "#00f"
    assert "muted" not in theme.colors


def test_build_validated_theme_non_object(fallback: Theme) -> None:
    theme, warnings = build_validated_theme("garbage", fallback)
    assert theme is fallback
    assert warnings == ["Invalid theme object, using fallback"]


def test_build_validated_theme_unsanitizable_result(fallback: Theme) -> None:
    theme, warnings = build_validated_theme(_base_theme(id="()"), fallback)
    assert theme is fallback
    assert warnings[-1] == "Edited theme could not be sanitized, using fallback"
