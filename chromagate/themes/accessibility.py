"""Contrast audit of a theme's critical text/background role pairs."""

from __future__ import annotations

from typing import Any, Mapping

from chromagate.colors.contrast import evaluate_contrast
from chromagate.themes.constants import CRITICAL_CONTRAST_PAIRS
from chromagate.themes.models import AccessibilityIssue, AccessibilityReport, Theme


def audit_theme(theme: Theme | Mapping[str, Any]) -> AccessibilityReport:
    """Report every critical pair below WCAG AA.

    AAA misses are not issues. Missing or unparseable roles fall back to the
    contrast evaluator's worst-case colors instead of raising.
    """
    if isinstance(theme, Theme):
        colors: Mapping[str, Any] = theme.colors
    else:
        raw_colors = theme.get("colors")
        colors = raw_colors if isinstance(raw_colors, Mapping) else {}

    issues: list[AccessibilityIssue] = []
    for foreground, background in CRITICAL_CONTRAST_PAIRS:
        contrast = evaluate_contrast(colors.get(foreground), colors.get(background))
        if not contrast.meets_aa:
            issues.append(AccessibilityIssue(pair=(foreground, background), contrast=contrast))
    return AccessibilityReport(is_accessible=not issues, issues=issues)
