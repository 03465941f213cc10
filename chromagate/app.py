"""Theme engine bootstrap for host applications."""

from __future__ import annotations

from chromagate.config.settings import AppSettings
from chromagate.logs import configure_logger
from chromagate.themes.registry import ThemeRegistry, preset_themes_root


def create_theme_registry(settings: AppSettings | None = None) -> ThemeRegistry:
    """Configure logging, then load preset and user themes."""
    settings = settings if settings is not None else AppSettings()
    logger = configure_logger(settings.log_dir)

    presets = preset_themes_root()
    user_root = settings.user_themes_dir
    logger.info("startup presets=%s user_themes=%s", presets, user_root)
    if not presets.exists():
        logger.warning("preset theme root missing at %s", presets)

    user_root.mkdir(parents=True, exist_ok=True)
    registry = ThemeRegistry(builtin_root=presets, user_root=user_root)
    registry.reload()
    errors = registry.load_errors()
    if errors:
        logger.warning("theme load warnings: %s", " | ".join(errors[:6]))
    logger.info("loaded %d themes", len(registry.themes()))
    return registry
