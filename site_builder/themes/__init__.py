"""
Thèmes — registry + compilateur CSS.
"""
from .registry import (
    DEFAULT_THEME_ID,
    build_theme,
    get_theme,
    has_theme,
    list_themes,
    register_theme,
    theme_ids,
    unregister_theme,
)
from .compiler import (
    COLOR_MODES,
    compile_keyframes,
    compile_theme_css,
    compile_variables,
    normalize_color_mode,
)

__all__ = [
    "DEFAULT_THEME_ID", "build_theme", "get_theme", "has_theme", "list_themes",
    "register_theme", "theme_ids", "unregister_theme",
    "COLOR_MODES", "compile_keyframes", "compile_theme_css", "compile_variables",
    "normalize_color_mode",
]
