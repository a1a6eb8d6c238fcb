from .resume import Resume, DEFAULT_TITLE, DEFAULT_TEMPLATE, DEFAULT_ACCENT_COLOR

__all__ = [
    "Resume",
    "DEFAULT_TITLE", "DEFAULT_TEMPLATE", "DEFAULT_ACCENT_COLOR",
]
