"""
Resume templates - name lookup and HTML rendering.
"""
import logging
import re
from typing import Any, Dict, Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from ..models.resume import DEFAULT_ACCENT_COLOR, DEFAULT_TEMPLATE

logger = logging.getLogger(__name__)

# Template name -> Jinja file under resume_builder/templates/
TEMPLATES: Dict[str, str] = {
    "classic": "classic.html.jinja",
    "modern": "modern.html.jinja",
    "minimal": "minimal.html.jinja",
    "minimal-image": "minimal_image.html.jinja",
}

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# A4 width at ~96dpi
PREVIEW_WIDTH_PX = 794

_env = Environment(
    loader=PackageLoader("resume_builder", "templates"),
    autoescape=select_autoescape(["html", "jinja"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def resolve_template(name: Optional[str]) -> str:
    """Map a template name to a known template, falling back to classic."""
    if name in TEMPLATES:
        return name
    logger.debug(f"Unknown template {name!r}, using {DEFAULT_TEMPLATE}")
    return DEFAULT_TEMPLATE


def normalize_accent_color(color: Optional[str]) -> str:
    if color and _HEX_COLOR.match(color):
        return color
    return DEFAULT_ACCENT_COLOR


def render_resume_html(
    resume: Dict[str, Any],
    template: Optional[str] = None,
    accent_color: Optional[str] = None,
) -> str:
    """Render resume data (as a dict) into a standalone HTML page."""
    template_name = resolve_template(template)
    jinja_template = _env.get_template(TEMPLATES[template_name])

    personal_info = resume.get("personal_info") or {}
    return jinja_template.render(
        resume=resume,
        info=personal_info,
        accent_color=normalize_accent_color(accent_color),
        template_name=template_name,
        width=PREVIEW_WIDTH_PX,
    )
