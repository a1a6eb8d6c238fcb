"""Unit tests for template lookup and HTML rendering."""
import pytest

from resume_builder.services.templates import (
    TEMPLATES,
    normalize_accent_color,
    render_resume_html,
    resolve_template,
)


RESUME = {
    "title": "Backend Resume",
    "professional_summary": "Builds APIs.",
    "skills": ["Python", "SQL"],
    "personal_info": {
        "full_name": "Jane <Doe>",
        "profession": "Engineer",
        "email": "jane@example.com",
        "image": "https://example.com/jane.png",
    },
    "experience": [
        {"company": "Acme", "position": "Engineer", "start_date": "2020", "end_date": "", "is_current": True,
         "description": "Payments."},
    ],
    "projects": [],
    "education": [],
}


@pytest.mark.unit
@pytest.mark.parametrize("name", sorted(TEMPLATES))
def test_known_templates_resolve_to_themselves(name):
    assert resolve_template(name) == name


@pytest.mark.unit
@pytest.mark.parametrize("name", [None, "", "fancy", "Modern"])
def test_unknown_templates_fall_back_to_classic(name):
    assert resolve_template(name) == "classic"


@pytest.mark.unit
@pytest.mark.parametrize("name", sorted(TEMPLATES))
def test_every_template_renders(name):
    html = render_resume_html(RESUME, template=name, accent_color="#10B981")

    assert f'class="template-{name}"' in html
    assert 'id="resume-preview"' in html
    assert "width: 794px" in html
    assert "#10B981" in html
    assert "Builds APIs." in html
    assert "Present" in html


@pytest.mark.unit
def test_unknown_template_renders_classic():
    assert 'class="template-classic"' in render_resume_html(RESUME, template="does-not-exist")


@pytest.mark.unit
def test_rendering_escapes_resume_text():
    html = render_resume_html(RESUME)
    assert "Jane &lt;Doe&gt;" in html
    assert "Jane <Doe>" not in html


@pytest.mark.unit
def test_minimal_image_shows_photo():
    assert 'src="https://example.com/jane.png"' in render_resume_html(RESUME, template="minimal-image")


@pytest.mark.unit
def test_invalid_accent_color_uses_default():
    assert normalize_accent_color("red; } body { display:none") == "#3B82F6"
    assert normalize_accent_color(None) == "#3B82F6"
    assert normalize_accent_color("#abc") == "#abc"
