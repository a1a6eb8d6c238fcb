from .auth import (
    create_access_token,
    decode_user_id,
    get_current_user_id,
    bearer_scheme
)
from .gemini import (
    GeminiClient,
    extract_response_text,
    get_ai_client
)
from .enhancer import (
    enhance_professional_summary,
    enhance_job_description
)
from .resume_parser import (
    build_extraction_prompt,
    normalize_ai_json,
    parse_resume_json,
    extract_resume_data
)
from .templates import (
    TEMPLATES,
    resolve_template,
    render_resume_html
)

__all__ = [
    # Auth
    "create_access_token",
    "decode_user_id",
    "get_current_user_id",
    "bearer_scheme",
    # Gemini
    "GeminiClient",
    "extract_response_text",
    "get_ai_client",
    # Enhancement
    "enhance_professional_summary",
    "enhance_job_description",
    # Resume parsing
    "build_extraction_prompt",
    "normalize_ai_json",
    "parse_resume_json",
    "extract_resume_data",
    # Templates
    "TEMPLATES",
    "resolve_template",
    "render_resume_html"
]
