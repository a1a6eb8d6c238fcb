"""
Application exceptions.

Every error a request handler can report is a ``ResumeBuilderError``; the
handler registered in ``main`` turns it into a ``{"message": ...}`` JSON body
with the error's status code plus any extra fields it carries.
"""
from typing import Any, Dict, Optional


class ResumeBuilderError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ConfigurationError(ResumeBuilderError):
    """Required startup configuration is missing or invalid."""

    status_code = 500


class MissingFieldError(ResumeBuilderError):
    """A required request field is absent or empty."""

    status_code = 400


class AuthenticationError(ResumeBuilderError):
    status_code = 401


class ResumeNotFoundError(ResumeBuilderError):
    status_code = 404

    def __init__(self, resume_id: int):
        super().__init__(f"Resume {resume_id} not found")
        self.resume_id = resume_id


class AIServiceError(ResumeBuilderError):
    """The generative AI call raised; the upstream message is passed through."""

    status_code = 400


class AIResponseParseError(ResumeBuilderError):
    """The AI response could not be turned into a resume object."""

    status_code = 500

    def __init__(self, raw: str, parse_error: str):
        super().__init__("Failed to parse JSON from AI response")
        self.raw = raw
        self.parse_error = parse_error

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "aiRaw": self.raw,
            "parseError": self.parse_error,
        }
