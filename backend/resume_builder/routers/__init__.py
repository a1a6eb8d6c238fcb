from .ai import router as ai_router
from .resumes import router as resumes_router

__all__ = ["ai_router", "resumes_router"]
