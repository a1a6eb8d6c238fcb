"""Shared fixtures: a temporary SQLite database, an app client and a fake Gemini client."""
import os
import tempfile
import uuid
from pathlib import Path

# Settings are read once at import time, so point them at a scratch database first
_DB_PATH = Path(tempfile.mkdtemp(prefix="resume_builder_tests_")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["GEMINI_MODEL"] = "gemini-test-model"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

from resume_builder.main import app
from resume_builder.models import Resume
from resume_builder.services.auth import create_access_token
from resume_builder.services.gemini import get_ai_client


class FakeAIClient:
    """Stands in for GeminiClient; replies from a queue and records every prompt."""

    def __init__(self):
        self.replies = []
        self.error = None
        self.calls = []

    def reply_with(self, *replies):
        self.replies.extend(replies)
        return self

    def fail_with(self, error):
        self.error = error
        return self

    async def generate(self, prompt, **options):
        self.calls.append({"prompt": prompt, "options": options})
        if self.error is not None:
            raise self.error
        return self.replies.pop(0) if self.replies else ""


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fake_ai():
    fake = FakeAIClient()
    app.dependency_overrides[get_ai_client] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_ai_client, None)


@pytest.fixture
def user_id():
    return f"user-{uuid.uuid4().hex[:12]}"


@pytest.fixture
def auth_headers(user_id):
    token = create_access_token({"sub": user_id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="session")
def sync_engine():
    engine = create_engine(f"sqlite:///{_DB_PATH}")
    yield engine
    engine.dispose()


@pytest.fixture
def stored_resumes(sync_engine):
    """Return a function listing the resumes stored for a user."""
    def _stored(owner_id):
        with Session(sync_engine) as session:
            return list(session.scalars(select(Resume).where(Resume.user_id == owner_id)))
    return _stored


@pytest.fixture
def resume_reply():
    return """{
  "professional_summary": "Backend engineer with 6 years building Python APIs.",
  "skills": ["Python", "FastAPI", "PostgreSQL"],
  "personal_info": {
    "image": "",
    "profession": "Software Engineer",
    "full_name": "Jane Doe",
    "email": "jane@example.com",
    "phone": "+1 555 123 4567",
    "location": "Austin, TX",
    "website": "https://janedoe.dev"
  },
  "experience": [
    {
      "company": "Acme Corp",
      "position": "Senior Engineer",
      "start_date": "2021-03",
      "end_date": "",
      "description": "Led the payments API team.",
      "is_current": true
    }
  ],
  "projects": [
    {"name": "Ledger", "type": "Open source", "description": "Double-entry bookkeeping library."}
  ],
  "education": [
    {
      "institution": "State University",
      "degree": "B.S.",
      "graduation_date": "2018-05",
      "field": "Computer Science",
      "gpa": "3.8"
    }
  ]
}"""
