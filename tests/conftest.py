"""
Shared fixtures: an in-memory database per test, a scripted AI provider and
a TestClient wired to both through dependency overrides.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import json
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import smartresume.models  # noqa: F401
from main import app
from smartresume.api import deps
from smartresume.core.llm import LLMProvider
from smartresume.db.session import Base, create_db_engine, get_db
from smartresume.schemas.ResumeSchemas import ResumeContent

FAKE_PDF = b"%PDF-1.7\n%fake\n"


class FakeProvider(LLMProvider):
    """Returns queued responses in order, or raises the configured error."""

    name = "fake"

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def generate(self, prompt, *, system=None, json_output=False, temperature=0.7):
        self.calls.append(
            {"prompt": prompt, "system": system, "json_output": json_output, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else ""


@pytest.fixture
def engine():
    engine = create_db_engine(
        "sqlite://",
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fake_llm():
    return FakeProvider()


@pytest.fixture
def pdf_calls():
    return []


@pytest.fixture
def client(engine, fake_llm, pdf_calls):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    def fake_render(resume):
        pdf_calls.append(resume.id)
        return FAKE_PDF

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_llm_provider] = lambda: fake_llm
    app.dependency_overrides[deps.get_pdf_renderer] = lambda: fake_render
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"X-User-Id": "user-1", "X-User-Email": "jane.doe@example.com", "X-User-First-Name": "Jane"}


@pytest.fixture
def other_headers():
    return {"X-User-Id": "user-2", "X-User-Email": "mallory@example.com"}


@pytest.fixture
def resume_payload():
    return {
        "title": "SWE",
        "personalInfo": {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "jane.doe@example.com",
            "phone": "555-0100",
            "location": "Berlin, Germany",
            "title": "Software Engineer",
            "summary": "Engineer who ships reliable services.",
        },
        "experience": [
            {
                "position": "Senior Engineer",
                "company": "Acme",
                "startDate": "2021-01",
                "endDate": None,
                "current": True,
                "description": "Built payment services.",
            },
            {
                "position": "Engineer",
                "company": "Globex",
                "startDate": "2018-03",
                "endDate": "2020-12",
                "current": False,
                "description": "Maintained internal tools.",
            },
        ],
        "education": [
            {"degree": "BSc Computer Science", "school": "TU Berlin", "graduationDate": "2018", "gpa": "1.7"}
        ],
        "skills": ["Python", "SQL", "Docker"],
        "templateId": "modern",
    }


@pytest.fixture
def resume_content(resume_payload):
    return ResumeContent.model_validate(resume_payload)


def _optimization_reply(**overrides):
    reply = {
        "matchScore": 88,
        "enhancedSummary": "Backend engineer focused on Go and Kubernetes.",
        "optimizedExperience": [
            {"description": "Built payment services in Go on Kubernetes."},
            {"description": "Maintained internal tools used by 200 engineers."},
        ],
        "suggestedSkills": ["Go", "Kubernetes", "Python"],
        "optimizations": ["Rewrote summary", "Added Go and Kubernetes keywords"],
    }
    reply.update(overrides)
    return json.dumps(reply)


@pytest.fixture
def optimization_reply():
    return _optimization_reply


@pytest.fixture
def make_provider():
    return FakeProvider
