"""Shared test configuration, pytest markers and fixtures."""

import pytest

from config import settings
from services import gemini_client


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


@pytest.fixture(autouse=True)
def _no_gemini(monkeypatch):
    """Never reach the network: no API key and no cached client."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(gemini_client, "_client", None)


@pytest.fixture
def fake_model(monkeypatch):
    """Replace gemini_client.generate_text with a scripted responder.

    Call the fixture with the responses to return in order; an Exception
    instance is raised instead of returned. The last response repeats.
    """

    def install(*responses):
        calls: list[dict] = []

        async def fake_generate_text(prompt, system_instruction=None, timeout=None):
            calls.append({"prompt": prompt, "system_instruction": system_instruction, "timeout": timeout})
            response = responses[min(len(calls), len(responses)) - 1]
            if isinstance(response, Exception):
                raise response
            return response

        monkeypatch.setattr(gemini_client, "generate_text", fake_generate_text)
        return calls

    return install


SAMPLE_DOCUMENT = """Jane Doe
jane.doe@email.com | +1-555-0123

Summary
Senior backend engineer with 8 years experience building payment systems.

Experience
Senior Software Engineer, FinCorp (2018 - Present)
- Built a real-time fraud detection platform processing 2M events per day.
- Led a team of 6 engineers delivering microservices on Kubernetes.
- Won first place in the FinCorp internal hackathon.

Software Engineer, ShopCo (2016 - 2018)
- Developed a recommendation system with Python and PostgreSQL.

Education
Bachelor of Science in Computer Science, State University (degree 2016)

Skills
Python, Django, FastAPI, PostgreSQL, Redis, Docker, Kubernetes, AWS, Git, REST API

Projects
Open-source contributor to several projects. AWS Certified Solutions Architect.
"""


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT
