# tests/eval/conftest.py
"""Live evaluation fixtures: real chat model, real blog index.

Skipped unless GOOGLE_API_KEY is configured (via environment or .env).
"""

import os
import uuid
from pathlib import Path
from typing import Optional

import pytest
from dotenv import load_dotenv

ARTIFACTS_DIR = Path("artifacts/eval")

load_dotenv()


def _env(name: str) -> Optional[str]:
    v = os.getenv(name)
    return v.strip() if v and v.strip() else None


@pytest.fixture(scope="session")
def run_id() -> str:
    """Override with EVAL_RUN_ID for stable artifact paths in CI."""
    return _env("EVAL_RUN_ID") or f"pytest-{uuid.uuid4().hex[:10]}"


@pytest.fixture(scope="session")
def settings():
    if not _env("GOOGLE_API_KEY"):
        pytest.skip("No LLM credentials found. Set GOOGLE_API_KEY to run live evaluation tests.")

    from blog_rag.config import get_settings

    return get_settings()


@pytest.fixture(scope="session")
def retrieval(settings):
    from blog_rag.retrieval.index import build_retrieval_service

    return build_retrieval_service(settings)


@pytest.fixture(scope="session")
def controller(settings, retrieval):
    from blog_rag.controller import ConversationController

    return ConversationController.from_settings(settings, retrieval=retrieval)
