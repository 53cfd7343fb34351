# tests/conftest.py
"""Shared fixtures for blog_rag tests."""

import os
from typing import Any, List
from unittest.mock import MagicMock

import pytest

# Disable Langfuse for tests; must happen before blog_rag.utils is imported
os.environ["LANGFUSE_ENABLED"] = "0"

from langchain_core.messages import HumanMessage, ToolMessage

from blog_rag.capabilities import GRADE_TOOL_NAME, RETRIEVE_TOOL_NAME
from tests.helpers import retrieve_call


@pytest.fixture
def mock_llm():
    """Mock chat model.

    bind_tools returns `llm.agent_model` for the agent and `llm.grader_model`
    when the grading tool is forced; rewrite/generate call `llm.invoke`.
    """
    llm = MagicMock()
    llm.agent_model = MagicMock(name="agent_model")
    llm.grader_model = MagicMock(name="grader_model")

    def bind_tools(tools, **kwargs):
        if kwargs.get("tool_choice") == GRADE_TOOL_NAME:
            return llm.grader_model
        return llm.agent_model

    llm.bind_tools = MagicMock(side_effect=bind_tools)
    return llm


@pytest.fixture
def mock_retrieval():
    """Mock RetrievalService."""
    retrieval = MagicMock()
    retrieval.search = MagicMock(return_value=["Passage about short-term memory.", "Passage about long-term memory."])
    return retrieval


@pytest.fixture
def seed_question() -> str:
    return "What are the types of agent memory?"


@pytest.fixture
def retrieved_history(seed_question) -> List[Any]:
    """History right after a retrieval step."""
    return [
        HumanMessage(content=seed_question),
        retrieve_call(),
        ToolMessage(
            content="Passage about short-term memory.\n\nPassage about long-term memory.",
            tool_call_id="call_retrieve",
            name=RETRIEVE_TOOL_NAME,
        ),
    ]
