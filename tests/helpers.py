# tests/helpers.py
"""Message builders shared by the test suite."""

from typing import Any, Dict, Optional

from langchain_core.messages import AIMessage

from blog_rag.capabilities import GRADE_TOOL_NAME, RETRIEVE_TOOL_NAME


def tool_call_message(name: str, args: Dict[str, Any], call_id: str = "call_1") -> AIMessage:
    return AIMessage(content="", tool_calls=[{"name": name, "args": args, "id": call_id}])


def retrieve_call(query: str = "agent memory", call_id: str = "call_retrieve") -> AIMessage:
    return tool_call_message(RETRIEVE_TOOL_NAME, {"query": query}, call_id)


def grade_call(score: Optional[str], call_id: str = "call_grade") -> AIMessage:
    args = {} if score is None else {"binary_score": score}
    return tool_call_message(GRADE_TOOL_NAME, args, call_id)


def retrieve_calls(*queries: str, prefix: str = "call") -> AIMessage:
    """Agent reply invoking the retrieval tool once per query."""
    calls = [{"name": RETRIEVE_TOOL_NAME, "args": {"query": q}, "id": f"{prefix}_{i}"} for i, q in enumerate(queries, 1)]
    return AIMessage(content="", tool_calls=calls)
