# src/blog_rag/messages.py
"""Helpers that classify history messages by their variant.

An AIMessage with a non-empty tool_calls list is an invocation; every other
message (including an AIMessage whose tool_calls is empty) is plain.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from langchain_core.messages import AIMessage, BaseMessage, ToolCall, ToolMessage

from blog_rag.capabilities import GRADE_TOOL_NAME
from blog_rag.constants import PASSAGE_SEPARATOR
from blog_rag.errors import ContractViolation


def tool_invocations(message: BaseMessage) -> List[ToolCall]:
    """All tool invocations carried by the message, in the order the model sent them."""
    if isinstance(message, AIMessage) and message.tool_calls:
        return list(message.tool_calls)
    return []


def tool_invocation(message: BaseMessage) -> Optional[ToolCall]:
    """Return the first tool invocation carried by the message, if any."""
    calls = tool_invocations(message)
    return calls[0] if calls else None


def is_grading_artifact(message: BaseMessage) -> bool:
    call = tool_invocation(message)
    return call is not None and call["name"] == GRADE_TOOL_NAME


def without_grading_artifacts(messages: Sequence[BaseMessage]) -> List[BaseMessage]:
    """History as the agent should see it: grading replies removed, order kept."""
    return [m for m in messages if not is_grading_artifact(m)]


def last_tool_results(messages: Sequence[BaseMessage]) -> List[ToolMessage]:
    """Most recent batch of tool results: the newest run of consecutive ToolMessages.

    A retrieve step answers every invocation of the agent reply, so one batch
    may hold several results. Empty when the history has no tool result.
    """
    end = len(messages)
    while end > 0 and not isinstance(messages[end - 1], ToolMessage):
        end -= 1
    start = end
    while start > 0 and isinstance(messages[start - 1], ToolMessage):
        start -= 1
    return list(messages[start:end])


def tool_results_text(results: Sequence[ToolMessage]) -> str:
    return PASSAGE_SEPARATOR.join(message_text(r) for r in results)


def seed_question(messages: Sequence[BaseMessage]) -> str:
    return message_text(messages[0])


def message_text(message: BaseMessage) -> str:
    """Text content of a message, flattening multi-part content."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


def require_history(state: Dict[str, Any], node: str) -> List[BaseMessage]:
    """Return the run history, failing when the node has nothing to work on."""
    messages = state.get("messages")
    if not isinstance(messages, list) or not messages:
        raise ContractViolation(node, "Missing or empty 'messages' in state (expected the seed question).")
    return messages
