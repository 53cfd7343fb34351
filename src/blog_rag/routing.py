# src/blog_rag/routing.py
"""Conditional edges of the conversation graph."""

from __future__ import annotations

import logging
from typing import Callable, Literal, Optional

from langgraph.graph import END

from blog_rag.capabilities import GRADE_TOOL_NAME, RETRIEVE_TOOL_NAME, capability_for
from blog_rag.constants import AFFIRMATIVE_SCORE, AGENT_NODE, GENERATE_NODE, GRADE_NODE, RETRIEVE_NODE, REWRITE_NODE
from blog_rag.errors import ContractViolation
from blog_rag.messages import tool_invocation
from blog_rag.state import ConversationState

logger = logging.getLogger(__name__)

Verdict = Literal["yes", "no"]


def should_retrieve(state: ConversationState) -> str:
    """Route after the agent: retrieve when it invoked the retrieval tool, otherwise finish."""
    messages = state.get("messages") or []
    call = tool_invocation(messages[-1]) if messages else None

    if call is None:
        logger.info("Decision: answer directly, no retrieval")
        return END

    name = call.get("name", "")
    capability_for(name, node=AGENT_NODE)
    if name != RETRIEVE_TOOL_NAME:
        raise ContractViolation(AGENT_NODE, f"Agent may only invoke {RETRIEVE_TOOL_NAME!r}, got {name!r}.")

    logger.info("Decision: retrieve")
    return RETRIEVE_NODE


def check_relevance(state: ConversationState) -> Verdict:
    """Read the relevance verdict from the grading invocation.

    Only the exact affirmative token counts as relevant; any other value,
    including a missing binary_score, is "no".
    """
    messages = state.get("messages") or []
    call = tool_invocation(messages[-1]) if messages else None
    if call is None:
        raise ContractViolation(GRADE_NODE, "check_relevance requires the last message to carry a tool invocation.")
    if call.get("name") != GRADE_TOOL_NAME:
        raise ContractViolation(GRADE_NODE, f"Expected a {GRADE_TOOL_NAME!r} invocation, got {call.get('name')!r}.")

    args = call.get("args") or {}
    if not args:
        raise ContractViolation(GRADE_NODE, "Grading invocation carries no arguments.")

    if args.get("binary_score") == AFFIRMATIVE_SCORE:
        logger.info("Decision: documents relevant")
        return "yes"

    logger.info(f"Decision: documents not relevant (binary_score={args.get('binary_score')!r})")
    return "no"


def make_route_after_grade(max_rewrites: Optional[int]) -> Callable[[ConversationState], str]:
    """Route after grading, capping the rewrite -> agent loop.

    Once max_rewrites rewrites have happened, a negative verdict goes to
    generate, which answers from the last passages or says it lacks context.
    None disables the cap.
    """

    def route_after_grade(state: ConversationState) -> str:
        if check_relevance(state) == "yes":
            return GENERATE_NODE

        count = int(state.get("rewrite_count", 0))
        if max_rewrites is not None and count >= max_rewrites:
            logger.warning(f"Rewrite limit reached ({count}/{max_rewrites}); answering with the last passages")
            return GENERATE_NODE

        return REWRITE_NODE

    return route_after_grade
