# src/blog_rag/nodes/retrieve.py

from __future__ import annotations

import logging
from typing import Any, Dict, List

from langchain_core.messages import ToolMessage

from blog_rag.capabilities import RETRIEVE_TOOL_NAME, parse_invocation
from blog_rag.constants import PASSAGE_SEPARATOR, RETRIEVE_NODE
from blog_rag.errors import ContractViolation
from blog_rag.messages import require_history, tool_invocations
from blog_rag.retrieval.adapters import RetrievalService
from blog_rag.state import ConversationState
from blog_rag.utils import observe, with_error_handling

logger = logging.getLogger(__name__)


def make_retrieve_node(retrieval: RetrievalService):
    """Retrieve node: answers every retrieval invocation of the agent reply.

    All invocations are validated before the first search, so a bad one
    aborts the step without touching the service. Each invocation gets its
    own ToolMessage, in invocation order.
    """

    @observe
    @with_error_handling(RETRIEVE_NODE)
    def retrieve(state: ConversationState) -> Dict[str, Any]:
        messages = require_history(state, RETRIEVE_NODE)

        calls = tool_invocations(messages[-1])
        if not calls:
            raise ContractViolation(RETRIEVE_NODE, "Last message carries no retrieval invocation.")
        parsed = [(call, parse_invocation(call, node=RETRIEVE_NODE, expected=RETRIEVE_TOOL_NAME)) for call in calls]

        results: List[ToolMessage] = []
        for call, args in parsed:
            # Passages keep the service's order; ranking belongs to the service
            passages: List[str] = list(retrieval.search(query=args.query))
            logger.info(f"Retrieved {len(passages)} passages for query {args.query!r}")

            results.append(
                ToolMessage(
                    content=PASSAGE_SEPARATOR.join(passages),
                    tool_call_id=str(call.get("id") or ""),
                    name=RETRIEVE_TOOL_NAME,
                )
            )
        return {"messages": results}

    return retrieve
