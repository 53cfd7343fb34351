# src/blog_rag/nodes/agent.py

from __future__ import annotations

import logging
from typing import Any, Dict

from blog_rag.capabilities import RetrieveBlogPosts
from blog_rag.constants import AGENT_NODE
from blog_rag.messages import require_history, without_grading_artifacts
from blog_rag.state import ConversationState
from blog_rag.utils import observe, with_error_handling

logger = logging.getLogger(__name__)


def make_agent_node(llm):
    """Agent node: the model either answers or invokes retrieve_blog_posts.

    Grading replies are dropped from the model input; the agent never needs
    the relevance score and those invocations have no matching tool result.
    """
    model = llm.bind_tools([RetrieveBlogPosts])

    @observe
    @with_error_handling(AGENT_NODE)
    def agent(state: ConversationState) -> Dict[str, Any]:
        messages = require_history(state, AGENT_NODE)
        visible = without_grading_artifacts(messages)

        logger.info(f"Calling agent with {len(visible)} of {len(messages)} messages")
        response = model.invoke(visible)

        return {"messages": [response]}

    return agent
