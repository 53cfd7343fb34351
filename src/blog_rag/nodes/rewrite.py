# src/blog_rag/nodes/rewrite.py

from __future__ import annotations

import logging
from typing import Any, Dict

from langchain_core.messages import HumanMessage
from langchain_core.prompts import ChatPromptTemplate

from blog_rag.constants import REWRITE_NODE
from blog_rag.messages import message_text, require_history, seed_question
from blog_rag.prompts.rewrite import REWRITE_PROMPT
from blog_rag.state import ConversationState
from blog_rag.utils import observe, with_error_handling

logger = logging.getLogger(__name__)

REWRITER_NAME = "query_rewriter"


def make_rewrite_node(llm):
    prompt = ChatPromptTemplate.from_template(REWRITE_PROMPT)

    @observe
    @with_error_handling(REWRITE_NODE)
    def rewrite(state: ConversationState) -> Dict[str, Any]:
        messages = require_history(state, REWRITE_NODE)
        question = seed_question(messages)
        count = int(state.get("rewrite_count", 0)) + 1

        response = llm.invoke(prompt.invoke({"question": question}))
        rewritten = message_text(response).strip()
        if not rewritten:
            logger.warning("Rewrite returned empty text; reusing the original question")
            rewritten = question

        logger.info(f"Rewrite #{count}: {rewritten!r}")

        # Appended as a user turn so the agent treats it as the question to answer
        return {
            "messages": [HumanMessage(content=rewritten, name=REWRITER_NAME)],
            "rewrite_count": count,
        }

    return rewrite
