# src/blog_rag/nodes/generate.py

from __future__ import annotations

import logging
from typing import Any, Dict

from langchain_core.prompts import ChatPromptTemplate

from blog_rag.constants import GENERATE_NODE
from blog_rag.errors import ContractViolation
from blog_rag.messages import last_tool_results, require_history, seed_question, tool_results_text
from blog_rag.prompts.generate import GENERATE_PROMPT
from blog_rag.state import ConversationState
from blog_rag.utils import observe, with_error_handling

logger = logging.getLogger(__name__)


def make_generate_node(llm):
    prompt = ChatPromptTemplate.from_template(GENERATE_PROMPT)

    @observe
    @with_error_handling(GENERATE_NODE)
    def generate(state: ConversationState) -> Dict[str, Any]:
        messages = require_history(state, GENERATE_NODE)

        docs = last_tool_results(messages)
        if not docs:
            raise ContractViolation(GENERATE_NODE, "No tool result found in the conversation history.")

        prompt_val = prompt.invoke(
            {
                "context": tool_results_text(docs),
                "question": seed_question(messages),
            }
        )
        response = llm.invoke(prompt_val)
        logger.info("Generated answer from retrieved passages")

        return {"messages": [response]}

    return generate
