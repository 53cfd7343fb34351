# src/blog_rag/nodes/grade_documents.py

from __future__ import annotations

import logging
from typing import Any, Dict

from langchain_core.messages import ToolMessage
from langchain_core.prompts import ChatPromptTemplate

from blog_rag.capabilities import GRADE_TOOL_NAME, GiveRelevanceScore
from blog_rag.constants import GRADE_NODE
from blog_rag.errors import ContractViolation
from blog_rag.messages import last_tool_results, require_history, seed_question, tool_results_text
from blog_rag.prompts.grade_documents import GRADE_DOCUMENTS_PROMPT
from blog_rag.state import ConversationState
from blog_rag.utils import observe, with_error_handling

logger = logging.getLogger(__name__)


def make_grade_documents_node(llm):
    """Grade node: asks the model to score the latest tool results against the seed question.

    The grading tool is forced, so the reply always carries an invocation; the
    verdict itself is read by routing.check_relevance.
    """
    prompt = ChatPromptTemplate.from_template(GRADE_DOCUMENTS_PROMPT)
    model = llm.bind_tools([GiveRelevanceScore], tool_choice=GRADE_TOOL_NAME)

    @observe
    @with_error_handling(GRADE_NODE)
    def grade_documents(state: ConversationState) -> Dict[str, Any]:
        messages = require_history(state, GRADE_NODE)

        last = messages[-1]
        if not isinstance(last, ToolMessage):
            raise ContractViolation(GRADE_NODE, f"Expected a tool result as the last message, got {last.type!r}.")

        prompt_val = prompt.invoke(
            {
                "question": seed_question(messages),
                "context": tool_results_text(last_tool_results(messages)),
            }
        )
        score = model.invoke(prompt_val)
        logger.info("Graded retrieved passages")

        return {"messages": [score]}

    return grade_documents
