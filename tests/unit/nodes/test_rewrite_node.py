# tests/unit/nodes/test_rewrite_node.py
"""Unit tests for the rewrite node."""

from langchain_core.messages import AIMessage, HumanMessage

from blog_rag.nodes.rewrite import REWRITER_NAME, make_rewrite_node
from tests.helpers import grade_call


class TestRewriteNode:
    def test_appends_rewritten_question(self, mock_llm, retrieved_history):
        mock_llm.invoke.return_value = AIMessage(content="  Which memory types do LLM agents use?\n")

        node = make_rewrite_node(mock_llm)
        result = node({"messages": retrieved_history + [grade_call("não")]})

        msg = result["messages"][0]
        assert isinstance(msg, HumanMessage)
        assert msg.content == "Which memory types do LLM agents use?"
        assert msg.name == REWRITER_NAME

    def test_increments_rewrite_count(self, mock_llm, retrieved_history):
        mock_llm.invoke.return_value = AIMessage(content="better question")
        node = make_rewrite_node(mock_llm)

        assert node({"messages": retrieved_history})["rewrite_count"] == 1
        assert node({"messages": retrieved_history, "rewrite_count": 2})["rewrite_count"] == 3

    def test_prompt_uses_seed_question_only(self, mock_llm, retrieved_history, seed_question):
        mock_llm.invoke.return_value = AIMessage(content="better question")

        node = make_rewrite_node(mock_llm)
        node({"messages": retrieved_history + [grade_call("não")]})

        text = mock_llm.invoke.call_args.args[0].to_string()
        assert seed_question in text
        assert "Passage about" not in text

    def test_empty_rewrite_reuses_question(self, mock_llm, retrieved_history, seed_question):
        mock_llm.invoke.return_value = AIMessage(content="   ")

        node = make_rewrite_node(mock_llm)
        result = node({"messages": retrieved_history})

        assert result["messages"][0].content == seed_question
