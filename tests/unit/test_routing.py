# tests/unit/test_routing.py
"""Unit tests for conditional edges."""

import pytest
from langchain_core.messages import AIMessage, HumanMessage
from langgraph.graph import END

from blog_rag.errors import ContractViolation
from blog_rag.routing import check_relevance, make_route_after_grade, should_retrieve
from tests.helpers import grade_call, retrieve_call, tool_call_message


class TestShouldRetrieve:
    def test_retrieve_on_tool_invocation(self, seed_question):
        state = {"messages": [HumanMessage(content=seed_question), retrieve_call()]}
        assert should_retrieve(state) == "retrieve"

    def test_end_without_tool_calls(self):
        state = {"messages": [HumanMessage(content="What is 2+2?"), AIMessage(content="4")]}
        assert should_retrieve(state) == END

    def test_end_with_empty_tool_calls(self):
        state = {"messages": [HumanMessage(content="What is 2+2?"), AIMessage(content="4", tool_calls=[])]}
        assert should_retrieve(state) == END

    def test_end_on_empty_history(self):
        assert should_retrieve({"messages": []}) == END

    def test_routing_ignores_earlier_invocations(self, retrieved_history):
        state = {"messages": retrieved_history + [AIMessage(content="final")]}
        assert should_retrieve(state) == END

    def test_unknown_capability_is_violation(self):
        state = {"messages": [HumanMessage(content="q"), tool_call_message("web_search", {"query": "x"})]}
        with pytest.raises(ContractViolation, match="unknown capability"):
            should_retrieve(state)

    def test_grading_capability_from_agent_is_violation(self):
        state = {"messages": [HumanMessage(content="q"), grade_call("sim")]}
        with pytest.raises(ContractViolation, match="may only invoke"):
            should_retrieve(state)


class TestCheckRelevance:
    def test_affirmative_is_relevant(self, retrieved_history):
        state = {"messages": retrieved_history + [grade_call("sim")]}
        assert check_relevance(state) == "yes"

    def test_negative_is_not_relevant(self, retrieved_history):
        state = {"messages": retrieved_history + [grade_call("não")]}
        assert check_relevance(state) == "no"

    @pytest.mark.parametrize("score", ["Sim", "SIM", " sim", "yes", "true", ""])
    def test_only_exact_token_is_relevant(self, retrieved_history, score):
        state = {"messages": retrieved_history + [grade_call(score)]}
        assert check_relevance(state) == "no"

    def test_missing_score_with_other_args_is_not_relevant(self, retrieved_history):
        msg = tool_call_message("give_relevance_score", {"score": "sim"}, "g1")
        state = {"messages": retrieved_history + [msg]}
        assert check_relevance(state) == "no"

    def test_no_invocation_is_violation(self, retrieved_history):
        state = {"messages": retrieved_history + [AIMessage(content="sim")]}
        with pytest.raises(ContractViolation, match="requires the last message"):
            check_relevance(state)

    def test_tool_result_last_is_violation(self, retrieved_history):
        with pytest.raises(ContractViolation):
            check_relevance({"messages": retrieved_history})

    def test_zero_arguments_is_violation(self, retrieved_history):
        state = {"messages": retrieved_history + [grade_call(None)]}
        with pytest.raises(ContractViolation, match="no arguments"):
            check_relevance(state)

    def test_wrong_tool_is_violation(self, retrieved_history):
        state = {"messages": retrieved_history + [retrieve_call()]}
        with pytest.raises(ContractViolation, match="Expected"):
            check_relevance(state)


class TestRouteAfterGrade:
    def test_relevant_goes_to_generate(self, retrieved_history):
        route = make_route_after_grade(max_rewrites=3)
        state = {"messages": retrieved_history + [grade_call("sim")], "rewrite_count": 0}
        assert route(state) == "generate"

    def test_irrelevant_goes_to_rewrite_under_cap(self, retrieved_history):
        route = make_route_after_grade(max_rewrites=3)
        state = {"messages": retrieved_history + [grade_call("não")], "rewrite_count": 2}
        assert route(state) == "rewrite"

    def test_irrelevant_goes_to_generate_at_cap(self, retrieved_history):
        route = make_route_after_grade(max_rewrites=3)
        state = {"messages": retrieved_history + [grade_call("não")], "rewrite_count": 3}
        assert route(state) == "generate"

    def test_zero_cap_never_rewrites(self, retrieved_history):
        route = make_route_after_grade(max_rewrites=0)
        state = {"messages": retrieved_history + [grade_call("não")]}
        assert route(state) == "generate"

    def test_no_cap_always_rewrites(self, retrieved_history):
        route = make_route_after_grade(max_rewrites=None)
        state = {"messages": retrieved_history + [grade_call("não")], "rewrite_count": 1000}
        assert route(state) == "rewrite"

    def test_violation_propagates(self, retrieved_history):
        route = make_route_after_grade(max_rewrites=3)
        with pytest.raises(ContractViolation):
            route({"messages": retrieved_history})
