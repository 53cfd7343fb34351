# src/blog_rag/graph.py
from __future__ import annotations

from typing import Optional

from langgraph.graph import END, START, StateGraph
from langgraph.types import RetryPolicy

from blog_rag.constants import (
    AGENT_NODE,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_REWRITES,
    GENERATE_NODE,
    GRADE_NODE,
    RETRIEVE_NODE,
    REWRITE_NODE,
)
from blog_rag.errors import ExternalServiceError
from blog_rag.nodes.agent import make_agent_node
from blog_rag.nodes.generate import make_generate_node
from blog_rag.nodes.grade_documents import make_grade_documents_node
from blog_rag.nodes.retrieve import make_retrieve_node
from blog_rag.nodes.rewrite import make_rewrite_node
from blog_rag.retrieval.adapters import RetrievalService
from blog_rag.routing import make_route_after_grade, should_retrieve
from blog_rag.state import ConversationState

# agent, retrieve, grade_documents and rewrite/generate run once per pass
STEPS_PER_PASS = 4


def recursion_limit_for(max_rewrites: int) -> int:
    """Superstep budget for a run with at most `max_rewrites` rewrites."""
    return STEPS_PER_PASS * (max_rewrites + 1) + 1


def make_conversation_graph(
    llm,
    *,
    retrieval: RetrievalService,
    max_rewrites: Optional[int] = DEFAULT_MAX_REWRITES,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
):
    """Create the agent -> retrieve -> grade -> generate/rewrite graph.

    Only ExternalServiceError is retried, and only when max_attempts > 1;
    contract violations always abort the run.
    """
    retry_policy = RetryPolicy(max_attempts=max(1, int(max_attempts)), retry_on=ExternalServiceError)

    g = StateGraph(ConversationState)

    g.add_node(AGENT_NODE, make_agent_node(llm), retry_policy=retry_policy)
    g.add_node(RETRIEVE_NODE, make_retrieve_node(retrieval), retry_policy=retry_policy)
    g.add_node(GRADE_NODE, make_grade_documents_node(llm), retry_policy=retry_policy)
    g.add_node(REWRITE_NODE, make_rewrite_node(llm), retry_policy=retry_policy)
    g.add_node(GENERATE_NODE, make_generate_node(llm), retry_policy=retry_policy)

    g.add_edge(START, AGENT_NODE)
    g.add_conditional_edges(AGENT_NODE, should_retrieve, [RETRIEVE_NODE, END])
    g.add_edge(RETRIEVE_NODE, GRADE_NODE)
    g.add_conditional_edges(GRADE_NODE, make_route_after_grade(max_rewrites), [GENERATE_NODE, REWRITE_NODE])
    g.add_edge(REWRITE_NODE, AGENT_NODE)
    g.add_edge(GENERATE_NODE, END)

    return g.compile()
