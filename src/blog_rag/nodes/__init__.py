"""Conversation graph nodes."""

from blog_rag.nodes.agent import make_agent_node
from blog_rag.nodes.generate import make_generate_node
from blog_rag.nodes.grade_documents import make_grade_documents_node
from blog_rag.nodes.retrieve import make_retrieve_node
from blog_rag.nodes.rewrite import make_rewrite_node

__all__ = [
    "make_agent_node",
    "make_retrieve_node",
    "make_grade_documents_node",
    "make_rewrite_node",
    "make_generate_node",
]
