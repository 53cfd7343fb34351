"""Prompts for conversation graph nodes."""

from blog_rag.prompts.generate import GENERATE_PROMPT, GENERATE_PROMPT_VERSION
from blog_rag.prompts.grade_documents import GRADE_DOCUMENTS_PROMPT, GRADE_DOCUMENTS_PROMPT_VERSION
from blog_rag.prompts.rewrite import REWRITE_PROMPT, REWRITE_PROMPT_VERSION

__all__ = [
    "GRADE_DOCUMENTS_PROMPT",
    "GRADE_DOCUMENTS_PROMPT_VERSION",
    "REWRITE_PROMPT",
    "REWRITE_PROMPT_VERSION",
    "GENERATE_PROMPT",
    "GENERATE_PROMPT_VERSION",
]
