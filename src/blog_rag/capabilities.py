# src/blog_rag/capabilities.py
"""Tool capabilities the model may invoke.

The set is closed: each capability is a pydantic model whose JSON schema is
bound to the chat model as a tool, and every invocation coming back from the
model is validated against it before use.
"""

from __future__ import annotations

from typing import Any, Dict, Type

from langchain_core.messages import ToolCall
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from blog_rag.constants import AFFIRMATIVE_SCORE, NEGATIVE_SCORE
from blog_rag.errors import ContractViolation

RETRIEVE_TOOL_NAME = "retrieve_blog_posts"
GRADE_TOOL_NAME = "give_relevance_score"


class RetrieveBlogPosts(BaseModel):
    """Pesquise e retorne informações sobre os posts do blog de Lilian Weng sobre agentes LLM, engenharia de prompts e ataques adversários em LLMs."""

    model_config = ConfigDict(title="retrieve_blog_posts")

    query: str = Field(..., min_length=1, description="Consulta de busca nos posts do blog.")


class GiveRelevanceScore(BaseModel):
    """Dê uma pontuação de relevância aos documentos recuperados."""

    model_config = ConfigDict(title="give_relevance_score")

    binary_score: str = Field(
        ..., description=f"Pontuação de relevância '{AFFIRMATIVE_SCORE}' ou '{NEGATIVE_SCORE}'"
    )


CAPABILITIES: Dict[str, Type[BaseModel]] = {
    RETRIEVE_TOOL_NAME: RetrieveBlogPosts,
    GRADE_TOOL_NAME: GiveRelevanceScore,
}


def capability_for(name: str, *, node: str) -> Type[BaseModel]:
    try:
        return CAPABILITIES[name]
    except KeyError:
        raise ContractViolation(node, f"Model invoked unknown capability {name!r}.") from None


def parse_invocation(call: ToolCall, *, node: str, expected: str) -> BaseModel:
    """Validate a tool invocation against the capability it must name.

    Raises ContractViolation when the invocation names an unknown capability,
    a capability other than `expected`, or carries arguments that fail the
    capability schema.
    """
    name = call.get("name", "")
    schema = capability_for(name, node=node)
    if name != expected:
        raise ContractViolation(node, f"Expected an invocation of {expected!r}, got {name!r}.")

    args: Dict[str, Any] = call.get("args") or {}
    try:
        return schema.model_validate(args)
    except ValidationError as e:
        raise ContractViolation(node, f"Invalid arguments for {name!r}: {e.errors()}") from e
