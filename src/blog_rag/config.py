# src/blog_rag/config.py
"""Typed settings read from the environment.

Scripts call load_dotenv() before building Settings; the package itself never
reads .env files.
"""

from __future__ import annotations

import os
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from blog_rag.constants import (
    DEFAULT_BLOG_URLS,
    DEFAULT_CHAT_MODEL,
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_REWRITES,
    DEFAULT_RETRIEVAL_K,
)

# Values of BLOG_RAG_MAX_REWRITES that disable the rewrite cap
UNBOUNDED = {"none", "off", "unbounded"}


def _env(name: str) -> Optional[str]:
    v = os.getenv(name)
    return v.strip() if v and v.strip() else None


def _env_int(name: str, default: int) -> int:
    v = _env(name)
    return int(v) if v is not None else default


def _env_urls() -> Tuple[str, ...]:
    v = _env("BLOG_RAG_URLS")
    if v is None:
        return DEFAULT_BLOG_URLS
    return tuple(u.strip() for u in v.split(",") if u.strip())


def _env_max_rewrites() -> Optional[int]:
    v = _env("BLOG_RAG_MAX_REWRITES")
    if v is None:
        return DEFAULT_MAX_REWRITES
    if v.lower() in UNBOUNDED:
        return None
    return int(v)


class Settings(BaseModel):
    # Env-derived defaults are validated like explicit values
    model_config = ConfigDict(validate_default=True)

    chat_model: str = Field(default_factory=lambda: _env("BLOG_RAG_CHAT_MODEL") or DEFAULT_CHAT_MODEL)
    embedding_model: str = Field(default_factory=lambda: _env("BLOG_RAG_EMBEDDING_MODEL") or DEFAULT_EMBEDDING_MODEL)
    blog_urls: List[str] = Field(default_factory=lambda: list(_env_urls()))
    chunk_size: int = Field(default_factory=lambda: _env_int("BLOG_RAG_CHUNK_SIZE", DEFAULT_CHUNK_SIZE), gt=0)
    chunk_overlap: int = Field(default_factory=lambda: _env_int("BLOG_RAG_CHUNK_OVERLAP", DEFAULT_CHUNK_OVERLAP), ge=0)
    retrieval_k: int = Field(default_factory=lambda: _env_int("BLOG_RAG_RETRIEVAL_K", DEFAULT_RETRIEVAL_K), gt=0)
    max_rewrites: Optional[int] = Field(default_factory=_env_max_rewrites, ge=0)
    max_attempts: int = Field(default_factory=lambda: _env_int("BLOG_RAG_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS), ge=1)

    @field_validator("blog_urls")
    @classmethod
    def _require_urls(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("at least one blog URL is required")
        return v

    @model_validator(mode="after")
    def _overlap_smaller_than_chunk(self) -> "Settings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self

    def with_overrides(self, **updates) -> "Settings":
        """Copy with `updates` applied, re-running field and model validation."""
        return Settings.model_validate({**self.model_dump(), **updates})


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
