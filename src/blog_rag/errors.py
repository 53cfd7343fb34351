# src/blog_rag/errors.py
"""Error taxonomy for conversation runs.

Every error aborts the run; nothing here is recovered from inside the graph.
"""

from __future__ import annotations

from typing import Optional


class BlogRagError(Exception):
    """Base class for all errors raised by this package."""


class ContractViolation(BlogRagError):
    """The graph reached a state its invariants forbid.

    Raised when a step runs without the messages it depends on, or when the
    model returns a tool invocation that does not match a known capability.
    """

    def __init__(self, node: str, message: str):
        self.node = node
        super().__init__(f"[{node}] {message}")


class ExternalServiceError(BlogRagError):
    """The language model or retrieval service failed during a step."""

    def __init__(self, node: str, message: str, *, exception_type: Optional[str] = None):
        self.node = node
        self.exception_type = exception_type
        super().__init__(f"[{node}] {message}")


class IndexBuildError(BlogRagError):
    """The retrieval index could not be built from the configured sources."""
