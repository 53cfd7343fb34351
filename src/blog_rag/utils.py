# src/blog_rag/utils.py
"""Utilities for graph nodes: tracing and error handling."""

import functools
import logging
import os
from typing import Any, Callable, Dict

from blog_rag.errors import BlogRagError, ExternalServiceError

OBSERVE_ENABLED = os.getenv("LANGFUSE_ENABLED", "1") == "1"

if OBSERVE_ENABLED:
    from langfuse import observe
else:

    def observe(fn=None, **kwargs):
        def _wrap(f):
            return f

        return _wrap(fn) if fn else _wrap


def with_error_handling(node_name: str) -> Callable:
    """Decorator giving nodes consistent logging and failure semantics.

    Errors from this package (contract violations) propagate unchanged. Any
    other exception comes from an external service call and is re-raised as
    ExternalServiceError chained to the original, so the run aborts with a
    single error type the retry policy can select on.

    Example:
        @with_error_handling("retrieve")
        def retrieve(state: ConversationState) -> Dict[str, Any]:
            ...
            return {"messages": [tool_message]}
    """

    def decorator(func: Callable) -> Callable:
        logger = logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(state: Dict[str, Any]) -> Dict[str, Any]:
            logger.debug(f"Starting {node_name}")
            try:
                result = func(state)
            except BlogRagError:
                logger.exception(f"Contract error in {node_name}")
                raise
            except Exception as e:
                logger.exception(f"Error in {node_name}: {e}")
                raise ExternalServiceError(node_name, str(e), exception_type=type(e).__name__) from e
            logger.debug(f"Completed {node_name}: {len(result)} fields returned")
            return result

        return wrapper

    return decorator
