# src/blog_rag/state.py
from __future__ import annotations

from typing import Annotated, Any, List, Optional

from typing_extensions import TypedDict


def append_messages(left: Optional[List[Any]], right: Any) -> List[Any]:
    """Reducer for the history channel: plain concatenation.

    Unlike langgraph's add_messages it never matches on message ids, so a
    provider that reuses a response id cannot overwrite earlier turns.
    """
    new = right if isinstance(right, list) else [right]
    return list(left or []) + list(new)


class ConversationState(TypedDict, total=False):
    """State owned by a single conversation run.

    messages is append-only: every node returns the messages it adds and
    append_messages concatenates them to the history.
    """

    messages: Annotated[list, append_messages]

    # Number of rewrite steps taken so far in this run
    rewrite_count: int
