# src/blog_rag/controller.py
"""Run entry point: one question in, final conversation history out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Callable, Dict, Iterator, List, Optional, Tuple

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from blog_rag.config import Settings, get_settings
from blog_rag.constants import DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_REWRITES
from blog_rag.graph import make_conversation_graph, recursion_limit_for
from blog_rag.retrieval.adapters import RetrievalService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepEvent:
    """What a node appended to the history, reported as the run progresses."""

    node: str
    message_type: str
    content: Any
    tool_calls: List[Dict[str, Any]] = field(default_factory=list)


StepObserver = Callable[[StepEvent], None]


def _to_events(chunk: Dict[str, Any]) -> List[StepEvent]:
    events: List[StepEvent] = []
    for node, update in chunk.items():
        if not isinstance(update, dict):
            continue
        messages = update.get("messages") or []
        if not messages:
            continue
        last: BaseMessage = messages[-1]
        tool_calls = list(last.tool_calls) if isinstance(last, AIMessage) else []
        events.append(StepEvent(node=node, message_type=last.type, content=last.content, tool_calls=tool_calls))
    return events


class ConversationController:
    """Drives the conversation graph for one question at a time.

    The retrieval service is built beforehand and injected; the controller
    keeps no per-run state, so concurrent runs may share an instance.
    """

    def __init__(
        self,
        llm,
        *,
        retrieval: RetrievalService,
        max_rewrites: Optional[int] = DEFAULT_MAX_REWRITES,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self.max_rewrites = max_rewrites
        self.graph = make_conversation_graph(
            llm,
            retrieval=retrieval,
            max_rewrites=max_rewrites,
            max_attempts=max_attempts,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        retrieval: RetrievalService,
        llm=None,
    ) -> "ConversationController":
        settings = settings or get_settings()
        if llm is None:
            from blog_rag.model import get_default_model

            llm = get_default_model(settings)
        return cls(
            llm,
            retrieval=retrieval,
            max_rewrites=settings.max_rewrites,
            max_attempts=settings.max_attempts,
        )

    def _prepare(self, question: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        if not isinstance(question, str) or not question.strip():
            raise ValueError("question must be a non-empty string")

        inputs = {"messages": [HumanMessage(content=question)], "rewrite_count": 0}
        config: Dict[str, Any] = {}
        if self.max_rewrites is not None:
            config["recursion_limit"] = recursion_limit_for(self.max_rewrites)
        return inputs, config

    def stream(self, question: str) -> Iterator[StepEvent]:
        inputs, config = self._prepare(question)
        for chunk in self.graph.stream(inputs, config, stream_mode="updates"):
            yield from _to_events(chunk)

    async def astream(self, question: str) -> AsyncIterator[StepEvent]:
        inputs, config = self._prepare(question)
        async for chunk in self.graph.astream(inputs, config, stream_mode="updates"):
            for event in _to_events(chunk):
                yield event

    def run(self, question: str, *, on_step: Optional[StepObserver] = None) -> List[BaseMessage]:
        """Answer `question` and return the full history; the answer is the last message.

        Any failure propagates and no answer is produced.
        """
        inputs, config = self._prepare(question)
        history: List[BaseMessage] = []

        for mode, chunk in self.graph.stream(inputs, config, stream_mode=["updates", "values"]):
            if mode == "values":
                history = list(chunk.get("messages") or [])
            elif on_step is not None:
                for event in _to_events(chunk):
                    on_step(event)

        logger.info(f"Run finished with {len(history)} messages")
        return history

    async def arun(self, question: str, *, on_step: Optional[StepObserver] = None) -> List[BaseMessage]:
        inputs, config = self._prepare(question)
        history: List[BaseMessage] = []

        async for mode, chunk in self.graph.astream(inputs, config, stream_mode=["updates", "values"]):
            if mode == "values":
                history = list(chunk.get("messages") or [])
            elif on_step is not None:
                for event in _to_events(chunk):
                    on_step(event)

        logger.info(f"Run finished with {len(history)} messages")
        return history
