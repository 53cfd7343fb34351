# src/blog_rag/retrieval/adapters.py

from __future__ import annotations

import logging
from typing import List, Protocol

from langchain_core.retrievers import BaseRetriever

logger = logging.getLogger(__name__)


class RetrievalService(Protocol):
    """Search backend consumed by the retrieve node.

    Implementations return passage texts in relevance order. The list may be
    empty and has no upper bound on length.

    Example implementation over a plain keyword index:

        class KeywordRetrievalService:
            def __init__(self, passages):
                self.passages = passages

            def search(self, *, query):
                terms = query.lower().split()
                return [p for p in self.passages if any(t in p.lower() for t in terms)]
    """

    def search(self, *, query: str) -> List[str]:
        raise NotImplementedError


class VectorStoreRetrievalService:
    """RetrievalService over a LangChain retriever (e.g. InMemoryVectorStore.as_retriever()).

    The wrapped retriever is only read after construction, so one instance can
    be shared by concurrent runs.
    """

    def __init__(self, retriever: BaseRetriever):
        self.retriever = retriever

    def search(self, *, query: str) -> List[str]:
        docs = self.retriever.invoke(query)
        logger.info(f"Vector search returned {len(docs)} passages")
        return [d.page_content for d in docs]
