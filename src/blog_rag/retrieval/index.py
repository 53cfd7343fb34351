# src/blog_rag/retrieval/index.py
"""Build the blog index: load pages, split into chunks, embed into an in-memory store.

Building is a separate phase from answering questions. Call
build_retrieval_service (or abuild_retrieval_service) once at startup and
inject the result into the controller.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from langchain_community.document_loaders import WebBaseLoader
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore
from langchain_text_splitters import RecursiveCharacterTextSplitter

from blog_rag.config import Settings, get_settings
from blog_rag.errors import IndexBuildError
from blog_rag.retrieval.adapters import VectorStoreRetrievalService

logger = logging.getLogger(__name__)


def load_documents(urls: Sequence[str]) -> List[Document]:
    loader = WebBaseLoader(web_paths=list(urls))
    docs = loader.load()
    logger.info(f"Loaded {len(docs)} documents from {len(urls)} URLs")
    return docs


def split_documents(docs: Sequence[Document], *, chunk_size: int, chunk_overlap: int) -> List[Document]:
    splitter = RecursiveCharacterTextSplitter(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
    chunks = splitter.split_documents(list(docs))
    logger.info(f"Split {len(docs)} documents into {len(chunks)} chunks")
    return chunks


def build_vector_store(chunks: Sequence[Document], embeddings: Embeddings) -> InMemoryVectorStore:
    if not chunks:
        raise IndexBuildError("No chunks to index; check the configured blog URLs.")
    return InMemoryVectorStore.from_documents(list(chunks), embeddings)


def build_retrieval_service(
    settings: Optional[Settings] = None,
    *,
    embeddings: Optional[Embeddings] = None,
    docs: Optional[Sequence[Document]] = None,
) -> VectorStoreRetrievalService:
    """Load, split and embed the blog posts and wrap the store as a RetrievalService.

    `docs` skips the web loader (useful for tests and offline corpora).
    `embeddings` defaults to the configured Google embeddings model.
    """
    settings = settings or get_settings()
    if embeddings is None:
        from blog_rag.model import get_default_embeddings

        embeddings = get_default_embeddings(settings)

    if docs is None:
        docs = load_documents(settings.blog_urls)
    if not docs:
        raise IndexBuildError(f"No documents loaded from {settings.blog_urls}")

    chunks = split_documents(docs, chunk_size=settings.chunk_size, chunk_overlap=settings.chunk_overlap)
    store = build_vector_store(chunks, embeddings)
    retriever = store.as_retriever(search_kwargs={"k": settings.retrieval_k})

    logger.info(f"Index ready: {len(chunks)} chunks, k={settings.retrieval_k}")
    return VectorStoreRetrievalService(retriever)


async def abuild_retrieval_service(
    settings: Optional[Settings] = None,
    *,
    embeddings: Optional[Embeddings] = None,
    docs: Optional[Sequence[Document]] = None,
) -> VectorStoreRetrievalService:
    """Async initialization phase; runs the blocking build in a worker thread."""
    return await asyncio.to_thread(build_retrieval_service, settings, embeddings=embeddings, docs=docs)
