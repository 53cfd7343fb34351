"""Retrieval service and index construction for the blog corpus."""

from blog_rag.retrieval.adapters import RetrievalService, VectorStoreRetrievalService
from blog_rag.retrieval.index import abuild_retrieval_service, build_retrieval_service

__all__ = [
    "RetrievalService",
    "VectorStoreRetrievalService",
    "build_retrieval_service",
    "abuild_retrieval_service",
]
