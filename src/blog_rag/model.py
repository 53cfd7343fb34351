# src/blog_rag/model.py

import logging
from typing import Optional

from langchain.chat_models import init_chat_model
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from blog_rag.config import Settings, get_settings

logger = logging.getLogger(__name__)


def get_default_model(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    logger.info(f"Using chat model {settings.chat_model}")
    model = init_chat_model(
        model=settings.chat_model,
        temperature=0.0,
    )
    return model


def get_default_embeddings(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    return GoogleGenerativeAIEmbeddings(model=settings.embedding_model)
