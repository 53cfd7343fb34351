# src/blog_rag/constants.py
"""Defaults for indexing and the conversation graph.

These can be overridden through environment variables, see blog_rag.config.
"""

# Sources indexed by default
DEFAULT_BLOG_URLS = (
    "https://lilianweng.github.io/posts/2023-06-23-agent/",
    "https://lilianweng.github.io/posts/2023-03-15-prompt-engineering/",
    "https://lilianweng.github.io/posts/2023-10-25-adv-attack-llm/",
)

# Chunking
DEFAULT_CHUNK_SIZE = 500
DEFAULT_CHUNK_OVERLAP = 50

# Retrieval
DEFAULT_RETRIEVAL_K = 4  # passages returned per search
PASSAGE_SEPARATOR = "\n\n"

# Models
DEFAULT_CHAT_MODEL = "google_genai:gemini-2.5-pro"
DEFAULT_EMBEDDING_MODEL = "models/gemini-embedding-001"

# Conversation loop
DEFAULT_MAX_REWRITES = 3  # rewrite -> agent cycles before answering best-effort
DEFAULT_MAX_ATTEMPTS = 1  # attempts per external call; 1 disables retries

# Relevance grading vocabulary
AFFIRMATIVE_SCORE = "sim"
NEGATIVE_SCORE = "não"

# Graph node names
AGENT_NODE = "agent"
RETRIEVE_NODE = "retrieve"
GRADE_NODE = "grade_documents"
REWRITE_NODE = "rewrite"
GENERATE_NODE = "generate"

DEFAULT_QUESTION = "Quais são os tipos de memória de agente com base no post do blog de Lilian Weng?"
