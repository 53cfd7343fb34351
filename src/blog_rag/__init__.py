"""Agentic RAG over a fixed set of blog posts using LangGraph.

The conversation graph drives one question to an answer:
- agent: decide whether to answer directly or call the retrieval tool
- retrieve: search the blog index
- grade_documents: score the retrieved passages for relevance
- rewrite: reformulate the question when passages are not relevant
- generate: answer from the retrieved passages
"""

__version__ = "0.1.0"
