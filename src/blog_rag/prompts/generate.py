# src/blog_rag/prompts/generate.py
GENERATE_PROMPT = """Você é um assistente que responde perguntas com base no contexto fornecido.

Contexto:
{context}

Pergunta: {question}

Responda usando apenas o contexto fornecido. Se o contexto não tiver informações suficientes para responder, diga que não tem informações suficientes."""

GENERATE_PROMPT_VERSION = "1.0"
