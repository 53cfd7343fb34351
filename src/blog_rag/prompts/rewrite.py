# src/blog_rag/prompts/rewrite.py
REWRITE_PROMPT = """Observe a pergunta abaixo e raciocine sobre a intenção e o significado semântico por trás dela.

Pergunta inicial:
\n ------- \n
{question}
\n ------- \n

Formule uma pergunta aprimorada. Responda somente com a nova pergunta."""

REWRITE_PROMPT_VERSION = "1.0"
