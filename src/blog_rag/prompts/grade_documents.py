# src/blog_rag/prompts/grade_documents.py
GRADE_DOCUMENTS_PROMPT = """Você é um avaliador que analisa a relevância de documentos recuperados para a pergunta de um usuário.

Documentos recuperados:
\n ------- \n
{context}
\n ------- \n

Pergunta do usuário: {question}

Se o conteúdo dos documentos tratar do assunto da pergunta, classifique-os como relevantes.
Responda chamando a ferramenta com uma pontuação binária 'sim' ou 'não':
- sim: os documentos são relevantes para a pergunta.
- não: os documentos não são relevantes para a pergunta.
"""

GRADE_DOCUMENTS_PROMPT_VERSION = "1.0"
