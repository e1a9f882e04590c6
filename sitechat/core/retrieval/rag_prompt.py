"""
Grounded answer prompt.

Dependencies: langchain_core.prompts
System role: Prompt template for website Q&A
"""

from langchain_core.prompts import PromptTemplate

NO_MATCH_ANSWER = (
    "I couldn't find any relevant information in the knowledge base to answer that question."
)

CONTEXT_SEPARATOR = "\n\n"

RAG_PROMPT_TEMPLATE = """You are a helpful AI assistant specialized in answering questions about a website's content.
Using the following context retrieved from the website, please answer the user's question accurately and concisely.
If the context doesn't contain the information needed to answer, honestly say you don't know based on the provided content.

Context:
{context}

Question:
{question}

Answer:"""

RAG_PROMPT = PromptTemplate.from_template(RAG_PROMPT_TEMPLATE)


def build_context(chunks: list[str]) -> str:
    """Join retrieved chunk texts, best match first."""
    return CONTEXT_SEPARATOR.join(chunks)


def build_prompt(context: str, question: str) -> str:
    """Render the grounded answer prompt."""
    return RAG_PROMPT.format(context=context, question=question)
