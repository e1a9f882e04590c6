"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits page text into bounded, overlapping chunks. Boundaries are tried from
largest to smallest (paragraph, line, sentence, word, character), so the
splitter always terminates, even on a single giant token.

Separators stay attached to the end of the piece they close and whitespace is
never stripped: every chunk is an exact substring of the input, which keeps
``start_index`` exact and lets the chunks reconstruct the text.

Dependencies: langchain_text_splitters, langchain_core
System role: First stage of document ingestion pipeline
"""

from typing import Any

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

DEFAULT_SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


class ChunkingTask:
    """Split page text into overlapping chunks of bounded length."""

    def __init__(
        self,
        chunk_size: int = 800,
        chunk_overlap: int = 100,
        separators: list[str] | None = None,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            separators: Boundaries to try, largest first (must end with "")

        Raises:
            ValueError: When chunk_overlap is not smaller than chunk_size
        """
        if chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=separators or DEFAULT_SEPARATORS,
            keep_separator="end",
            strip_whitespace=False,
            add_start_index=True,
            length_function=len,
        )

    def split(self, text: str) -> list[str]:
        """
        Split text into ordered chunk strings.

        Args:
            text: Normalized page text

        Returns:
            list[str]: Chunks in document order (empty for empty text)
        """
        if not text:
            return []
        return self._splitter.split_text(text)

    def split_documents(self, text: str, metadata: dict[str, Any] | None = None) -> list[Document]:
        """
        Split text into LangChain Documents carrying positional metadata.

        Each chunk receives a copy of ``metadata`` plus ``start_index``
        (character offset in ``text``) and ``chunk_index`` (ordinal).

        Args:
            text: Normalized page text
            metadata: Fields shared by every chunk

        Returns:
            list[Document]: Chunked documents in order
        """
        if not text:
            return []

        documents = self._splitter.create_documents([text], metadatas=[dict(metadata or {})])
        for index, document in enumerate(documents):
            document.metadata["chunk_index"] = index
        return documents
