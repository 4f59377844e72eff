"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from tipsdoc.domain.entities import SourceDocument


class ArticleRepository(ABC):
    """Port for reading article sources — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_documents(self) -> list[SourceDocument]:
        """Return every article source, ordered by name.

        Sources that could not be read carry their ``error`` instead of text.
        """
        ...
