"""Anti-corruption layer ports - keeping foreign models out of the domain."""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

TSource = TypeVar('TSource')
TDestination = TypeVar('TDestination')
TKey = TypeVar('TKey')


class AntiCorruptionTranslator(ABC, Generic[TSource, TDestination]):
    """Translates an object of a foreign model into the local model."""

    @abstractmethod
    def translate(self, source: TSource) -> TDestination:
        """Translate ``source`` into its local counterpart."""

    def translate_all(self, sources: List[TSource]) -> List[TDestination]:
        return [self.translate(source) for source in sources]


class AntiCorruptionAdapter(ABC, Generic[TSource, TDestination, TKey]):
    """Port for reaching records owned by another system through local types.

    Implementations talk to the foreign system and hand back local objects,
    usually with the help of an AntiCorruptionTranslator.
    """

    @abstractmethod
    def get(self, key: TKey) -> TDestination:
        """Get the record with the given key."""

    @abstractmethod
    def get_all(self) -> List[TDestination]:
        """Get every record."""

    @abstractmethod
    def add(self, entity: TSource) -> TDestination:
        """Add a record and return it as seen by the local model."""

    @abstractmethod
    def update(self, key: TKey, entity: TSource) -> None:
        """Replace the record with the given key."""

    @abstractmethod
    def delete(self, key: TKey) -> None:
        """Delete the record with the given key."""
