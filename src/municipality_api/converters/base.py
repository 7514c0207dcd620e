"""
Generic converter interfaces between wire DTOs and ORM entities.

Type Parameters:
    DI: input DTO (request body)
    DO: output DTO (response body)
    E:  entity (ORM model)

Implementations only provide the single-item methods; the collection helpers
are derived from them.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

DI = TypeVar("DI")
DO = TypeVar("DO")
E = TypeVar("E")


class Converter(ABC, Generic[DI, DO, E]):
    """Entity -> output DTO and input DTO -> entity."""

    @abstractmethod
    def to_dto(self, entity: E) -> DO:
        ...

    @abstractmethod
    def to_entity(self, model: DI) -> E:
        ...

    def to_dtos(self, entities: Iterable[E]) -> list[DO]:
        return [self.to_dto(entity) for entity in entities]

    def to_entities(self, models: Iterable[DI]) -> list[E]:
        return [self.to_entity(model) for model in models]


class SaveConverter(ABC, Generic[DI, DO, E]):
    """
    Converter for write operations, where the output DTO is built from a
    result message (e.g. "municipality creation is ok") instead of an entity.
    """

    @abstractmethod
    def to_dto(self, message: str) -> DO:
        ...

    @abstractmethod
    def to_entity(self, model: DI) -> E:
        ...

    def to_dtos(self, messages: Iterable[str]) -> list[DO]:
        return [self.to_dto(message) for message in messages]

    def to_entities(self, models: Iterable[DI]) -> list[E]:
        return [self.to_entity(model) for model in models]
