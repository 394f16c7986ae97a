"""Registry of weighted searchable fields."""

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

import structlog

ItemT = TypeVar("ItemT")

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SearchField(Generic[ItemT]):
    """Projects an item to an optional string and weights its score."""

    extractor: Callable[[ItemT], Optional[str]]
    weight: float = 1.0

    def extract(self, item: ItemT) -> Optional[str]:
        """Return the field value for an item."""
        return self.extractor(item)


class FieldRegistry(Generic[ItemT]):
    """Ordered collection of search fields.

    Weights are not validated: zero suppresses a field and a negative weight
    inverts its contribution.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._fields: List[SearchField[ItemT]] = []

    def add(self, extractor: Callable[[ItemT], Optional[str]], weight: float = 1.0) -> SearchField[ItemT]:
        """
        Register a field.

        Args:
            extractor: Callable mapping an item to an optional string
            weight: Multiplier applied to the field score

        Returns:
            The registered SearchField

        Raises:
            TypeError: If extractor is None or not callable
        """
        if extractor is None or not callable(extractor):
            raise TypeError("Field extractor must be a callable, got %r" % (extractor,))

        field = SearchField(extractor=extractor, weight=float(weight))
        self._fields.append(field)

        logger.debug(
            "Search field registered",
            extractor=getattr(extractor, "__name__", repr(extractor)),
            weight=field.weight,
            position=len(self._fields) - 1,
        )
        return field

    @property
    def fields(self) -> Tuple[SearchField[ItemT], ...]:
        """Registered fields in registration order."""
        return tuple(self._fields)

    def __iter__(self) -> Iterator[SearchField[ItemT]]:
        return iter(tuple(self._fields))

    def __len__(self) -> int:
        return len(self._fields)
