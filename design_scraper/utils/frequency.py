from typing import Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar


T = TypeVar("T", bound=Hashable)


class FrequencyTable(Generic[T]):
    """
    Occurrence counter that remembers first-seen order.

    Ranking is stable: values with equal counts keep the order in which
    they were first observed.
    """

    def __init__(self, observations: Optional[Iterable[Optional[T]]] = None):
        self._counts: Dict[T, int] = {}
        if observations is not None:
            self.update(observations)

    def observe(self, value: Optional[T]) -> None:
        """Count one occurrence; absent and empty values are discarded."""
        if value is None or value == "":
            return
        self._counts[value] = self._counts.get(value, 0) + 1

    def update(self, observations: Iterable[Optional[T]]) -> None:
        for value in observations:
            self.observe(value)

    def count(self, value: T) -> int:
        return self._counts.get(value, 0)

    def rank(self, limit: Optional[int] = None) -> List[Tuple[T, int]]:
        """Return (value, count) pairs by descending count."""
        # sorted() is stable and dicts iterate in insertion order
        ranked = sorted(self._counts.items(), key=lambda item: -item[1])
        return ranked if limit is None else ranked[:limit]

    def most_common(self, default: Optional[T] = None) -> Optional[T]:
        ranked = self.rank(limit=1)
        return ranked[0][0] if ranked else default

    def __len__(self) -> int:
        return len(self._counts)

    def __bool__(self) -> bool:
        return bool(self._counts)

    def __contains__(self, value: object) -> bool:
        return value in self._counts

    def __repr__(self) -> str:
        return f"FrequencyTable({self._counts!r})"


def rank(observations: Iterable[Optional[T]], limit: Optional[int] = None) -> List[Tuple[T, int]]:
    """Rank a sequence of observations by frequency, stable on ties."""
    return FrequencyTable(observations).rank(limit)
