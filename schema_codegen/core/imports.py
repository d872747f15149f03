"""
Per-unit import tracking.

Every generated source unit owns one ImportSet. Paths keep their
insertion order and are recorded only once.
"""

from typing import Iterable, Iterator, List, Mapping, Sequence, Union

from ..logging_config import get_logger

logger = get_logger(__name__)

Substitution = Union[str, Sequence[str]]


class ImportSet:
    """Insertion ordered, duplicate free collection of import paths."""

    def __init__(self, paths: Iterable[str] = ()):
        self._paths: List[str] = []
        for path in paths:
            self.add(path)

    def add(self, path: str) -> bool:
        """
        Record an import path.

        Returns:
            True if the path was new, False if it was already present.
        """
        if path in self._paths:
            return False
        self._paths.append(path)
        return True

    def update(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.add(path)

    def discard_prefix(self, prefix: str) -> List[str]:
        """Drop every path starting with ``prefix`` and return the dropped ones."""
        if not prefix:
            return []
        dropped = [p for p in self._paths if p.startswith(prefix)]
        if dropped:
            self._paths = [p for p in self._paths if not p.startswith(prefix)]
            logger.debug("Dropped model package imports: %s", dropped)
        return dropped

    def expanded(self, substitutions: Mapping[str, Substitution]) -> "ImportSet":
        """
        Apply the substitution table.

        A path found in the table is replaced, at its position, by the
        mapped path or paths. The result is a new ImportSet, still free
        of duplicates.
        """
        result = ImportSet()
        for path in self._paths:
            if path not in substitutions:
                result.add(path)
                continue

            replacement = substitutions[path]
            if isinstance(replacement, str):
                replacement = (replacement,)
            logger.debug("Import %s substituted by %s", path, list(replacement))
            result.update(replacement)
        return result

    def to_list(self) -> List[str]:
        return list(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ImportSet):
            return self._paths == other._paths
        return NotImplemented

    def __repr__(self) -> str:
        return f"ImportSet({self._paths!r})"
