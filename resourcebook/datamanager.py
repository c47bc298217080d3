"""In-memory resource records backed by a record file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .csvparser import CsvWriteError, PathType, parse_csv_file, write_csv_file

DATABASE_NAME = "misDatos.csv"


@dataclass
class Resource:
    """A named resource with a link and a type."""

    name: str
    link: str = ""
    type: str = ""

    @classmethod
    def from_fields(cls, fields: Iterable[str]) -> "Resource":
        """Build a resource from the first three fields; missing ones are empty."""
        values = list(fields)[:3]
        values += [""] * (3 - len(values))
        return cls(*values)

    def to_fields(self) -> list[str]:
        """Return the fields in file order."""
        return [self.name, self.link, self.type]


class ResourceNotFoundError(LookupError):
    """Raised when no resource has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"resource not found: {name}")
        self.name = name


class DatabaseSaveError(OSError):
    """Raised when the records cannot be written back to the file."""


class ResourceDatabase:
    """An ordered collection of resources stored in a record file."""

    def __init__(self, path: PathType = DATABASE_NAME) -> None:
        self.path = Path(path)
        self._resources: list[Resource] = []

    def exists(self) -> bool:
        """Return whether the backing file can be opened for reading."""
        try:
            with open(self.path, encoding="utf-8"):
                return True
        except OSError:
            return False

    def load(self) -> int:
        """Append the records of the backing file; return how many were read."""
        loaded = [Resource.from_fields(row) for row in parse_csv_file(self.path)]
        self._resources.extend(loaded)
        return len(loaded)

    def find(self, name: str) -> Optional[Resource]:
        """Return the first resource with this name, or None."""
        return next((r for r in self._resources if r.name == name), None)

    def __contains__(self, name: object) -> bool:
        return any(r.name == name for r in self._resources)

    def add(self, resource: Resource) -> None:
        """Append a resource; names are not required to be unique."""
        self._resources.append(
            Resource(resource.name, resource.link, resource.type)
        )

    def delete(self, name: str) -> Resource:
        """Remove and return the first resource with this name."""
        for index, resource in enumerate(self._resources):
            if resource.name == name:
                return self._resources.pop(index)
        raise ResourceNotFoundError(name)

    def save(self) -> None:
        """Write every resource to the backing file."""
        try:
            write_csv_file(self.path, (r.to_fields() for r in self._resources))
        except CsvWriteError as exc:
            raise DatabaseSaveError(str(exc)) from exc

    def __iter__(self) -> Iterator[Resource]:
        return iter(list(self._resources))

    def __len__(self) -> int:
        return len(self._resources)