from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping

from .grammar import InvalidKeyError, is_valid_name


@dataclass(slots=True)
class Config:
    """Settings of one postgresql.conf file, keyed by lowercase name."""

    values: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.values = {name.lower(): value for name, value in self.values.items()}

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.values.get(name.lower(), default)

    def set(self, name: str, value: Any) -> None:
        if not is_valid_name(name):
            raise InvalidKeyError(name)
        self.values[name.lower()] = str(value)

    def remove(self, name: str) -> bool:
        return self.values.pop(name.lower(), None) is not None

    def update(self, mapping: Mapping[str, Any]) -> None:
        for name, value in mapping.items():
            self.set(name, value)

    def missing(self, *names: str) -> Iterable[str]:
        for name in names:
            if name.lower() not in self.values:
                yield name

    def as_dict(self) -> dict[str, str]:
        return dict(self.values)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)
