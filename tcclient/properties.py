"""Name/value property collections as exchanged with the TeamCity REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass
class Property:
    """A single named value."""

    name: str
    value: str = ""
    inherited: bool | None = None

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.inherited is not None:
            out["inherited"] = self.inherited
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Property:
        return cls(
            name=data.get("name", ""),
            value=data.get("value", ""),
            inherited=data.get("inherited"),
        )


@dataclass
class Properties:
    """An ordered collection of properties, addressed by name."""

    items: list[Property] = field(default_factory=list)

    def __iter__(self) -> Iterator[Property]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, name: object) -> bool:
        return any(item.name == name for item in self.items)

    @property
    def count(self) -> int:
        return len(self.items)

    def _find(self, name: str) -> Property | None:
        return next((item for item in self.items if item.name == name), None)

    def add(self, prop: Property) -> None:
        self.items.append(prop)

    def add_or_replace_value(self, name: str, value: str) -> None:
        existing = self._find(name)
        if existing is None:
            self.items.append(Property(name, value))
        else:
            existing.value = value

    def add_or_replace_property(self, prop: Property) -> None:
        existing = self._find(prop.name)
        if existing is None:
            self.items.append(prop)
        else:
            existing.value = prop.value
            existing.inherited = prop.inherited

    def remove(self, name: str) -> None:
        existing = self._find(name)
        if existing is not None:
            self.items.remove(existing)

    def get(self, name: str) -> str | None:
        """Return the value of the named property, or None when absent."""
        existing = self._find(name)
        return None if existing is None else existing.value

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.items:
            out["count"] = len(self.items)
            out["property"] = [item.to_json() for item in self.items]
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any] | None) -> Properties:
        if not data:
            return cls()
        return cls([Property.from_json(p) for p in data.get("property") or []])