"""Project and build configuration parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from .properties import Properties, Property


class ParameterType(str, Enum):
    """The kinds of parameter TeamCity distinguishes."""

    CONFIGURATION = "configuration"
    SYSTEM = "system"
    ENVIRONMENT_VARIABLE = "env"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]


_PREFIXES = {
    ParameterType.CONFIGURATION: "",
    ParameterType.SYSTEM: "system.",
    ParameterType.ENVIRONMENT_VARIABLE: "env.",
}


@dataclass
class Parameter:
    """A configuration, system or environment variable parameter."""

    name: str
    value: str = ""
    type: ParameterType = ParameterType.CONFIGURATION
    inherited: bool = False

    @classmethod
    def create(cls, type: ParameterType | str, name: str, value: str) -> Parameter:
        if not name:
            raise ValueError("name is required")
        try:
            ptype = ParameterType(type)
        except ValueError:
            raise ValueError(
                "invalid parameter type, use one of the values defined in ParameterTypes"
            ) from None
        return cls(name=name, value=value, type=ptype)

    def to_property(self) -> Property:
        return Property(
            name=ParameterType(self.type).prefix + self.name,
            value=self.value,
            inherited=True if self.inherited else None,
        )

    def to_json(self) -> dict[str, Any]:
        return self.to_property().to_json()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Parameter:
        prop = Property.from_json(data)
        for ptype in (ParameterType.SYSTEM, ParameterType.ENVIRONMENT_VARIABLE):
            if prop.name.startswith(ptype.prefix):
                name = prop.name[len(ptype.prefix):]
                break
        else:
            ptype, name = ParameterType.CONFIGURATION, prop.name
        return cls(name=name, value=prop.value, type=ptype, inherited=bool(prop.inherited))


@dataclass
class Parameters:
    """An ordered collection of parameters."""

    items: list[Parameter] = field(default_factory=list)
    href: str = ""

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def count(self) -> int:
        return len(self.items)

    def add(self, param: Parameter) -> None:
        self.items.append(param)

    def add_or_replace_value(self, type: ParameterType | str, name: str, value: str) -> None:
        """Update the value of the parameter with this name, or add a new one."""
        for item in self.items:
            if item.name == name:
                item.value = value
                return
        self.add(Parameter.create(type, name, value))

    def add_or_replace_parameter(self, param: Parameter) -> None:
        self.add_or_replace_value(param.type, param.name, param.value)

    def concat(self, source: Parameters) -> Parameters:
        for item in source:
            self.add_or_replace_parameter(item)
        return self

    def remove(self, type: ParameterType | str, name: str) -> None:
        found = self.get(type, name)
        if found is not None:
            self.items.remove(found)

    def non_inherited(self) -> Parameters:
        out = Parameters()
        for item in self.items:
            if not item.inherited:
                out.add_or_replace_parameter(item)
        return out

    def get(self, type: ParameterType | str, name: str) -> Parameter | None:
        return next(
            (item for item in self.items if item.name == name and item.type == type),
            None,
        )

    def to_properties(self) -> Properties:
        out = Properties()
        for item in self.items:
            out.add_or_replace_property(item.to_property())
        return out

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.items:
            out["count"] = len(self.items)
        if self.href:
            out["href"] = self.href
        if self.items:
            out["property"] = [item.to_json() for item in self.items]
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any] | None) -> Parameters:
        if not data:
            return cls()
        return cls(
            items=[Parameter.from_json(p) for p in data.get("property") or []],
            href=data.get("href", ""),
        )