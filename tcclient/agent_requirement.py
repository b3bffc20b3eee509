"""Agent requirements of a build configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .properties import Properties, Property
from .rest import RestHelper, TeamCityError


class Condition(str, Enum):
    """Conditions an agent property can be checked against."""

    EXISTS = "exists"
    EQUALS = "equals"
    DOES_NOT_EQUAL = "does-not-equal"
    MORE_THAN = "more-than"
    NO_MORE_THAN = "no-more-than"
    LESS_THAN = "less-than"
    NO_LESS_THAN = "no-less-than"
    STARTS_WITH = "starts-with"
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "does-not-contain"
    ENDS_WITH = "ends-with"
    MATCHES = "matches"
    DOES_NOT_MATCH = "does-not-match"
    VERSION_MORE_THAN = "ver-more-than"
    VERSION_NO_MORE_THAN = "ver-no-more-than"
    VERSION_LESS_THAN = "ver-less-than"
    VERSION_NO_LESS_THAN = "ver-no-less-than"


def _to_condition(value: Condition | str) -> Condition | str:
    try:
        return Condition(value)
    except ValueError:
        return value


def _condition_text(value: Condition | str) -> str:
    return value.value if isinstance(value, Condition) else value


@dataclass
class AgentRequirement:
    """A condition evaluated per agent to decide whether it can run a build type."""

    condition: Condition | str = ""
    properties: Properties = field(default_factory=Properties)
    id: str = ""
    inherited: bool | None = None
    disabled: bool | None = None
    build_type_id: str = ""

    @classmethod
    def create(cls, condition: Condition | str, name: str, value: str = "") -> AgentRequirement:
        cond = _to_condition(condition)
        if cond != Condition.EXISTS and not value:
            raise ValueError("paramValue is required except for 'exists' condition")
        props = Properties([Property("property-name", name)])
        if cond != Condition.EXISTS:
            props.add(Property("property-value", value))
        return cls(condition=cond, properties=props)

    @property
    def name(self) -> str:
        return self.properties.get("property-name") or ""

    @property
    def value(self) -> str:
        return self.properties.get("property-value") or ""

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.id:
            out["id"] = self.id
        if self.inherited is not None:
            out["inherited"] = self.inherited
        if self.disabled is not None:
            out["disabled"] = self.disabled
        if self.condition:
            out["type"] = _condition_text(self.condition)
        if self.properties is not None:
            out["properties"] = self.properties.to_json()
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> AgentRequirement:
        return cls(
            condition=_to_condition(data.get("type", "")),
            properties=Properties.from_json(data.get("properties")),
            id=data.get("id", ""),
            inherited=data.get("inherited"),
            disabled=data.get("disabled"),
        )


class AgentRequirementService:
    """Manages the agent requirements of one build type."""

    def __init__(self, build_type_id: str, rest: RestHelper) -> None:
        self.build_type_id = build_type_id
        self._rest = rest.sub(f"buildTypes/{build_type_id}/agent-requirements/")

    def _own(self, requirement: AgentRequirement) -> AgentRequirement:
        requirement.build_type_id = self.build_type_id
        return requirement

    def create(self, requirement: AgentRequirement) -> AgentRequirement:
        data = self._rest.post("", requirement, "agent requirement")
        return self._own(AgentRequirement.from_json(data or {}))

    def get_by_id(self, id: str) -> AgentRequirement:
        try:
            data = self._rest.get(id, "agent requirement")
        except TeamCityError as err:
            if err.status_code == 404:
                raise TeamCityError(
                    f"404 Not Found - Trigger (id: {id}) for buildTypeId "
                    f"(id: {self.build_type_id}) was not found",
                    status_code=404,
                    body=err.body,
                ) from err
            raise
        return self._own(AgentRequirement.from_json(data or {}))

    def get_all(self) -> list[AgentRequirement]:
        data = self._rest.get("", "agent requirements") or {}
        return [
            self._own(AgentRequirement.from_json(item))
            for item in data.get("agent-requirement") or []
        ]

    def delete(self, id: str) -> None:
        self._rest.delete(id, "agent requirement")