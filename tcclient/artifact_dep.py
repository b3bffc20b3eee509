"""Artifact dependencies between build configurations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .artifact_dep_options import ArtifactDependencyOptions
from .properties import Properties

_TYPE = "artifact_dependency"


@dataclass
class ArtifactDependency:
    """A single artifact dependency of a build configuration."""

    source_build_type_id: str
    options: ArtifactDependencyOptions = field(default_factory=ArtifactDependencyOptions)
    id: str = ""
    disabled: bool = False
    inherited: bool | None = None
    build_type_id: str = ""

    @property
    def type(self) -> str:
        return _TYPE

    @classmethod
    def create(
        cls, source_build_type_id: str, options: ArtifactDependencyOptions | None
    ) -> ArtifactDependency:
        if not source_build_type_id:
            raise ValueError("sourceBuildTypeID is required")
        if options is None:
            raise ValueError("options must be valid")
        return cls(source_build_type_id=source_build_type_id, options=options)

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"disabled": self.disabled}
        if self.id:
            out["id"] = self.id
        out["properties"] = self.options.properties().to_json()
        out["source-buildType"] = {"id": self.source_build_type_id}
        out["type"] = _TYPE
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> ArtifactDependency:
        kind = data.get("type", "")
        if kind != _TYPE:
            raise ValueError(
                f"invalid type {kind} trying to deserialize into ArtifactDependency entity"
            )
        source = data.get("source-buildType") or {}
        disabled = data.get("disabled")
        return cls(
            source_build_type_id=source.get("id", ""),
            options=ArtifactDependencyOptions.from_properties(
                Properties.from_json(data.get("properties"))
            ),
            id=data.get("id", ""),
            disabled=bool(disabled) if disabled is not None else False,
            inherited=data.get("inherited"),
        )