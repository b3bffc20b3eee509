"""Artifact and snapshot dependencies of a build configuration."""

from __future__ import annotations

from .artifact_dep import ArtifactDependency
from .rest import RestHelper


class DependencyService:
    """Manages the dependencies of one build type."""

    def __init__(self, build_type_id: str, rest: RestHelper) -> None:
        self.build_type_id = build_type_id
        self._artifacts = rest.sub(f"buildTypes/{build_type_id}/artifact-dependencies/")
        self._snapshots = rest.sub(f"buildTypes/{build_type_id}/snapshot-dependencies/")

    def _own(self, dep: ArtifactDependency) -> ArtifactDependency:
        dep.build_type_id = self.build_type_id
        return dep

    def add_artifact_dependency(self, dep: ArtifactDependency | None) -> ArtifactDependency:
        """Add an artifact dependency and return it as the server stored it."""
        if dep is None:
            raise ValueError("dep can't be nil")
        data = self._artifacts.post("", dep, "artifact dependency")
        return self._own(ArtifactDependency.from_json(data or {}))

    def get_artifact_by_id(self, dep_id: str) -> ArtifactDependency:
        data = self._artifacts.get(dep_id, "artifact dependency")
        return self._own(ArtifactDependency.from_json(data or {}))

    def delete_artifact(self, dep_id: str) -> None:
        self._artifacts.delete(dep_id, "artifact dependency")

    def delete_snapshot(self, dep_id: str) -> None:
        self._snapshots.delete(dep_id, "snapshot dependency")