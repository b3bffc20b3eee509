"""Projects and the references used between resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .locator import locator_id, locator_name
from .parameter import Parameters
from .rest import RestHelper


def _drop_empty(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v not in ("", None)}


@dataclass
class ProjectReference:
    """Basic details of a project, enough to link to it."""

    id: str = ""
    name: str = ""
    description: str = ""
    href: str = ""
    web_url: str = ""

    def to_json(self) -> dict[str, Any]:
        return _drop_empty(
            {
                "id": self.id,
                "name": self.name,
                "description": self.description,
                "href": self.href,
                "webUrl": self.web_url,
            }
        )

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> ProjectReference:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
            href=data.get("href", ""),
            web_url=data.get("webUrl", ""),
        )


@dataclass
class BuildTypeReference:
    """Basic details of a build configuration."""

    id: str = ""
    name: str = ""
    project_id: str = ""

    def to_json(self) -> dict[str, Any]:
        return _drop_empty({"id": self.id, "name": self.name, "projectId": self.project_id})

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> BuildTypeReference:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            project_id=data.get("projectId", ""),
        )


@dataclass
class Project:
    """A TeamCity project. An empty parent id makes a top-level project."""

    name: str
    description: str = ""
    parent_project_id: str = ""
    id: str = ""
    href: str = ""
    web_url: str = ""
    archived: bool | None = None
    parameters: Parameters | None = field(default_factory=Parameters)
    parent_project: ProjectReference | None = None
    build_types: list[BuildTypeReference] = field(default_factory=list)
    child_projects: list[ProjectReference] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name is required")
        if self.parent_project_id and self.parent_project is None:
            self.parent_project = ProjectReference(id=self.parent_project_id)

    def set_parent_project(self, parent_id: str) -> None:
        self.parent_project_id = parent_id
        self.parent_project = ProjectReference(id=parent_id)

    def reference(self) -> ProjectReference:
        return ProjectReference(
            id=self.id,
            name=self.name,
            description=self.description,
            href=self.href,
            web_url=self.web_url,
        )

    def to_json(self) -> dict[str, Any]:
        out = _drop_empty(
            {
                "archived": self.archived,
                "description": self.description,
                "href": self.href,
                "id": self.id,
                "name": self.name,
            }
        )
        if self.parameters is not None:
            out["parameters"] = self.parameters.to_json()
        if self.parent_project is not None:
            out["parentProject"] = self.parent_project.to_json()
        if self.parent_project_id:
            out["parentProjectId"] = self.parent_project_id
        if self.web_url:
            out["webUrl"] = self.web_url
        if self.build_types:
            out["buildTypes"] = {
                "count": len(self.build_types),
                "buildType": [b.to_json() for b in self.build_types],
            }
        if self.child_projects:
            out["projects"] = {
                "count": len(self.child_projects),
                "project": [p.to_json() for p in self.child_projects],
            }
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Project:
        parent = data.get("parentProject")
        build_types = data.get("buildTypes") or {}
        children = data.get("projects") or {}
        return cls(
            name=data.get("name", ""),
            description=data.get("description", ""),
            parent_project_id=data.get("parentProjectId", ""),
            id=data.get("id", ""),
            href=data.get("href", ""),
            web_url=data.get("webUrl", ""),
            archived=data.get("archived"),
            parameters=Parameters.from_json(data["parameters"]) if "parameters" in data else None,
            parent_project=ProjectReference.from_json(parent) if parent else None,
            build_types=[BuildTypeReference.from_json(b) for b in build_types.get("buildType") or []],
            child_projects=[ProjectReference.from_json(p) for p in children.get("project") or []],
        )


class ProjectService:
    """Operations on projects."""

    def __init__(self, rest: RestHelper) -> None:
        self._rest = rest.sub("projects/")

    def create(self, project: Project) -> Project:
        """Create a project, then set the fields the initial creation does not keep."""
        created = ProjectReference.from_json(self._rest.post("", project, "project") or {})
        project.id = created.id
        return self._update_project(project, is_create=True)

    def get_by_id(self, id: str) -> Project:
        out = Project.from_json(self._rest.get(locator_id(id), "project") or {})
        # Parameters are absent for users without permission to view them.
        if out.parameters is not None:
            out.parameters = out.parameters.non_inherited()
        return out

    def get_by_name(self, name: str) -> Project:
        out = Project.from_json(self._rest.get(locator_name(name), "project") or {})
        if out.parameters is not None:
            out.parameters = out.parameters.non_inherited()
        return out

    def update(self, project: Project) -> Project:
        """Update name, description, parent and parameters; not atomic."""
        return self._update_project(project, is_create=False)

    def delete(self, id: str) -> None:
        self._rest.delete(id, "project")

    def _update_project(self, project: Project, is_create: bool) -> Project:
        self._rest.put_text_plain(f"{project.id}/name", project.name, "project name")
        self._rest.put_text_plain(
            f"{project.id}/description", project.description, "project description"
        )

        if not is_create:
            current = self.get_by_id(project.id)
            # Re-parenting to the same parent would make TeamCity copy the project.
            if (
                project.parent_project_id or project.parent_project is not None
            ) and current.parent_project_id != project.parent_project_id:
                self._rest.put(
                    f"{project.id}/parentProject", project.parent_project, "parent project"
                )

        if project.parameters is not None and project.parameters.count > 0:
            self._rest.put(f"{project.id}/parameters", project.parameters, "project parameters")

        return self.get_by_id(project.id)