"""Build configurations and build configuration templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .build_type_options import BuildTypeOptions
from .locator import locator_id
from .parameter import Parameters
from .project import BuildTypeReference
from .properties import Properties
from .rest import RestHelper, TeamCityError


def _step_json(step: Any) -> dict[str, Any]:
    to_json = getattr(step, "to_json", None)
    return to_json() if callable(to_json) else dict(step)


def _steps_json(steps: list[Any]) -> dict[str, Any]:
    return {"count": len(steps), "step": [_step_json(s) for s in steps]}


def _steps_from_json(data: dict[str, Any] | None) -> list[dict[str, Any]]:
    return list((data or {}).get("step") or [])


@dataclass
class Templates:
    """The templates attached to a build configuration."""

    items: list[BuildTypeReference] = field(default_factory=list)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def count(self) -> int:
        return len(self.items)

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.items:
            out["count"] = len(self.items)
        out["buildType"] = [item.to_json() for item in self.items]
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any] | None) -> Templates:
        if not data:
            return cls()
        return cls([BuildTypeReference.from_json(b) for b in data.get("buildType") or []])


@dataclass
class BuildType:
    """A build configuration or a build configuration template.

    Steps and VCS root entries are kept in their JSON form.
    """

    project_id: str = ""
    name: str = ""
    id: str = ""
    description: str = ""
    options: BuildTypeOptions = field(default_factory=BuildTypeOptions.with_defaults)
    disabled: bool = False
    is_template: bool = False
    steps: list[Any] = field(default_factory=list)
    templates: Templates | None = None
    vcs_root_entries: list[dict[str, Any]] = field(default_factory=list)
    parameters: Parameters | None = field(default_factory=Parameters)

    @classmethod
    def create(cls, project_id: str, name: str) -> BuildType:
        """Return a build configuration with default options."""
        if not project_id or not name:
            raise ValueError("projectID and name are required")
        return cls(project_id=project_id, name=name, options=BuildTypeOptions.with_defaults())

    @classmethod
    def create_template(cls, project_id: str, name: str) -> BuildType:
        """Return a build configuration template with default options."""
        if not project_id or not name:
            raise ValueError("projectID and name are required")
        return cls(
            project_id=project_id,
            name=name,
            options=BuildTypeOptions.for_template(),
            is_template=True,
        )

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        # The server does not accept a description when creating a template.
        if not self.is_template and self.description:
            out["description"] = self.description
        if self.id:
            out["id"] = self.id
        if self.name:
            out["name"] = self.name
        if self.parameters is not None:
            out["parameters"] = self.parameters.to_json()
        if self.project_id:
            out["projectId"] = self.project_id
        out["templateFlag"] = self.is_template
        out["settings"] = self.options.properties().to_json()
        if self.templates is not None:
            out["templates"] = self.templates.to_json()
        if self.steps:
            out["steps"] = _steps_json(self.steps)
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> BuildType:
        is_template = bool(data.get("templateFlag", False))
        entries = data.get("vcs-root-entries") or {}
        return cls(
            project_id=data.get("projectId", ""),
            name=data.get("name", ""),
            id=data.get("id", ""),
            description=data.get("description", ""),
            options=BuildTypeOptions.from_properties(
                Properties.from_json(data.get("settings")), is_template
            ),
            is_template=is_template,
            steps=_steps_from_json(data.get("steps")),
            templates=Templates.from_json(data["templates"]) if "templates" in data else None,
            vcs_root_entries=list(entries.get("vcs-root-entry") or []),
            parameters=(
                Parameters.from_json(data["parameters"]) if "parameters" in data else None
            ),
        )

    def reference(self) -> BuildTypeReference:
        return BuildTypeReference(id=self.id, name=self.name, project_id=self.project_id)


class BuildTypeService:
    """Operations on build configurations and templates."""

    def __init__(self, rest: RestHelper) -> None:
        self._rest = rest.sub("buildTypes/")

    def create(self, build_type: BuildType) -> BuildTypeReference:
        """Create a build type under the project named by its project id."""
        data = self._rest.post("", build_type, "Build Type")
        return BuildTypeReference.from_json(data or {})

    def get_by_id(self, id: str) -> BuildType:
        out = BuildType.from_json(self._rest.get(id, "BuildType") or {})
        # Inherited parameters are filtered out until callers can choose.
        out.parameters = (out.parameters or Parameters()).non_inherited()
        return out

    def update_parameters(self, build_type: BuildType) -> BuildType:
        self._rest.put(
            f"{build_type.id}/parameters",
            build_type.parameters or Parameters(),
            "build type parameters",
        )
        return self.get_by_id(build_type.id)

    def update(self, build_type: BuildType) -> BuildType:
        """Update name, description, settings, parameters and steps; not atomic."""
        self._rest.put_text_plain(f"{build_type.id}/name", build_type.name, "build type name")
        self._rest.put_text_plain(
            f"{build_type.id}/description", build_type.description, "build type description"
        )
        self._rest.put(
            f"{build_type.id}/settings", build_type.options.properties(), "build type settings"
        )
        self._rest.put(
            f"{build_type.id}/parameters",
            build_type.parameters or Parameters(),
            "build type parameters",
        )
        if build_type.steps:
            self._rest.put(
                f"{build_type.id}/steps", _steps_json(build_type.steps), "build type steps"
            )
        return self.get_by_id(build_type.id)

    def delete(self, id: str) -> None:
        self._rest.delete(id, "build type")

    def add_step(self, id: str, step: Any) -> dict[str, Any]:
        """Add a build step and return it as the server stored it."""
        data = self._rest.post(f"{locator_id(id)}/steps/", _step_json(step), "build step")
        return data or {}

    def get_steps(self, id: str) -> list[dict[str, Any]]:
        return _steps_from_json(self._rest.get(f"{locator_id(id)}/steps/", "build steps"))

    def update_settings(self, id: str, settings: Properties) -> None:
        """Update settings one call each, in order; stops at the first failure."""
        for item in settings:
            try:
                self._rest.put_text_plain(
                    f"{locator_id(id)}/settings/{item.name}", item.value, "build type setting"
                )
            except TeamCityError as err:
                raise TeamCityError(
                    f"error updating buildType id: '{id}' setting '{item.name}': {err}",
                    status_code=err.status_code,
                    body=err.body,
                ) from err

    def delete_step(self, id: str, step_id: str) -> None:
        self._rest.delete(f"{locator_id(id)}/steps/{step_id}", "build step")