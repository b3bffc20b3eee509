"""Attaching build configuration templates to build configurations."""

from __future__ import annotations

from .project import BuildTypeReference
from .rest import RestHelper


class BuildTemplateService:
    """Attaches and detaches templates for one build type."""

    def __init__(self, build_type_id: str, rest: RestHelper) -> None:
        self.build_type_id = build_type_id
        self._rest = rest.sub(f"buildTypes/{build_type_id}/templates/")

    def attach(self, template_id: str) -> BuildTypeReference:
        """Attach the template with this id; attaching twice has no further effect."""
        data = self._rest.post("", BuildTypeReference(id=template_id), "attach build template")
        return BuildTypeReference.from_json(data or {})

    def detach(self, template_id: str) -> None:
        self._rest.delete(template_id, "detach build template")