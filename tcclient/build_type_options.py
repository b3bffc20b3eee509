"""Settings of a build configuration and their property form."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable

from .properties import Properties, Property

DEFAULT_BUILD_NUMBER_FORMAT = "%build.counter%"
DEFAULT_BUILD_CONFIGURATION_TYPE = "REGULAR"


def _to_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def _to_rules(value: str) -> list[str]:
    return value.split("\n") if value else []


# property name -> (attribute, converter)
_READERS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "allowPersonalBuildTriggering": ("allow_personal_build_triggering", _to_bool),
    "artifactRules": ("artifact_rules", _to_rules),
    "enableHangingBuildsDetection": ("enable_hanging_builds_detection", _to_bool),
    "allowExternalStatus": ("enable_status_widget", _to_bool),
    "buildNumberCounter": ("build_counter", int),
    "cleanBuild": ("clean_build", _to_bool),
    "buildNumberPattern": ("build_number_format", str),
    "buildConfigurationType": ("build_configuration_type", str),
    "maximumNumberOfBuilds": ("max_simultaneous_builds", int),
}


@dataclass
class BuildTypeOptions:
    """Settings for a build configuration; defaults match a new one in TeamCity."""

    allow_personal_build_triggering: bool = True
    artifact_rules: list[str] = field(default_factory=list)
    enable_hanging_builds_detection: bool = True
    enable_status_widget: bool = False
    build_counter: int = 1
    clean_build: bool = False
    build_number_format: str = DEFAULT_BUILD_NUMBER_FORMAT
    build_configuration_type: str = DEFAULT_BUILD_CONFIGURATION_TYPE
    max_simultaneous_builds: int = 0
    template: bool = False

    @classmethod
    def with_defaults(cls) -> BuildTypeOptions:
        return cls()

    @classmethod
    def for_template(cls) -> BuildTypeOptions:
        return cls(build_counter=0, template=True)

    def properties(self) -> Properties:
        """Serialise to settings, leaving out those TeamCity omits at their defaults."""
        entries: list[tuple[str, str]] = []
        if not self.allow_personal_build_triggering:
            entries.append(("allowPersonalBuildTriggering", "false"))
        entries.append(("artifactRules", "\n".join(self.artifact_rules)))
        if not self.enable_hanging_builds_detection:
            entries.append(("enableHangingBuildsDetection", "false"))
        if self.enable_status_widget:
            entries.append(("allowExternalStatus", "true"))
        if not self.template:
            entries.append(("buildNumberCounter", str(self.build_counter)))
        if self.clean_build:
            entries.append(("cleanBuild", "true"))
        if self.build_number_format and self.build_number_format != DEFAULT_BUILD_NUMBER_FORMAT:
            entries.append(("buildNumberPattern", self.build_number_format))
        if (
            self.build_configuration_type
            and self.build_configuration_type != DEFAULT_BUILD_CONFIGURATION_TYPE
        ):
            entries.append(("buildConfigurationType", self.build_configuration_type))
        if self.max_simultaneous_builds != 0:
            entries.append(("maximumNumberOfBuilds", str(self.max_simultaneous_builds)))
        return Properties([Property(name, value) for name, value in entries])

    @classmethod
    def from_properties(cls, props: Properties | None, template: bool = False) -> BuildTypeOptions:
        """Read settings, keeping defaults for those not present."""
        base = cls.for_template() if template else cls.with_defaults()
        updates: dict[str, Any] = {}
        for prop in props or ():
            reader = _READERS.get(prop.name)
            if reader is not None:
                attr, convert = reader
                updates[attr] = convert(prop.value)
        return replace(base, **updates)