"""Options of an artifact dependency and their property form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .properties import Properties, Property

_TAG_SUFFIX = ".tcbuildtag"


class ArtifactDependencyRevision(str, Enum):
    """Which build of the source configuration artifacts are taken from."""

    LATEST_SUCCESSFUL_BUILD = "lastSuccessful"
    LATEST_PINNED_BUILD = "lastPinned"
    LATEST_FINISHED_BUILD = "lastFinished"
    BUILD_FROM_SAME_CHAIN = "sameChainOrLastFinished"
    BUILD_WITH_SPECIFIED_NUMBER = "buildNumber"
    LAST_BUILD_FINISHED_WITH_TAG = "buildTag"


def _revision_text(revision: ArtifactDependencyRevision | str) -> str:
    return revision.value if isinstance(revision, ArtifactDependencyRevision) else revision


def _to_revision(text: str) -> ArtifactDependencyRevision | str:
    try:
        return ArtifactDependencyRevision(text)
    except ValueError:
        return text


@dataclass
class ArtifactDependencyOptions:
    """Options for an artifact dependency of a build configuration."""

    path_rules: list[str] = field(default_factory=list)
    revision_type: ArtifactDependencyRevision | str = ""
    clean_destination: bool = False
    revision_number: str = ""

    @classmethod
    def create(
        cls,
        path_rules: list[str],
        revision_type: ArtifactDependencyRevision | str,
        clean_destination: bool = False,
        revision_value: str = "",
    ) -> ArtifactDependencyOptions:
        if not path_rules:
            raise ValueError("pathRules is required")
        if not revision_type:
            raise ValueError("revisionType is required")
        if revision_type == ArtifactDependencyRevision.BUILD_WITH_SPECIFIED_NUMBER and not revision_value:
            raise ValueError("revisionValue is required is using 'BuildWithSpecifiedNumber'")
        if revision_type == ArtifactDependencyRevision.LAST_BUILD_FINISHED_WITH_TAG and not revision_value:
            raise ValueError("revisionValue is required is using 'LastBuildFinishedWithTag'")
        return cls(
            path_rules=list(path_rules),
            revision_type=_to_revision(_revision_text(revision_type)),
            clean_destination=clean_destination,
            revision_number=revision_value,
        )

    def properties(self) -> Properties:
        revision_name = _revision_text(self.revision_type)
        if self.revision_type == ArtifactDependencyRevision.BUILD_WITH_SPECIFIED_NUMBER:
            revision_value = self.revision_number
        elif self.revision_type == ArtifactDependencyRevision.LAST_BUILD_FINISHED_WITH_TAG:
            revision_value = self.revision_number + _TAG_SUFFIX
        else:
            revision_value = "latest." + revision_name
        return Properties(
            [
                Property("pathRules", "\r\n".join(self.path_rules)),
                Property("cleanDestinationDirectory", "true" if self.clean_destination else "false"),
                Property("revisionValue", revision_value),
                Property("revisionName", revision_name),
            ]
        )

    @classmethod
    def from_properties(cls, props: Properties | None) -> ArtifactDependencyOptions:
        props = props or Properties()
        out = cls()
        if (name := props.get("revisionName")) is not None:
            out.revision_type = _to_revision(name)
        if (rules := props.get("pathRules")) is not None:
            out.path_rules = rules.split("\r\n") if rules else []
        if (clean := props.get("cleanDestinationDirectory")) is not None:
            out.clean_destination = clean.strip().lower() == "true"
        if (value := props.get("revisionValue")) is not None:
            out.revision_number = value.removesuffix(_TAG_SUFFIX)
        return out