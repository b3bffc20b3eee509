"""Agent pools and their project assignments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .locator import locator_id, locator_id_int, locator_name
from .project import ProjectReference
from .rest import RestHelper


@dataclass
class AgentPoolReference:
    """A short reference to an agent pool."""

    id: int = 0
    name: str = ""
    href: str = ""

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.href:
            out["href"] = self.href
        if self.id:
            out["id"] = self.id
        if self.name:
            out["name"] = self.name
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> AgentPoolReference:
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            href=data.get("href", ""),
        )


@dataclass
class AgentPool:
    """An agent pool with the projects assigned to it."""

    id: int = 0
    name: str = ""
    href: str = ""
    max_agents: int | None = None
    projects: list[ProjectReference] | None = None

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.href:
            out["href"] = self.href
        if self.id:
            out["id"] = self.id
        if self.name:
            out["name"] = self.name
        if self.max_agents is not None:
            out["maxAgents"] = self.max_agents
        if self.projects is not None:
            out["projects"] = (
                {"project": [p.to_json() for p in self.projects]} if self.projects else {}
            )
        return out

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> AgentPool:
        projects = data.get("projects")
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            href=data.get("href", ""),
            max_agents=data.get("maxAgents"),
            projects=(
                [ProjectReference.from_json(p) for p in projects.get("project") or []]
                if projects is not None
                else None
            ),
        )


@dataclass
class AgentPoolList:
    """The answer to listing agent pools."""

    count: int = 0
    href: str = ""
    agent_pools: list[AgentPoolReference] = field(default_factory=list)

    def __iter__(self):
        return iter(self.agent_pools)

    def __len__(self) -> int:
        return len(self.agent_pools)

    @classmethod
    def from_json(cls, data: dict[str, Any] | None) -> AgentPoolList:
        data = data or {}
        return cls(
            count=data.get("count", 0),
            href=data.get("href", ""),
            agent_pools=[AgentPoolReference.from_json(p) for p in data.get("agentPool") or []],
        )


@dataclass
class CreateAgentPool:
    """What is needed to create an agent pool; the name must be unique."""

    name: str = ""
    max_agents: int | None = None

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.max_agents is not None:
            out["maxAgents"] = self.max_agents
        return out


class AgentPoolsService:
    """Operations on agent pools.

    Updating a pool is not offered: the server rejects PUT on a pool and a
    POST with an id set creates a new pool instead.
    """

    def __init__(self, rest: RestHelper) -> None:
        self._rest = rest.sub("agentPools/")

    def assign_project(self, pool_id: int, project_id: str) -> None:
        self._rest.post(
            f"{locator_id_int(pool_id)}/projects", {"id": project_id}, "Agent Pool"
        )

    def create(self, pool: CreateAgentPool) -> AgentPool:
        return AgentPool.from_json(self._rest.post("", pool, "Agent Pool") or {})

    def delete(self, id: int) -> None:
        self._rest.delete(locator_id_int(id), "Agent Pool")

    def get_by_id(self, id: int) -> AgentPool:
        return AgentPool.from_json(self._rest.get(locator_id_int(id), "Agent Pool") or {})

    def get_by_name(self, name: str) -> AgentPool:
        return AgentPool.from_json(self._rest.get(locator_name(name), "Agent Pool") or {})

    def list(self) -> AgentPoolList:
        return AgentPoolList.from_json(self._rest.get("", "Agent Pools"))

    def list_for_project(self, project_id: str) -> AgentPoolList:
        """List the pools a project is assigned to."""
        path = f"?locator=project:({locator_id(project_id)})"
        return AgentPoolList.from_json(self._rest.get(path, "Agent Pools"))

    def unassign_project(self, pool_id: int, project_id: str) -> None:
        path = f"{locator_id_int(pool_id)}/projects/{locator_id(project_id)}"
        self._rest.delete(path, "Agent Pool")