"""Attack tracks: trees of attack steps and the failed controls behind them."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

CONTROL_TYPE_TAG_DEVOPS = "devops"
CONTROL_TYPE_TAG_SECURITY = "security"
CONTROL_TYPE_TAG_COMPLIANCE = "compliance"
CONTROL_TYPE_TAG_SECURITY_IMPACT = "security-impact"


@runtime_checkable
class AttackTrackControl(Protocol):
    """A control that can be attached to the steps of an attack track."""

    def get_attack_track_categories(self, attack_track: str) -> list[str]: ...

    def get_control_type_tags(self) -> list[str]: ...

    def get_control_id(self) -> str: ...

    def get_score(self) -> float: ...

    def get_severity(self) -> int: ...


@dataclass
class AttackTrackStep:
    """A node of an attack track; ``controls`` holds the failed controls of the step."""

    name: str = ""
    description: str = ""
    sub_steps: list[AttackTrackStep] = field(default_factory=list)
    controls: list[Any] = field(default_factory=list, compare=False, repr=False)

    def is_part_of_attack_track_path(self) -> bool:
        """True if the step has failed controls and so can be on an attack path."""
        return len(self.controls) > 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AttackTrackStep:
        return cls(
            name=data.get("name") or "",
            description=data.get("description") or "",
            sub_steps=[cls.from_dict(s) for s in data.get("subSteps") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.description:
            result["description"] = self.description
        if self.sub_steps:
            result["subSteps"] = [s.to_dict() for s in self.sub_steps]
        return result


def _is_tree(node: AttackTrackStep, visited: set[str]) -> bool:
    if node.name in visited:
        return False
    visited.add(node.name)
    return all(_is_tree(sub, visited) for sub in node.sub_steps)


@dataclass
class AttackTrack:
    """An attack track definition with a single root step."""

    api_version: str = ""
    kind: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    version: str = ""
    description: str = ""
    data: AttackTrackStep = field(default_factory=AttackTrackStep)

    @property
    def name(self) -> str:
        value = (self.metadata or {}).get("name")
        return value if isinstance(value, str) else ""

    def is_valid(self) -> bool:
        """True if the steps form a tree: no step name is reached twice."""
        return _is_tree(self.data, set())

    def iter_steps(self) -> Iterator[AttackTrackStep]:
        """Yield the steps depth first, visiting the last sub-step first."""
        stack = [self.data]
        while stack:
            step = stack.pop()
            stack.extend(step.sub_steps)
            yield step

    def __iter__(self) -> Iterator[AttackTrackStep]:
        return self.iter_steps()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AttackTrack:
        spec = data.get("spec") or {}
        return cls(
            api_version=data.get("apiVersion") or "",
            kind=data.get("kind") or "",
            metadata=dict(data.get("metadata") or {}),
            version=spec.get("version") or "",
            description=spec.get("description") or "",
            data=AttackTrackStep.from_dict(spec.get("data") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        spec: dict[str, Any] = {}
        if self.version:
            spec["version"] = self.version
        if self.description:
            spec["description"] = self.description
        spec["data"] = self.data.to_dict()
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": dict(self.metadata),
            "spec": spec,
        }


@dataclass
class AttackTrackControlMock:
    """A simple control with fixed categories, for building attack track scenarios."""

    control_id: str = ""
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    base_score: float = 0.0
    severity: int = 0

    def get_attack_track_categories(self, attack_track: str) -> list[str]:
        return self.categories

    def get_control_type_tags(self) -> list[str]:
        return self.tags

    def get_control_id(self) -> str:
        return self.control_id

    def get_score(self) -> float:
        return self.base_score

    def get_severity(self) -> int:
        return self.severity


def attack_track_mock(data: AttackTrackStep) -> AttackTrack:
    """Return an attack track named "TestAttackTrack" with the given root step."""
    return AttackTrack(metadata={"name": "TestAttackTrack"}, version="1.0", data=data)


class AttackTrackControlsLookup(dict):
    """Maps attack track name -> step category -> controls in that category."""

    @classmethod
    def build(
        cls,
        attack_tracks: Iterable[AttackTrack],
        failed_control_ids: Iterable[str],
        all_controls: Mapping[str, AttackTrackControl],
    ) -> AttackTrackControlsLookup:
        """Group the failed controls of every attack track by category."""
        failed_control_ids = list(failed_control_ids)
        lookup = cls()
        for attack_track in attack_tracks:
            track_name = attack_track.name
            categories: dict[str, list[AttackTrackControl]] = {}
            lookup[track_name] = categories
            for control_id in failed_control_ids:
                control = all_controls.get(control_id)
                if control is None:
                    logger.error(
                        "Failed to find control in all controls map: %s", control_id
                    )
                    continue
                for category in control.get_attack_track_categories(track_name):
                    categories.setdefault(category, []).append(control)
        return lookup

    def get_associated_controls(self, attack_track: str, category: str) -> list:
        """Controls of ``category`` in ``attack_track``, or an empty list."""
        return self.get(attack_track, {}).get(category, [])

    def has_associated_controls(self, attack_track: str) -> bool:
        return bool(self.get(attack_track))


class AttackTrackAllPathsHandler:
    """Finds every path of failed steps from an entry step to a final step."""

    def __init__(self, attack_track: AttackTrack, lookup: AttackTrackControlsLookup) -> None:
        self.attack_track = attack_track
        self._in_degree_zero: dict[str, bool] = {}
        self._out_degree_zero: dict[str, bool] = {}
        track_name = attack_track.name
        for step in attack_track.iter_steps():
            step.controls = lookup.get_associated_controls(track_name, step.name)

    def _reset_graph(self) -> dict[str, list[AttackTrackStep]]:
        for step in self.attack_track.iter_steps():
            self._in_degree_zero[step.name] = True
            self._out_degree_zero[step.name] = True
        adjacency: dict[str, list[AttackTrackStep]] = {}

        def link(parent: AttackTrackStep, child: AttackTrackStep) -> None:
            if parent.is_part_of_attack_track_path() and child.is_part_of_attack_track_path():
                adjacency.setdefault(parent.name, []).append(child)
                self._in_degree_zero[child.name] = False
                self._out_degree_zero[parent.name] = False
            for sub in child.sub_steps:
                link(child, sub)

        root = self.attack_track.data
        for sub in root.sub_steps:
            link(root, sub)
        return adjacency

    def calculate_all_paths(self) -> list[list[AttackTrackStep]]:
        """Return the paths in the order their entry steps are iterated."""
        adjacency = self._reset_graph()
        all_paths: list[list[AttackTrackStep]] = []
        visited: set[str] = set()
        current: list[AttackTrackStep] = []

        def dfs(step: AttackTrackStep) -> None:
            current.append(step)
            visited.add(step.name)
            if self._out_degree_zero[step.name] and self._in_degree_zero[current[0].name]:
                all_paths.append(list(current))
            for nxt in adjacency.get(step.name, []):
                if nxt.is_part_of_attack_track_path() and nxt.name not in visited:
                    dfs(nxt)
            current.pop()
            visited.discard(step.name)

        for step in self.attack_track.iter_steps():
            if step.is_part_of_attack_track_path() and self._in_degree_zero[step.name]:
                dfs(step)
        return all_paths