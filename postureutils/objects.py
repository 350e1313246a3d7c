"""Generic wrappers around Kubernetes-style objects held as plain dictionaries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

PATH_KEY = "sourcePath"

_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193


class ObjectType(str, Enum):
    """The kinds of object envelopes a raw object can be wrapped in."""

    UNKNOWN = ""
    BASE = "base"
    WORKLOAD = "workload"
    LIST_WORKLOADS = "list"
    LOCAL_WORKLOAD = "LocalWorkload"
    HOST_SENSOR = "HostSensor"
    REGO_RESPONSE = "regoResponse"

    def __str__(self) -> str:
        return self.value


def inspect_map(obj: Any, *args: str) -> Any:
    """Follow ``args`` as nested keys into ``obj``; return None if any key is missing."""
    current = obj
    for key in args:
        if not isinstance(current, Mapping) or key not in current:
            return None
        current = current[key]
    return current


def split_api_version(api_version: str) -> tuple[str, str]:
    """Split "group/version" into its parts; a bare version has an empty group."""
    parts = api_version.split("/")
    if len(parts) >= 2:
        return parts[0], parts[1]
    return "", parts[0]


def join_group_version(group: str, version: str) -> str:
    """Join a group and a version with a slash."""
    return f"{group}/{version}"


def fnv32a(text: str | bytes) -> int:
    """Return the 32-bit FNV-1a hash of ``text``."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    value = _FNV32_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV32_PRIME) & 0xFFFFFFFF
    return value


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def is_base_object(obj: Any) -> bool:
    """True if ``obj`` has at least an apiVersion and a kind."""
    return isinstance(obj, Mapping) and "apiVersion" in obj and "kind" in obj


def is_type_list_workloads(obj: Any) -> bool:
    """True if ``obj`` is a list of objects: a "...List" kind carrying items."""
    if not isinstance(obj, Mapping):
        return False
    return _string(obj.get("kind")).endswith("List") and isinstance(obj.get("items"), list)


def is_type_workload(obj: Any) -> bool:
    """True if ``obj`` looks like a single Kubernetes resource with metadata."""
    if not is_base_object(obj):
        return False
    if not isinstance(obj.get("metadata"), Mapping):
        return False
    return not _string(obj.get("kind")).endswith("List")


def is_type_local_workload(obj: Any) -> bool:
    """True if ``obj`` was read from a local file and carries its source path."""
    return isinstance(obj, Mapping) and PATH_KEY in obj


class BaseObject:
    """A wrapper exposing the common metadata of an object dictionary."""

    object_type: ObjectType = ObjectType.BASE

    def __init__(self, obj: dict[str, Any] | None = None) -> None:
        self.object: dict[str, Any] = {} if obj is None else obj

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.object!r})"

    def _metadata(self) -> dict[str, Any]:
        metadata = self.object.get("metadata")
        if not isinstance(metadata, dict):
            metadata = {}
            self.object["metadata"] = metadata
        return metadata

    @property
    def api_version(self) -> str:
        return _string(self.object.get("apiVersion"))

    @api_version.setter
    def api_version(self, value: str) -> None:
        self.object["apiVersion"] = value

    @property
    def kind(self) -> str:
        return _string(self.object.get("kind"))

    @kind.setter
    def kind(self, value: str) -> None:
        self.object["kind"] = value

    @property
    def name(self) -> str:
        return _string(inspect_map(self.object, "metadata", "name"))

    @name.setter
    def name(self, value: str) -> None:
        self._metadata()["name"] = value

    @property
    def namespace(self) -> str:
        return _string(inspect_map(self.object, "metadata", "namespace"))

    @namespace.setter
    def namespace(self, value: str) -> None:
        self._metadata()["namespace"] = value

    def get_id(self) -> str:
        """Return "<group>/<version>/<namespace>/<kind>/<name>"."""
        group_version = join_group_version(*split_api_version(self.api_version))
        return f"{group_version}/{self.namespace}/{self.kind}/{self.name}"


def _string_map(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        return {}
    return {str(k): v for k, v in value.items() if isinstance(v, str)}


class WorkloadObject(BaseObject):
    """A single Kubernetes resource."""

    object_type = ObjectType.WORKLOAD

    @property
    def labels(self) -> dict[str, str]:
        return _string_map(inspect_map(self.object, "metadata", "labels"))

    @property
    def annotations(self) -> dict[str, str]:
        return _string_map(inspect_map(self.object, "metadata", "annotations"))


class ListWorkloadsObject(BaseObject):
    """A Kubernetes list object holding several resources."""

    object_type = ObjectType.LIST_WORKLOADS

    @property
    def items(self) -> list[dict[str, Any]]:
        items = self.object.get("items")
        if not isinstance(items, list):
            return []
        return [item for item in items if isinstance(item, dict)]


class LocalWorkload(BaseObject):
    """A resource read from a local file, identified also by its file path."""

    object_type = ObjectType.LOCAL_WORKLOAD

    @property
    def path(self) -> str:
        return _string(self.object.get(PATH_KEY))

    @path.setter
    def path(self, value: str) -> None:
        self.object[PATH_KEY] = value

    def get_id(self) -> str:
        return f"path={fnv32a(self.path)}/api={super().get_id()}"

    def delete_path_entry(self) -> None:
        """Remove the source path from the wrapped object."""
        self.object.pop(PATH_KEY, None)


def list_meta_ids(objects: Iterable[Any]) -> list[str]:
    """Return the IDs of the given wrapped objects, in order."""
    return [obj.get_id() for obj in objects]