"""Choosing the right wrapper for a raw object, and rego response objects."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, Union

from postureutils.hostsensor import HostSensorDataEnvelope, is_type_host_sensor
from postureutils.objects import (
    BaseObject,
    ListWorkloadsObject,
    LocalWorkload,
    ObjectType,
    WorkloadObject,
    is_base_object,
    is_type_list_workloads,
    is_type_local_workload,
    is_type_workload,
)

RELATED_OBJECTS_KEY = "relatedObjects"


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


class RegoResponseVectorObject:
    """A non-Kubernetes object returned by a rule, such as a subject.

    Expected keys: name, namespace, kind, apiVersion (may be empty) and
    relatedObjects, the objects to be shown together with this one.
    """

    object_type = ObjectType.REGO_RESPONSE

    def __init__(self, obj: dict[str, Any] | None = None) -> None:
        self.object: dict[str, Any] = {} if obj is None else obj

    def __repr__(self) -> str:
        return f"RegoResponseVectorObject({self.object!r})"

    @classmethod
    def from_json(cls, data: str | bytes | None) -> RegoResponseVectorObject:
        """Parse a JSON object; None gives an empty object."""
        if data is None:
            return cls({})
        parsed = json.loads(data)
        if not isinstance(parsed, dict):
            raise ValueError("rego response must be a JSON object")
        return cls(parsed)

    def to_json(self) -> str:
        return json.dumps(self.object, sort_keys=True, separators=(",", ":"))

    @property
    def api_version(self) -> str:
        if "apiVersion" in self.object:
            return _string(self.object["apiVersion"])
        if "apiGroup" in self.object:
            return _string(self.object["apiGroup"])
        return ""

    @api_version.setter
    def api_version(self, value: str) -> None:
        self.object["apiVersion"] = value

    @property
    def namespace(self) -> str:
        return _string(self.object.get("namespace"))

    @namespace.setter
    def namespace(self, value: str) -> None:
        self.object["namespace"] = value

    @property
    def name(self) -> str:
        return _string(self.object.get("name"))

    @name.setter
    def name(self, value: str) -> None:
        self.object["name"] = value

    @property
    def kind(self) -> str:
        return _string(self.object.get("kind"))

    @kind.setter
    def kind(self, value: str) -> None:
        self.object["kind"] = value

    def set_related_objects(self, related_objects: Iterable[dict[str, Any]]) -> None:
        self.object[RELATED_OBJECTS_KEY] = list(related_objects)

    def get_related_objects(self) -> list[MetadataObject]:
        """Wrap every recognisable related object; others are skipped."""
        related = self.object.get(RELATED_OBJECTS_KEY)
        if not isinstance(related, (list, tuple)):
            return []
        wrapped = (new_object(item) for item in related if isinstance(item, dict))
        return [obj for obj in wrapped if obj is not None]

    def get_id(self) -> str:
        """Join, sorted, the IDs of the related objects and of this object."""
        ids = [obj.get_id() for obj in self.get_related_objects()]
        ids.append(f"{self.api_version}/{self.namespace}/{self.kind}/{self.name}")
        return "/".join(sorted(ids))


MetadataObject = Union[
    RegoResponseVectorObject,
    HostSensorDataEnvelope,
    LocalWorkload,
    WorkloadObject,
    ListWorkloadsObject,
    BaseObject,
]


def is_type_rego_response_vector(obj: Any) -> bool:
    """True if the object has a kind, a name and related objects."""
    if not isinstance(obj, Mapping):
        return False
    return all(key in obj for key in ("kind", "name", RELATED_OBJECTS_KEY))


def get_object_type(obj: Any) -> ObjectType:
    """Classify a raw object; the more specific types are tested first."""
    if is_type_rego_response_vector(obj):
        return ObjectType.REGO_RESPONSE
    if is_type_host_sensor(obj):
        return ObjectType.HOST_SENSOR
    if is_type_local_workload(obj):
        return ObjectType.LOCAL_WORKLOAD
    if is_type_workload(obj):
        return ObjectType.WORKLOAD
    if is_type_list_workloads(obj):
        return ObjectType.LIST_WORKLOADS
    if is_base_object(obj):
        return ObjectType.BASE
    return ObjectType.UNKNOWN


def new_object(obj: dict[str, Any] | None) -> MetadataObject | None:
    """Wrap a raw object in the matching envelope, or return None if none fits."""
    if obj is None:
        return None
    object_type = get_object_type(obj)
    if object_type == ObjectType.REGO_RESPONSE:
        return RegoResponseVectorObject(obj)
    if object_type == ObjectType.HOST_SENSOR:
        try:
            return HostSensorDataEnvelope.from_object(obj)
        except ValueError:
            return None
    if object_type == ObjectType.LOCAL_WORKLOAD:
        return LocalWorkload(obj)
    if object_type == ObjectType.WORKLOAD:
        return WorkloadObject(obj)
    if object_type == ObjectType.LIST_WORKLOADS:
        return ListWorkloadsObject(obj)
    if object_type == ObjectType.BASE:
        return BaseObject(obj)
    return None


def list_map_to_meta(resource_map: Iterable[dict[str, Any] | None]) -> list[MetadataObject]:
    """Wrap every recognisable object, dropping the rest."""
    wrapped = (new_object(obj) for obj in resource_map)
    return [obj for obj in wrapped if obj is not None]