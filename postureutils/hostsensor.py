"""Envelopes for data collected from nodes by the host sensor."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from postureutils.objects import ObjectType, join_group_version, split_api_version

GROUP_HOST_SENSOR = "hostdata.kubescape.cloud"
VERSION = "v1beta0"


def is_type_host_sensor(obj: Any) -> bool:
    """True if the object's API group is the host sensor group."""
    if not isinstance(obj, Mapping):
        return False
    api_version = obj.get("apiVersion")
    if not isinstance(api_version, str):
        return False
    return api_version.split("/")[0] == GROUP_HOST_SENSOR


def _optional_string(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _decode(obj: Mapping[str, Any]) -> dict[str, Any]:
    metadata = obj.get("metadata")
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, Mapping):
        raise ValueError("field 'metadata' must be an object")
    return {
        "api_version": _optional_string(obj, "apiVersion"),
        "kind": _optional_string(obj, "kind"),
        "name": _optional_string(metadata, "name"),
        "data": copy.deepcopy(obj.get("data")),
    }


@dataclass
class HostSensorDataEnvelope:
    """Data collected from a node; ``name`` is the node name."""

    api_version: str = ""
    kind: str = ""
    name: str = ""
    data: Any = None

    object_type: ClassVar[ObjectType] = ObjectType.HOST_SENSOR

    @property
    def namespace(self) -> str:
        """Host sensor data is not namespaced."""
        return ""

    @namespace.setter
    def namespace(self, value: str) -> None:
        pass

    @property
    def object(self) -> dict[str, Any]:
        return self.to_object()

    @classmethod
    def from_object(cls, obj: Mapping[str, Any]) -> HostSensorDataEnvelope:
        """Build an envelope from a raw object; raise ValueError if it does not fit."""
        if not is_type_host_sensor(obj):
            raise ValueError("object is not host sensor data")
        return cls(**_decode(obj))

    def to_object(self) -> dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {"name": self.name},
            "data": copy.deepcopy(self.data),
        }

    def update_from_object(self, obj: Mapping[str, Any]) -> None:
        """Replace the contents from a raw object; objects that do not fit are ignored."""
        if not is_type_host_sensor(obj):
            return
        try:
            fields = _decode(obj)
        except ValueError:
            return
        for key, value in fields.items():
            setattr(self, key, value)

    def get_id(self) -> str:
        """Return "<group>/<version>/<kind>/<name>"."""
        group_version = join_group_version(*split_api_version(self.api_version))
        return f"{group_version}/{self.kind}/{self.name}"