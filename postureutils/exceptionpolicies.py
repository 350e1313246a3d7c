"""Posture exception policies and the designators that select resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ATTRIBUTE_CLUSTER = "cluster"
ATTRIBUTE_NAMESPACE = "namespace"
ATTRIBUTE_KIND = "kind"
ATTRIBUTE_NAME = "name"
ATTRIBUTE_PATH = "path"

DESIGNATOR_ATTRIBUTES = "Attributes"
DESIGNATOR_ATTRIBUTE = "Attribute"

_RESERVED_ATTRIBUTES = {
    ATTRIBUTE_CLUSTER,
    ATTRIBUTE_NAMESPACE,
    ATTRIBUTE_KIND,
    ATTRIBUTE_NAME,
    ATTRIBUTE_PATH,
}


class PostureExceptionAction(str, Enum):
    ALERT_ONLY = "alertOnly"
    DISABLE = "disable"

    def __str__(self) -> str:
        return self.value


@dataclass
class PosturePolicy:
    """Selects the frameworks, controls and rules an exception applies to."""

    framework_name: str = ""
    control_name: str = ""
    control_id: str = ""
    rule_name: str = ""

    def is_empty(self) -> bool:
        return not (self.framework_name or self.control_name or self.control_id or self.rule_name)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PosturePolicy:
        return cls(
            framework_name=data.get("frameworkName") or "",
            control_name=data.get("controlName") or "",
            control_id=data.get("controlID") or "",
            rule_name=data.get("ruleName") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "frameworkName": self.framework_name,
            "controlName": self.control_name,
            "controlID": self.control_id,
            "ruleName": self.rule_name,
        }


@dataclass(frozen=True)
class DesignatorAttributes:
    """The resource selectors of a designator, split into well-known fields and labels."""

    cluster: str = ""
    namespace: str = ""
    kind: str = ""
    name: str = ""
    path: str = ""
    labels: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (
            self.cluster or self.namespace or self.kind or self.name or self.path or self.labels
        )


@dataclass
class PortalDesignator:
    """Describes which resources an exception policy covers."""

    designator_type: str = DESIGNATOR_ATTRIBUTES
    wlid: str = ""
    wild_wlid: str = ""
    sid: str = ""
    attributes: dict[str, str] = field(default_factory=dict)

    def digest(self) -> DesignatorAttributes:
        """Return the selectors; only attribute designators select anything."""
        if self.designator_type.lower() not in (
            DESIGNATOR_ATTRIBUTES.lower(),
            DESIGNATOR_ATTRIBUTE.lower(),
        ):
            return DesignatorAttributes()
        attrs = self.attributes or {}
        return DesignatorAttributes(
            cluster=attrs.get(ATTRIBUTE_CLUSTER, ""),
            namespace=attrs.get(ATTRIBUTE_NAMESPACE, ""),
            kind=attrs.get(ATTRIBUTE_KIND, ""),
            name=attrs.get(ATTRIBUTE_NAME, ""),
            path=attrs.get(ATTRIBUTE_PATH, ""),
            labels={k: v for k, v in attrs.items() if k not in _RESERVED_ATTRIBUTES},
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PortalDesignator:
        return cls(
            designator_type=data.get("designatorType") or "",
            wlid=data.get("wlid") or "",
            wild_wlid=data.get("wildwlid") or "",
            sid=data.get("sid") or "",
            attributes=dict(data.get("attributes") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"designatorType": self.designator_type}
        if self.wlid:
            result["wlid"] = self.wlid
        if self.wild_wlid:
            result["wildwlid"] = self.wild_wlid
        if self.sid:
            result["sid"] = self.sid
        if self.attributes:
            result["attributes"] = dict(self.attributes)
        return result


@dataclass
class PostureExceptionPolicy:
    """An exception that marks matching failed resources as accepted."""

    name: str = ""
    guid: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    policy_type: str = ""
    creation_time: str = ""
    actions: list[str] = field(default_factory=list)
    resources: list[PortalDesignator] = field(default_factory=list)
    posture_policies: list[PosturePolicy] = field(default_factory=list)

    def is_disable(self) -> bool:
        return PostureExceptionAction.DISABLE in self.actions

    def is_alert_only(self) -> bool:
        """True if the policy only alerts, without disabling the check."""
        if self.is_disable():
            return False
        return PostureExceptionAction.ALERT_ONLY in self.actions

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PostureExceptionPolicy:
        return cls(
            name=data.get("name") or "",
            guid=data.get("guid") or "",
            attributes=dict(data.get("attributes") or {}),
            policy_type=data.get("policyType") or "",
            creation_time=data.get("creationTime") or "",
            actions=[str(a) for a in data.get("actions") or []],
            resources=[PortalDesignator.from_dict(r) for r in data.get("resources") or []],
            posture_policies=[
                PosturePolicy.from_dict(p) for p in data.get("posturePolicies") or []
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"guid": self.guid, "name": self.name}
        if self.attributes:
            result["attributes"] = dict(self.attributes)
        result.update(
            {
                "policyType": self.policy_type,
                "creationTime": self.creation_time,
                "actions": [getattr(a, "value", a) for a in self.actions],
                "resources": [r.to_dict() for r in self.resources],
                "posturePolicies": [p.to_dict() for p in self.posture_policies],
            }
        )
        return result