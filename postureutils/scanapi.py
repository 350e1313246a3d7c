"""Request and response objects of the scan HTTP API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NotificationPolicyKind(str, Enum):
    FRAMEWORK = "Framework"
    CONTROL = "Control"
    RULE = "Rule"

    def __str__(self) -> str:
        return self.value


class ScanResponseType(str, Enum):
    ID = "id"  # deprecated: busy / notBusy are returned instead
    ERROR = "error"
    RESULTS_V1 = "v1results"
    BUSY = "busy"
    NOT_BUSY = "notBusy"
    READY = "ready"

    def __str__(self) -> str:
        return self.value


def _as_kind(value: Any) -> str:
    if not value:
        return ""
    try:
        return NotificationPolicyKind(value)
    except ValueError:
        return str(value)


def _as_response_type(value: Any) -> str:
    if not value:
        return ""
    try:
        return ScanResponseType(value)
    except ValueError:
        return str(value)


def _optional_bool(value: Any) -> bool | None:
    return None if value is None else bool(value)


@dataclass
class PostScanRequest:
    """A request to trigger a scan; ``logger`` is not part of the wire format."""

    logger: str = ""
    format: str = ""
    account: str = ""
    fail_threshold: float = 0.0
    excluded_namespaces: list[str] = field(default_factory=list)
    include_namespaces: list[str] = field(default_factory=list)
    target_names: list[str] = field(default_factory=list)
    target_type: str = ""
    submit: bool | None = None
    host_scanner: bool | None = None
    keep_local: bool | None = None
    use_cached_artifacts: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.format:
            result["format"] = self.format
        if self.account:
            result["account"] = self.account
        if self.fail_threshold:
            result["failThreshold"] = self.fail_threshold
        for key, values in (
            ("excludedNamespaces", self.excluded_namespaces),
            ("includeNamespaces", self.include_namespaces),
            ("targetNames", self.target_names),
        ):
            if values:
                result[key] = list(values)
        if self.target_type:
            result["targetType"] = str(self.target_type)
        for key, flag in (
            ("submit", self.submit),
            ("hostScanner", self.host_scanner),
            ("keepLocal", self.keep_local),
            ("useCachedArtifacts", self.use_cached_artifacts),
        ):
            if flag is not None:
                result[key] = flag
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PostScanRequest:
        return cls(
            format=data.get("format") or "",
            account=data.get("account") or "",
            fail_threshold=float(data.get("failThreshold") or 0),
            excluded_namespaces=[str(v) for v in data.get("excludedNamespaces") or []],
            include_namespaces=[str(v) for v in data.get("includeNamespaces") or []],
            target_names=[str(v) for v in data.get("targetNames") or []],
            target_type=_as_kind(data.get("targetType")),
            submit=_optional_bool(data.get("submit")),
            host_scanner=_optional_bool(data.get("hostScanner")),
            keep_local=_optional_bool(data.get("keepLocal")),
            use_cached_artifacts=_optional_bool(data.get("useCachedArtifacts")),
        )


@dataclass
class ScanResponse:
    """A scan response: its scan ID, its type and an optional payload."""

    id: str = ""
    type: str = ""
    response: Any = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "type": str(self.type)}
        if self.response is not None:
            result["response"] = self.response
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ScanResponse:
        return cls(
            id=data.get("id") or "",
            type=_as_response_type(data.get("type")),
            response=data.get("response"),
        )