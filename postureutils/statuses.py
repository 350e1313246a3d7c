"""Scanning statuses, sub-statuses and how they combine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScanningStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    UNKNOWN = ""
    # Deprecated statuses, kept for reading old reports.
    EXCLUDED = "excluded"
    IRRELEVANT = "irrelevant"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class ScanningSubStatus(str, Enum):
    EXCEPTION = "w/exceptions"
    IRRELEVANT = "irrelevant"
    CONFIGURATION = "configuration"
    INTEGRATION = "integration"
    REQUIRES_REVIEW = "requires review"
    MANUAL_REVIEW = "manual review"
    UNKNOWN = ""

    def __str__(self) -> str:
        return self.value


class StatusMsg(str, Enum):
    CONFIGURATION_INFO = "Control missing configuration"
    REQUIRES_REVIEW_INFO = "Control type is requires-review"
    MANUAL_REVIEW_INFO = "Control type is manual-review"

    def __str__(self) -> str:
        return self.value


@dataclass
class StatusInfo:
    """A status together with a free-text explanation."""

    status: ScanningStatus = ScanningStatus.UNKNOWN
    info: str = ""

    def is_passed(self) -> bool:
        return self.status == ScanningStatus.PASSED

    def is_failed(self) -> bool:
        return self.status == ScanningStatus.FAILED

    def is_skipped(self) -> bool:
        return self.status == ScanningStatus.SKIPPED


def compare(a: ScanningStatus, b: ScanningStatus) -> ScanningStatus:
    """Return the more significant of two statuses: failed, then skipped, then passed."""
    if ScanningStatus.FAILED in (a, b):
        return ScanningStatus.FAILED
    if ScanningStatus.SKIPPED in (a, b):
        return ScanningStatus.SKIPPED
    if a == ScanningStatus.UNKNOWN and b == ScanningStatus.UNKNOWN:
        return ScanningStatus.UNKNOWN
    return ScanningStatus.PASSED


_PASSED_SUB_STATUS_ORDER = (
    ScanningSubStatus.EXCEPTION,
    ScanningSubStatus.IRRELEVANT,
)

_SKIPPED_SUB_STATUS_ORDER = (
    ScanningSubStatus.CONFIGURATION,
    ScanningSubStatus.INTEGRATION,
    ScanningSubStatus.REQUIRES_REVIEW,
    ScanningSubStatus.MANUAL_REVIEW,
)


def compare_status_and_sub_status(
    a: ScanningStatus,
    b: ScanningStatus,
    a_sub: ScanningSubStatus,
    b_sub: ScanningSubStatus,
) -> tuple[ScanningStatus, ScanningSubStatus]:
    """Combine two status/sub-status pairs into the more significant pair."""
    status = compare(a, b)
    if status == ScanningStatus.PASSED:
        candidates = _PASSED_SUB_STATUS_ORDER
    elif status == ScanningStatus.SKIPPED:
        candidates = _SKIPPED_SUB_STATUS_ORDER
    else:
        candidates = ()
    for sub in candidates:
        if sub in (a_sub, b_sub):
            return status, sub
    return status, ScanningSubStatus.UNKNOWN


def convert_status_to_new_status(
    status: ScanningStatus,
) -> tuple[ScanningStatus, ScanningSubStatus]:
    """Translate the deprecated excluded/irrelevant statuses to passed with a sub-status."""
    if status == ScanningStatus.EXCLUDED:
        return ScanningStatus.PASSED, ScanningSubStatus.EXCEPTION
    if status == ScanningStatus.IRRELEVANT:
        return ScanningStatus.PASSED, ScanningSubStatus.IRRELEVANT
    return status, ScanningSubStatus.UNKNOWN