import pytest

from postureutils.statuses import (
    ScanningStatus as S,
    ScanningSubStatus as Sub,
    StatusInfo,
    compare,
    compare_status_and_sub_status,
    convert_status_to_new_status,
)


def test_compare():
    assert compare(S.FAILED, S.FAILED) == S.FAILED
    assert compare(S.FAILED, S.SKIPPED) == S.FAILED
    assert compare(S.SKIPPED, S.FAILED) == S.FAILED
    assert compare(S.PASSED, S.FAILED) == S.FAILED
    assert compare(S.SKIPPED, S.PASSED) == S.SKIPPED
    assert compare(S.PASSED, S.PASSED) == S.PASSED


def test_compare_unknown():
    assert compare(S.UNKNOWN, S.UNKNOWN) == S.UNKNOWN
    assert compare(S.UNKNOWN, S.PASSED) == S.PASSED


@pytest.mark.parametrize(
    "args, expected",
    [
        ((S.FAILED, S.PASSED, Sub.UNKNOWN, Sub.UNKNOWN), (S.FAILED, Sub.UNKNOWN)),
        ((S.FAILED, S.SKIPPED, Sub.UNKNOWN, Sub.CONFIGURATION), (S.FAILED, Sub.UNKNOWN)),
        ((S.PASSED, S.PASSED, Sub.UNKNOWN, Sub.IRRELEVANT), (S.PASSED, Sub.IRRELEVANT)),
        ((S.PASSED, S.PASSED, Sub.EXCEPTION, Sub.UNKNOWN), (S.PASSED, Sub.EXCEPTION)),
        ((S.SKIPPED, S.PASSED, Sub.CONFIGURATION, Sub.UNKNOWN), (S.SKIPPED, Sub.CONFIGURATION)),
        ((S.SKIPPED, S.PASSED, Sub.INTEGRATION, Sub.UNKNOWN), (S.SKIPPED, Sub.INTEGRATION)),
        ((S.PASSED, S.SKIPPED, Sub.UNKNOWN, Sub.MANUAL_REVIEW), (S.SKIPPED, Sub.MANUAL_REVIEW)),
        ((S.PASSED, S.SKIPPED, Sub.UNKNOWN, Sub.REQUIRES_REVIEW), (S.SKIPPED, Sub.REQUIRES_REVIEW)),
    ],
)
def test_compare_status_and_sub_status(args, expected):
    assert compare_status_and_sub_status(*args) == expected


def test_exception_wins_over_irrelevant():
    result = compare_status_and_sub_status(S.PASSED, S.PASSED, Sub.IRRELEVANT, Sub.EXCEPTION)
    assert result == (S.PASSED, Sub.EXCEPTION)


def test_convert_status_to_new_status():
    assert convert_status_to_new_status(S.EXCLUDED) == (S.PASSED, Sub.EXCEPTION)
    assert convert_status_to_new_status(S.IRRELEVANT) == (S.PASSED, Sub.IRRELEVANT)
    assert convert_status_to_new_status(S.FAILED) == (S.FAILED, Sub.UNKNOWN)


def test_status_info_predicates():
    info = StatusInfo(S.SKIPPED, "missing")
    assert info.is_skipped()
    assert not info.is_passed()
    assert not info.is_failed()
    assert StatusInfo(S.FAILED).is_failed()
    assert StatusInfo(S.PASSED).is_passed()
    assert StatusInfo().status == S.UNKNOWN