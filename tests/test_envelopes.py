import pytest

from postureutils.envelopes import (
    RELATED_OBJECTS_KEY,
    RegoResponseVectorObject,
    get_object_type,
    is_type_rego_response_vector,
    list_map_to_meta,
    new_object,
)
from postureutils.hostsensor import HostSensorDataEnvelope
from postureutils.objects import (
    PATH_KEY,
    BaseObject,
    ListWorkloadsObject,
    LocalWorkload,
    ObjectType,
    WorkloadObject,
)


def subject_dict():
    return {
        "namespace": "",
        "group": "",
        "name": "MySubject",
        "kind": "Subject",
        "relatedObjects": None,
        "failedCreteria": "RBAC",
    }


def deployment_dict():
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": "x", "namespace": "default"},
    }


HOST = {
    "apiVersion": "hostdata.kubescape.cloud/v1beta0",
    "kind": "OsReleaseFile",
    "metadata": {"name": "node-a"},
}


def test_external_resource_id():
    assert RegoResponseVectorObject(subject_dict()).get_id() == "//Subject/MySubject"


@pytest.mark.parametrize(
    "obj, expected",
    [
        (subject_dict(), ObjectType.REGO_RESPONSE),
        (HOST, ObjectType.HOST_SENSOR),
        ({"kind": "b", PATH_KEY: "/f"}, ObjectType.LOCAL_WORKLOAD),
        (deployment_dict(), ObjectType.WORKLOAD),
        ({"apiVersion": "v1", "kind": "List", "items": []}, ObjectType.LIST_WORKLOADS),
        ({"apiVersion": "v1", "kind": "X"}, ObjectType.BASE),
        ({}, ObjectType.UNKNOWN),
    ],
)
def test_get_object_type(obj, expected):
    assert get_object_type(obj) == expected


@pytest.mark.parametrize(
    "obj, cls",
    [
        (subject_dict(), RegoResponseVectorObject),
        (HOST, HostSensorDataEnvelope),
        ({"kind": "b", PATH_KEY: "/f"}, LocalWorkload),
        (deployment_dict(), WorkloadObject),
        ({"apiVersion": "v1", "kind": "List", "items": []}, ListWorkloadsObject),
        ({"apiVersion": "v1", "kind": "X"}, BaseObject),
    ],
)
def test_new_object_picks_wrapper(obj, cls):
    assert type(new_object(obj)) is cls


def test_new_object_unrecognised():
    assert new_object(None) is None
    assert new_object({}) is None
    bad_host = dict(HOST, metadata="oops")
    assert new_object(bad_host) is None


def test_rego_response_takes_precedence():
    obj = subject_dict()
    obj[PATH_KEY] = "/f"
    assert get_object_type(obj) == ObjectType.REGO_RESPONSE


def test_list_map_to_meta_skips_unknown():
    result = list_map_to_meta([deployment_dict(), {}, None, subject_dict()])
    assert [r.kind for r in result] == ["Deployment", "Subject"]


def test_related_objects():
    obj = subject_dict()
    obj[RELATED_OBJECTS_KEY] = [deployment_dict(), "not-a-dict", {}]
    related = RegoResponseVectorObject(obj).get_related_objects()
    assert len(related) == 1
    assert related[0].get_id() == "apps/v1/default/Deployment/x"


def test_id_with_related_objects():
    r = RegoResponseVectorObject(subject_dict())
    r.set_related_objects([deployment_dict()])
    assert r.get_id() == "//Subject/MySubject/apps/v1/default/Deployment/x"


def test_json_round_trip():
    r = RegoResponseVectorObject(subject_dict())
    again = RegoResponseVectorObject.from_json(r.to_json())
    assert again.object == subject_dict()
    assert again.get_id() == r.get_id()


def test_from_json_none_and_errors():
    assert RegoResponseVectorObject.from_json(None).object == {}
    with pytest.raises(ValueError):
        RegoResponseVectorObject.from_json("[1]")
    with pytest.raises(ValueError):
        RegoResponseVectorObject.from_json("{")


def test_api_version_falls_back_to_api_group():
    r = RegoResponseVectorObject({"apiGroup": "rbac.authorization.k8s.io"})
    assert r.api_version == "rbac.authorization.k8s.io"
    r.api_version = "v1"
    assert r.api_version == "v1"


def test_setters():
    r = RegoResponseVectorObject()
    r.name = "n"
    r.kind = "User"
    r.namespace = "ns"
    assert r.object == {"name": "n", "kind": "User", "namespace": "ns"}
    assert r.object_type == ObjectType.REGO_RESPONSE


def test_is_type_rego_response_vector():
    assert is_type_rego_response_vector(subject_dict()) is True
    obj = subject_dict()
    del obj[RELATED_OBJECTS_KEY]
    assert is_type_rego_response_vector(obj) is False
    assert is_type_rego_response_vector(None) is False