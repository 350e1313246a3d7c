# postureutils

Data models and helpers for working with Kubernetes security posture scan
data: scan statuses, exception policies, attack tracks, envelopes that wrap
scanned objects held as plain dictionaries, and sets of resource IDs.

## Installation

```
pip install postureutils
```

It needs Python 3.10 or later and has no runtime dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `postureutils.statuses` | `ScanningStatus`, `ScanningSubStatus`, `StatusMsg`, `StatusInfo`, `compare`, `compare_status_and_sub_status`, `convert_status_to_new_status` |
| `postureutils.exceptionpolicies` | `PostureExceptionPolicy`, `PosturePolicy`, `PortalDesignator`, `DesignatorAttributes`, `PostureExceptionAction` |
| `postureutils.attacktrack` | `AttackTrack`, `AttackTrackStep`, `AttackTrackControl`, `AttackTrackControlsLookup`, `AttackTrackAllPathsHandler`, `AttackTrackControlMock`, `attack_track_mock` |
| `postureutils.objects` | `ObjectType`, `BaseObject`, `WorkloadObject`, `ListWorkloadsObject`, `LocalWorkload` and helpers: `inspect_map`, `split_api_version`, `join_group_version`, `fnv32a`, `is_base_object`, `is_type_workload`, `is_type_list_workloads`, `is_type_local_workload`, `list_meta_ids` |
| `postureutils.hostsensor` | `HostSensorDataEnvelope`, `is_type_host_sensor` |
| `postureutils.envelopes` | `RegoResponseVectorObject`, `new_object`, `get_object_type`, `list_map_to_meta`, `is_type_rego_response_vector` |
| `postureutils.resourceids` | `ResourcesIDs`, `percentage` |
| `postureutils.scanapi` | `PostScanRequest`, `ScanResponse`, `NotificationPolicyKind`, `ScanResponseType` |

## Examples

Combining scan statuses. Failed wins over skipped, skipped over passed:

```python
from postureutils.statuses import (
    ScanningStatus, ScanningSubStatus, compare, compare_status_and_sub_status,
)

compare(ScanningStatus.PASSED, ScanningStatus.SKIPPED)  # ScanningStatus.SKIPPED

compare_status_and_sub_status(
    ScanningStatus.PASSED, ScanningStatus.PASSED,
    ScanningSubStatus.UNKNOWN, ScanningSubStatus.IRRELEVANT,
)  # (ScanningStatus.PASSED, ScanningSubStatus.IRRELEVANT)
```

Reading an exception policy and the resources it selects:

```python
from postureutils.exceptionpolicies import PostureExceptionPolicy

policy = PostureExceptionPolicy.from_dict({
    "name": "ignore-web",
    "policyType": "postureExceptionPolicy",
    "actions": ["alertOnly"],
    "resources": [{
        "designatorType": "Attributes",
        "attributes": {"namespace": "default", "app": "web"},
    }],
    "posturePolicies": [{"frameworkName": "MIT.*"}],
})
policy.is_alert_only()              # True
attrs = policy.resources[0].digest()
attrs.namespace                     # "default"
attrs.labels                        # {"app": "web"}
```

Wrapping raw objects and computing their IDs:

```python
from postureutils.envelopes import new_object

deployment = new_object({
    "apiVersion": "apps/v1",
    "kind": "Deployment",
    "metadata": {"name": "web", "namespace": "default"},
})
deployment.get_id()   # "apps/v1/default/Deployment/web"

subject = new_object({"kind": "Subject", "name": "MySubject", "relatedObjects": []})
subject.get_id()      # "//Subject/MySubject"
```

`new_object` tries, in order: rego response objects (a kind, a name and
`relatedObjects`), host sensor data (API group `hostdata.kubescape.cloud`),
local workloads (a `sourcePath` key), single workloads, list objects and
finally any object with an `apiVersion` and a `kind`. It returns `None` when
nothing fits.

Finding the attack paths of an attack track:

```python
from postureutils.attacktrack import (
    AttackTrackAllPathsHandler, AttackTrackControlMock, AttackTrackControlsLookup,
    AttackTrackStep, attack_track_mock,
)

track = attack_track_mock(
    AttackTrackStep(name="A", sub_steps=[AttackTrackStep(name="B"), AttackTrackStep(name="C")])
)
controls = {
    "1": AttackTrackControlMock(control_id="1", categories=["A"]),
    "2": AttackTrackControlMock(control_id="2", categories=["C"]),
}
lookup = AttackTrackControlsLookup.build([track], ["1", "2"], controls)
paths = AttackTrackAllPathsHandler(track, lookup).calculate_all_paths()
[[step.name for step in path] for path in paths]   # [["A", "C"]]
```

`AttackTrack.is_valid()` checks that the steps form a tree, and
`AttackTrack.from_dict` / `to_dict` read and write the JSON form.

Keeping resource IDs in their most severe list:

```python
from postureutils.resourceids import ResourcesIDs, percentage

ids = ResourcesIDs()
ids.set_failed(["a", "b", "a"])
ids.set_warning(["b", "c"])
ids.set_passed(["a", "c", "d"])
ids.all_resources()   # ["a", "b", "c", "d"]
percentage(4, 1)      # 75
```

## What it does not do

The package holds models and helpers only. It has no models for rules,
controls, frameworks or scan reports, it does not apply exception policies to
scan results, does not map base scores to severities, and does not download
or store rule libraries. It has no command-line tool and no server; the
`scanapi` module only describes the request and response objects.

## Running the tests

```
pip install -e ".[test]"
pytest
```