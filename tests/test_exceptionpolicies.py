import json

from postureutils.exceptionpolicies import (
    ATTRIBUTE_CLUSTER,
    ATTRIBUTE_NAMESPACE,
    DESIGNATOR_ATTRIBUTES,
    PortalDesignator,
    PostureExceptionAction,
    PostureExceptionPolicy,
    PosturePolicy,
)


def _alert_only_policy():
    return PostureExceptionPolicy(
        name="postureExceptionPolicyAlertOnlyMock",
        policy_type="postureExceptionPolicy",
        actions=[PostureExceptionAction.ALERT_ONLY],
        resources=[
            PortalDesignator(
                designator_type=DESIGNATOR_ATTRIBUTES,
                attributes={ATTRIBUTE_NAMESPACE: "default", ATTRIBUTE_CLUSTER: "unittest"},
            )
        ],
        posture_policies=[PosturePolicy(framework_name="MIT.*")],
    )


def test_digest_splits_well_known_attributes_from_labels():
    designator = PortalDesignator(
        attributes={
            ATTRIBUTE_NAMESPACE: "default",
            ATTRIBUTE_CLUSTER: "unittest",
            "myLabelOrAnnotation": "static_test",
        }
    )
    digest = designator.digest()
    assert digest.namespace == "default"
    assert digest.cluster == "unittest"
    assert digest.kind == ""
    assert digest.labels == {"myLabelOrAnnotation": "static_test"}


def test_digest_of_empty_attributes_is_empty():
    assert PortalDesignator(attributes={}).digest().is_empty()
    assert not PortalDesignator(attributes={"app": "web"}).digest().is_empty()


def test_non_attribute_designator_selects_nothing():
    designator = PortalDesignator(designator_type="Sid", attributes={"app": "web"})
    assert designator.digest().is_empty()


def test_is_alert_only():
    assert _alert_only_policy().is_alert_only()
    assert not PostureExceptionPolicy().is_alert_only()


def test_disable_overrides_alert_only():
    policy = PostureExceptionPolicy(
        actions=[PostureExceptionAction.ALERT_ONLY, PostureExceptionAction.DISABLE]
    )
    assert not policy.is_alert_only()


def test_round_trip_through_dict():
    policy = _alert_only_policy()
    assert PostureExceptionPolicy.from_dict(policy.to_dict()) == policy


def test_round_trip_through_json():
    policy = _alert_only_policy()
    restored = PostureExceptionPolicy.from_dict(json.loads(json.dumps(policy.to_dict())))
    assert restored.is_alert_only()
    assert restored.resources[0].digest().namespace == "default"
    assert restored.posture_policies[0].framework_name == "MIT.*"


def test_from_dict_with_missing_fields():
    policy = PostureExceptionPolicy.from_dict({"name": "only-name"})
    assert policy.name == "only-name"
    assert policy.actions == []
    assert policy.resources == []
    assert policy.posture_policies == []


def test_empty_posture_policy():
    assert PosturePolicy().is_empty()
    assert not PosturePolicy(rule_name="rule.*vk").is_empty()
    assert PosturePolicy.from_dict(PosturePolicy(control_id="C-0016").to_dict()) == PosturePolicy(
        control_id="C-0016"
    )