"""Tests de la passe de notification des aliments proches de la péremption"""

import logging
from datetime import datetime, timezone

import pytest

from app.schemas.notification import ExpiringItem, GroupMemberTokens
from app.services.notification_service import (
    ExpiryNotificationService,
    build_expiry_message,
)
from app.tests.fakes import FakeInventoryReader, FakeMembershipReader, RecordingPushSender
from app.utils.retry import RetryPolicy

NOW = datetime(2024, 1, 13, 10, 0, 0, tzinfo=timezone.utc)


def make_item(item_id=1, expiry=datetime(2024, 1, 14, 9, 0), group_id=7, name="Sữa tươi"):
    return ExpiringItem(
        id=item_id, expiry_date=expiry, food_name=name, fridge_id=3, group_id=group_id
    )


def make_service(inventory, memberships, push, retry_policy=None):
    kwargs = {"clock": lambda: NOW}
    if retry_policy is not None:
        kwargs["retry_policy"] = retry_policy
    return ExpiryNotificationService(inventory, memberships, push, **kwargs)


@pytest.fixture
def two_members():
    return {
        7: [
            GroupMemberTokens(user_id=1, tokens=["a", "null", "b"]),
            GroupMemberTokens(user_id=2, tokens=[]),
        ]
    }


def test_queries_window_bounds():
    inventory = FakeInventoryReader()
    make_service(inventory, FakeMembershipReader(), RecordingPushSender()).run()

    assert inventory.calls == [
        (datetime(2024, 1, 13, 0, 0, 0), datetime(2024, 1, 14, 23, 59, 59))
    ]


def test_window_boundary_items():
    inside = make_item(item_id=1, expiry=datetime(2024, 1, 14, 23, 59, 0))
    outside = make_item(item_id=2, expiry=datetime(2024, 1, 15, 0, 0, 1))
    members = {7: [GroupMemberTokens(user_id=1, tokens=["a"])]}
    push = RecordingPushSender()

    report = make_service(
        FakeInventoryReader([inside, outside]), FakeMembershipReader(members), push
    ).run()

    assert report.items_found == 1
    assert len(push.multicasts) == 1


def test_one_multicast_per_member_with_filtered_tokens(two_members, caplog):
    push = RecordingPushSender()
    caplog.set_level(logging.INFO)

    report = make_service(
        FakeInventoryReader([make_item()]), FakeMembershipReader(two_members), push
    ).run()

    assert len(push.multicasts) == 1
    assert push.multicasts[0]["tokens"] == ["a", "b"]
    assert report.members_notified == 1
    assert report.tokens_attempted == 2
    assert report.tokens_succeeded == 2
    assert "No valid device tokens for user 2, skipping" in caplog.text
    assert "Pushed 2/2 → user 1" in caplog.text


def test_message_content():
    push = RecordingPushSender()
    members = {7: [GroupMemberTokens(user_id=1, tokens=["a"])]}
    item = make_item(expiry=datetime(2024, 1, 14, 9, 0))

    make_service(FakeInventoryReader([item]), FakeMembershipReader(members), push).run()

    sent = push.multicasts[0]
    assert sent["title"] == "⏰ Thực phẩm sắp hết hạn"
    assert sent["body"] == "Sữa tươi sẽ hết hạn trong 24h"
    assert sent["data"] == {
        "fridgeId": "3",
        "foodName": "Sữa tươi",
        "groupId": "7",
        "expirydate": "2024-01-14T09:00:00",
        "type": "FOOD_EXPIRED",
    }
    assert all(isinstance(v, str) for v in sent["data"].values())


def test_build_expiry_message_matches_item():
    message = build_expiry_message(make_item(name="Trứng gà"))

    assert message.body == "Trứng gà sẽ hết hạn trong 24h"
    assert message.data["type"] == "FOOD_EXPIRED"


def test_query_failure_aborts_pass(caplog):
    memberships = FakeMembershipReader()
    push = RecordingPushSender()
    caplog.set_level(logging.INFO)

    report = make_service(FakeInventoryReader(fail=True), memberships, push).run()

    assert report.aborted is True
    assert memberships.calls == []
    assert push.multicasts == []
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1


def test_token_failure_does_not_stop_other_results(caplog):
    members = {7: [GroupMemberTokens(user_id=1, tokens=["a", "b", "c"])]}
    push = RecordingPushSender(failing_tokens={"b"})
    caplog.set_level(logging.INFO)

    report = make_service(
        FakeInventoryReader([make_item()]), FakeMembershipReader(members), push
    ).run()

    assert report.aborted is False
    assert report.tokens_attempted == 3
    assert report.tokens_succeeded == 2
    assert "Invalid token: b" in caplog.text
    assert "Invalid token: a" not in caplog.text
    assert "Pushed 2/3 → user 1" in caplog.text


def test_dispatch_failure_for_one_member_keeps_going():
    members = {
        7: [
            GroupMemberTokens(user_id=1, tokens=["a"]),
            GroupMemberTokens(user_id=2, tokens=["b"]),
        ]
    }
    push = RecordingPushSender(broken=True)

    report = make_service(
        FakeInventoryReader([make_item(item_id=1), make_item(item_id=2)]),
        FakeMembershipReader(members),
        push,
    ).run()

    assert len(push.multicasts) == 4
    assert report.members_notified == 0
    assert report.aborted is False


def test_member_lookup_failure_skips_only_that_item():
    members = {8: [GroupMemberTokens(user_id=1, tokens=["a"])]}
    items = [make_item(item_id=1, group_id=7), make_item(item_id=2, group_id=8)]
    push = RecordingPushSender()

    report = make_service(
        FakeInventoryReader(items),
        FakeMembershipReader(members, failing_groups={7}),
        push,
    ).run()

    assert report.items_skipped == 1
    assert len(push.multicasts) == 1


def test_item_without_group_is_skipped():
    memberships = FakeMembershipReader()

    report = make_service(
        FakeInventoryReader([make_item(group_id=None)]), memberships, RecordingPushSender()
    ).run()

    assert memberships.calls == []
    assert report.items_skipped == 1


def test_group_without_members_logs_warning(caplog):
    push = RecordingPushSender()
    caplog.set_level(logging.INFO)

    make_service(FakeInventoryReader([make_item()]), FakeMembershipReader({}), push).run()

    assert push.multicasts == []
    assert "No members in group 7" in caplog.text


def test_unexpected_error_is_caught(caplog):
    class BrokenReader:
        def fetch_expiring(self, start, end):
            return None

    report = make_service(BrokenReader(), FakeMembershipReader(), RecordingPushSender()).run()

    assert report.aborted is True
    assert "Expiry notification pass failed" in caplog.text


def test_two_runs_send_identical_batches(two_members):
    push = RecordingPushSender()
    service = make_service(
        FakeInventoryReader([make_item()]), FakeMembershipReader(two_members), push
    )

    service.run()
    service.run()

    assert len(push.multicasts) == 2
    assert push.multicasts[0] == push.multicasts[1]


def test_retry_policy_recovers_transient_lookup_failure():
    members = {7: [GroupMemberTokens(user_id=1, tokens=["a"])]}
    push = RecordingPushSender()

    report = make_service(
        FakeInventoryReader([make_item()]),
        FakeMembershipReader(members, failures_before_success=1),
        push,
        retry_policy=RetryPolicy(max_attempts=2, sleep=lambda _: None),
    ).run()

    assert report.items_skipped == 0
    assert len(push.multicasts) == 1


def test_default_policy_does_not_retry():
    members = {7: [GroupMemberTokens(user_id=1, tokens=["a"])]}
    memberships = FakeMembershipReader(members, failures_before_success=1)

    report = make_service(
        FakeInventoryReader([make_item()]), memberships, RecordingPushSender()
    ).run()

    assert memberships.calls == [7]
    assert report.items_skipped == 1
