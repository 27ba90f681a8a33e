"""
Tests for webhook event classification.
"""

import pytest

from jira_notifier.core.event_types import (
    COMMENT_KINDS,
    TRANSITIONS,
    IssueEventTypeName,
    NotificationKind,
    WebhookEvent,
    classify_event,
)


class TestClassifyEvent:
    """Test classify_event."""

    @pytest.mark.parametrize("event_type,secondary,kind", [
        ("jira:issue_created", None, NotificationKind.ISSUE_CREATED),
        ("jira:issue_deleted", None, NotificationKind.ISSUE_DELETED),
        ("jira:issue_updated", "issue_commented", NotificationKind.COMMENT_ADDED),
        ("jira:issue_updated", "issue_comment_edited", NotificationKind.COMMENT_UPDATED),
        ("jira:issue_updated", "issue_comment_deleted", NotificationKind.COMMENT_DELETED),
        ("jira:issue_updated", "issue_generic", NotificationKind.ISSUE_CHANGED),
        ("jira:issue_updated", None, NotificationKind.ISSUE_CHANGED),
        ("issue_commented", None, NotificationKind.COMMENT_CREATED),
        ("comment_created", None, NotificationKind.COMMENT_CREATED),
        ("comment_updated", None, NotificationKind.COMMENT_UPDATED),
        ("comment_deleted", None, NotificationKind.COMMENT_DELETED),
    ])
    def test_transition_table(self, event_type, secondary, kind):
        assert classify_event(event_type, secondary) is kind

    def test_secondary_only_refines_issue_updated(self):
        assert classify_event("jira:issue_created", "issue_commented") is NotificationKind.ISSUE_CREATED

    @pytest.mark.parametrize("event_type", ["worklog_created", "jira:issue_moved", "", None])
    def test_unknown_events_are_unhandled(self, event_type):
        assert classify_event(event_type) is NotificationKind.UNHANDLED

    def test_every_known_event_is_handled(self):
        for event in WebhookEvent:
            assert classify_event(event.value) is not NotificationKind.UNHANDLED

    def test_every_issue_updated_refinement_is_in_table(self):
        for secondary in IssueEventTypeName:
            assert (WebhookEvent.ISSUE_UPDATED, secondary) in TRANSITIONS

    def test_every_handled_kind_is_reachable(self):
        reachable = set(TRANSITIONS.values())
        assert reachable == set(NotificationKind) - {NotificationKind.UNHANDLED}

    def test_comment_kinds(self):
        assert NotificationKind.ISSUE_CHANGED not in COMMENT_KINDS
        assert NotificationKind.COMMENT_ADDED in COMMENT_KINDS
        assert len(COMMENT_KINDS) == 4
