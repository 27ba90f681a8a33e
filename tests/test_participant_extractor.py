"""
Tests for participant extraction and deduplication.
"""

import pytest

from jira_notifier.core.participant_extractor import (
    FieldShape,
    classify_field_value,
    extract_participants,
    identity_key,
    parse_custom_field_keys,
)


class TestIdentityKey:
    """Test identity key derivation."""

    def test_account_id_wins(self):
        assert identity_key({"accountId": "a1", "emailAddress": "x@example.com", "name": "x"}) == "a1"

    def test_email_before_name(self):
        assert identity_key({"emailAddress": "x@example.com", "name": "x"}) == "x@example.com"

    def test_name_last(self):
        assert identity_key({"name": "x", "displayName": "X"}) == "x"

    def test_no_identifying_attribute(self):
        assert identity_key({"displayName": "Nobody"}) is None
        assert identity_key("bob") is None

    def test_first_non_null_attribute_is_used_even_when_empty(self):
        # An empty accountId shadows the name, leaving no usable key
        assert identity_key({"accountId": "", "name": "bob"}) is None


class TestClassifyFieldValue:
    """Test custom field shape classification."""

    @pytest.mark.parametrize("value,shape", [
        ([{"approvers": [{"approver": {"accountId": "a1"}}]}], FieldShape.APPROVAL_LIST),
        ([{"name": "bob"}], FieldShape.USER_LIST),
        ([], FieldShape.USER_LIST),
        ({"approvers": []}, FieldShape.APPROVAL),
        ({"name": "bob"}, FieldShape.USER),
        (None, FieldShape.UNRECOGNIZED),
        ("customer", FieldShape.UNRECOGNIZED),
        (7, FieldShape.UNRECOGNIZED),
    ])
    def test_shapes(self, value, shape):
        assert classify_field_value(value) is shape


class TestExtractParticipants:
    """Test extract_participants."""

    def test_standard_fields_in_order(self, sample_issue, created_payload):
        participants = extract_participants(sample_issue["fields"], created_payload)

        # alice appears as reporter, creator and actor but is kept once
        assert [p["name"] for p in participants] == ["bob", "alice", "carol"]

    def test_first_occurrence_wins(self):
        fields = {
            "assignee": {"name": "bob", "displayName": "Bob (assignee)"},
            "reporter": {"name": "bob", "displayName": "Bob (reporter)"},
        }
        participants = extract_participants(fields, {})

        assert len(participants) == 1
        assert participants[0]["displayName"] == "Bob (assignee)"

    def test_participants_without_key_are_dropped(self):
        fields = {
            "assignee": {"displayName": "Ghost"},
            "watches": {"watchers": [{"name": "carol"}, "junk", None]},
        }
        participants = extract_participants(fields, {})
        assert participants == [{"name": "carol"}]

    def test_native_and_top_level_approvers(self):
        fields = {"approvers": [{"accountId": "a1"}, {"accountId": "a2"}]}
        payload = {"approvers": [{"accountId": "a2"}, {"accountId": "a3"}]}

        participants = extract_participants(fields, payload)
        assert [p["accountId"] for p in participants] == ["a1", "a2", "a3"]

    def test_actor_is_collected(self):
        participants = extract_participants({}, {"user": {"accountId": "actor"}})
        assert participants == [{"accountId": "actor"}]

    def test_approval_list_is_flattened(self):
        fields = {"customfield_10200": [{"approvers": [{"approver": {"accountId": "a1"}}]}]}

        participants = extract_participants(fields, {}, "customfield_10200")
        assert participants == [{"accountId": "a1"}]

    def test_approval_wrappers_without_approver_are_skipped(self):
        fields = {
            "customfield_1": [
                {"approvers": [{"approver": {"accountId": "a1"}}, {"approverDecision": "pending"}, None]},
                {"approvers": [{"approver": {"accountId": "a2"}}]},
                "not an approval",
            ]
        }
        participants = extract_participants(fields, {}, "customfield_1")
        assert [p["accountId"] for p in participants] == ["a1", "a2"]

    def test_single_approval_object(self):
        fields = {"customfield_1": {"approvers": [{"approver": {"name": "dan"}}]}}
        assert extract_participants(fields, {}, "customfield_1") == [{"name": "dan"}]

    def test_plain_user_list_and_single_user(self):
        fields = {
            "customfield_1": [{"name": "erin"}, {"name": "frank"}],
            "customfield_2": {"emailAddress": "gina@example.com"},
        }
        participants = extract_participants(fields, {}, "customfield_1,customfield_2")
        assert participants == [{"name": "erin"}, {"name": "frank"}, {"emailAddress": "gina@example.com"}]

    def test_primitive_and_missing_custom_fields_are_skipped(self):
        fields = {"customfield_1": "text", "customfield_2": None, "customfield_3": 3}
        assert extract_participants(fields, {}, "customfield_1,customfield_2,customfield_3,customfield_4") == []

    def test_custom_fields_come_after_standard_fields(self):
        fields = {
            "assignee": {"name": "bob", "displayName": "Assignee"},
            "customfield_1": [{"name": "bob", "displayName": "Custom"}, {"name": "zoe"}],
        }
        participants = extract_participants(fields, {}, "customfield_1")
        assert [p["displayName"] if "displayName" in p else p["name"] for p in participants] == ["Assignee", "zoe"]

    def test_malformed_inputs_do_not_raise(self):
        assert extract_participants(None, None, "customfield_1") == []
        assert extract_participants({"watches": {"watchers": "nope"}}, {"approvers": "nope"}) == []


class TestParseCustomFieldKeys:
    """Test parse_custom_field_keys."""

    def test_trims_and_drops_blanks(self):
        assert parse_custom_field_keys(" customfield_1 , ,customfield_2,") == ["customfield_1", "customfield_2"]

    def test_empty_or_missing(self):
        assert parse_custom_field_keys("") == []
        assert parse_custom_field_keys(None) == []
        assert parse_custom_field_keys(["customfield_1"]) == []
