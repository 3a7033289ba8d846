"""Tests for issue-key validation, timestamp parsing and the Ticket entity."""

from datetime import datetime, timedelta, timezone

import pytest

from warroom.core import ValidationException
from warroom.shared.domain import Ticket, parse_jira_datetime, validate_issue_key
from tests.conftest import make_issue


class TestValidateIssueKey:

    @pytest.mark.parametrize("key", ["KAN-1", "KAN-123", "AB2-7", "MY_PROJ-42"])
    def test_accepts_well_formed_keys(self, key):
        assert validate_issue_key(key) == key

    @pytest.mark.parametrize("key", [
        "", "kan-1", "KAN", "KAN-", "-1", "KAN-1a", "1KAN-1", "KAN 1",
        "KAN-1\n", "\nKAN-1", None, 12,
    ])
    def test_rejects_malformed_keys(self, key):
        with pytest.raises(ValidationException) as exc_info:
            validate_issue_key(key)
        assert "Invalid Issue Key format" in exc_info.value.message


class TestParseJiraDatetime:

    def test_jira_offset_without_colon(self):
        parsed = parse_jira_datetime("2024-01-15T10:00:00.000+0000")
        assert parsed == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        parsed = parse_jira_datetime("2024-01-15T10:00:00Z")
        assert parsed.utcoffset() == timedelta(0)

    def test_non_utc_offset_is_kept(self):
        parsed = parse_jira_datetime("2024-01-15T10:00:00.000+0530")
        assert parsed.utcoffset() == timedelta(hours=5, minutes=30)

    def test_naive_value_is_utc(self):
        parsed = parse_jira_datetime("2024-01-15T10:00:00")
        assert parsed.tzinfo == timezone.utc

    def test_datetime_passes_through(self):
        value = datetime(2024, 1, 15, tzinfo=timezone.utc)
        assert parse_jira_datetime(value) is value

    @pytest.mark.parametrize("value", [None, "", "   ", "yesterday", 1705312800])
    def test_missing_or_invalid_raises(self, value):
        with pytest.raises(ValidationException):
            parse_jira_datetime(value)


class TestTicket:

    def test_from_jira(self):
        ticket = Ticket.from_jira(make_issue("KAN-7", priority="Highest", status="In Progress"))

        assert ticket.key == "KAN-7"
        assert ticket.priority == "Highest"
        assert ticket.status == "In Progress"
        assert ticket.issue_type == "Task"
        assert ticket.project_id == "10000"
        assert ticket.project_key == "KAN"
        assert not ticket.is_terminal
        assert ticket.has_project

    def test_missing_priority_kept_as_none(self):
        ticket = Ticket.from_jira(make_issue(priority=None))
        assert ticket.priority is None

    @pytest.mark.parametrize("status", ["Done", "Closed"])
    def test_terminal_statuses(self, status):
        assert Ticket.from_jira(make_issue(status=status)).is_terminal

    def test_missing_created_only_fails_on_access(self):
        ticket = Ticket.from_jira(make_issue(created=None))
        assert ticket.created is None
        with pytest.raises(ValidationException):
            ticket.created_at

    def test_missing_project(self):
        ticket = Ticket.from_jira(make_issue(project={}))
        assert not ticket.has_project
