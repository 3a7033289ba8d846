"""Tests for candidate selection and the auto-assign service."""

import pytest

from warroom.assignment.application import AutoAssignService
from warroom.assignment.domain import (
    Candidate,
    CandidateWorkload,
    UNKNOWN_WORKLOAD_SENTINEL,
    filter_candidates,
    select_least_loaded,
)
from warroom.core import (
    AssignmentWriteException,
    JiraException,
    NoCandidatesException,
    TerminalStateException,
    TransientQueryException,
    ValidationException,
)
from tests.conftest import make_issue, make_user


def workloads(*counts):
    return [CandidateWorkload(Candidate(f"u{i}", f"User {i}"), c) for i, c in enumerate(counts)]


class TestSelection:

    def test_distinct_minimum(self):
        assert select_least_loaded(workloads(3, 1, 2)).candidate.account_id == "u1"

    def test_tie_goes_to_first(self):
        assert select_least_loaded(workloads(2, 1, 1, 4)).candidate.account_id == "u1"

    def test_all_sentinel_picks_first(self):
        chosen = select_least_loaded(workloads(*[UNKNOWN_WORKLOAD_SENTINEL] * 3))
        assert chosen.candidate.account_id == "u0"

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            select_least_loaded([])


class TestFilterCandidates:

    def test_humans_filtered_before_limit(self):
        users = [
            make_user("bot1", account_type="app"),
            make_user("bot2", account_type="app"),
            make_user("alice"),
            make_user("bob"),
            make_user("carol"),
        ]
        candidates = filter_candidates(users, limit=2)
        assert [c.account_id for c in candidates] == ["alice", "bob"]

    def test_bound_keeps_order(self):
        users = [make_user(f"user{i}") for i in range(8)]
        candidates = filter_candidates(users, limit=5)
        assert [c.account_id for c in candidates] == [f"user{i}" for i in range(5)]

    def test_apps_allowed_when_not_humans_only(self):
        users = [make_user("bot", account_type="app"), make_user("alice")]
        assert len(filter_candidates(users, limit=5, humans_only=False)) == 2

    def test_users_without_account_id_skipped(self):
        users = [{"displayName": "Ghost"}, make_user("alice")]
        assert [c.account_id for c in filter_candidates(users, limit=5)] == ["alice"]

    def test_display_name_falls_back_to_account_id(self):
        assert Candidate.from_jira({"accountId": "abc"}).display_name == "abc"


@pytest.fixture
def assignable(tracker):
    tracker.issues["KAN-1"] = make_issue("KAN-1")
    tracker.assignable["KAN-1"] = [make_user("alice"), make_user("bob"), make_user("carol")]
    return tracker


class TestAutoAssignService:

    @pytest.mark.asyncio
    async def test_assigns_least_loaded(self, assignable):
        assignable.loads = {"alice": 3, "bob": 1, "carol": 2}
        service = AutoAssignService(assignable, candidate_limit=5, humans_only=True, concurrent=False)

        result = await service.auto_assign("KAN-1")

        assert assignable.assignments == [("KAN-1", "bob")]
        assert result.assignee.account_id == "bob"
        assert result.ticket_count == 1
        assert result.candidates_considered == 3
        assert result.message == "Assigned to Bob. They have the lowest active load (1 tickets)."

    @pytest.mark.asyncio
    async def test_tie_assigns_first_candidate(self, assignable):
        assignable.loads = {"alice": 2, "bob": 2, "carol": 2}
        service = AutoAssignService(assignable, candidate_limit=5, concurrent=False)

        await service.auto_assign("KAN-1")

        assert assignable.assignments == [("KAN-1", "alice")]

    @pytest.mark.asyncio
    async def test_failed_load_never_looks_idle(self, assignable):
        assignable.loads = {
            "alice": TransientQueryException("search failed"),
            "bob": 998,
            "carol": TransientQueryException("search failed"),
        }
        service = AutoAssignService(assignable, candidate_limit=5, concurrent=False)

        result = await service.auto_assign("KAN-1")

        assert result.assignee.account_id == "bob"

    @pytest.mark.asyncio
    async def test_all_loads_failed_picks_first(self, assignable):
        error = TransientQueryException("search failed")
        assignable.loads = {"alice": error, "bob": error, "carol": error}
        service = AutoAssignService(assignable, candidate_limit=5, concurrent=False)

        result = await service.auto_assign("KAN-1")

        assert result.assignee.account_id == "alice"
        assert result.ticket_count == UNKNOWN_WORKLOAD_SENTINEL

    @pytest.mark.asyncio
    async def test_no_candidates_writes_nothing(self, tracker):
        tracker.issues["KAN-1"] = make_issue("KAN-1")
        tracker.assignable["KAN-1"] = [make_user("bot", account_type="app")]
        service = AutoAssignService(tracker, candidate_limit=5, humans_only=True)

        with pytest.raises(NoCandidatesException):
            await service.auto_assign("KAN-1")

        assert tracker.assignments == []
        assert tracker.load_queries == []

    @pytest.mark.asyncio
    async def test_load_queries_bounded_by_limit(self, tracker):
        tracker.issues["KAN-1"] = make_issue("KAN-1")
        tracker.assignable["KAN-1"] = [make_user(f"user{i}") for i in range(10)]
        service = AutoAssignService(tracker, candidate_limit=5, concurrent=False)

        result = await service.auto_assign("KAN-1")

        assert tracker.load_queries == [f"user{i}" for i in range(5)]
        assert result.candidates_considered == 5

    @pytest.mark.asyncio
    async def test_concurrent_matches_sequential(self, assignable):
        assignable.loads = {"alice": 4, "bob": 2, "carol": 2}

        sequential = await AutoAssignService(
            assignable, candidate_limit=5, concurrent=False
        ).auto_assign("KAN-1")
        concurrent = await AutoAssignService(
            assignable, candidate_limit=5, concurrent=True
        ).auto_assign("KAN-1")

        assert sequential.assignee == concurrent.assignee
        assert assignable.assignments == [("KAN-1", "bob"), ("KAN-1", "bob")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["Done", "Closed"])
    async def test_terminal_ticket_not_assigned(self, assignable, status):
        assignable.issues["KAN-1"] = make_issue("KAN-1", status=status)
        service = AutoAssignService(assignable, candidate_limit=5)

        with pytest.raises(TerminalStateException) as exc_info:
            await service.auto_assign("KAN-1")

        assert exc_info.value.message == f"Ticket KAN-1 is already {status}. Assignment skipped."
        assert assignable.assignments == []

    @pytest.mark.asyncio
    async def test_invalid_key(self, tracker):
        with pytest.raises(ValidationException):
            await AutoAssignService(tracker, candidate_limit=5).auto_assign("kan1")

    @pytest.mark.asyncio
    async def test_write_failure_surfaces(self, assignable):
        assignable.assign_error = JiraException("Assign failed: 403", status_code=403)
        service = AutoAssignService(assignable, candidate_limit=5)

        with pytest.raises(AssignmentWriteException) as exc_info:
            await service.auto_assign("KAN-1")

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "Jira: Assign failed: 403"

    @pytest.mark.asyncio
    async def test_ticket_without_timestamp_still_assigned(self, assignable):
        assignable.issues["KAN-1"] = make_issue("KAN-1", created=None, priority=None)
        service = AutoAssignService(assignable, candidate_limit=5)

        await service.auto_assign("KAN-1")

        assert assignable.assignments == [("KAN-1", "alice")]
