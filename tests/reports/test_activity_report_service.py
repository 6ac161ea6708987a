from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.time_clock.time_clock.core.enums import BreakType, Role
from src.time_clock.time_clock.core.exceptions import AccessDeniedError, UserNotFoundError
from src.time_clock.time_clock.reports.model import ReportDataFilters
from src.time_clock.time_clock.reports.service import ActivityReportService
from src.time_clock.time_clock.users.memory_user_repository import InMemoryUserRepository
from src.time_clock.time_clock.users.model import Break, User, WorkShift

T0 = datetime(2026, 1, 31, 8, 0)


def _shift(start: datetime) -> WorkShift:
    return WorkShift(start_time=start, end_time=start + timedelta(minutes=30))


def _break(start: datetime, kind: BreakType = BreakType.BREAK) -> Break:
    return Break(break_type=kind, start_time=start, end_time=start + timedelta(minutes=10))


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository(
        [
            User(user_id="1234", name="Bob", role=Role.ADMINISTRATOR),
            User(
                user_id="123",
                name="Anna",
                role=Role.NON_ADMINISTRATOR,
                prior_work_shifts=(_shift(T0), _shift(T0 + timedelta(hours=1))),
                prior_breaks=(_break(T0 + timedelta(minutes=5)), _break(T0 + timedelta(hours=1, minutes=5), BreakType.LUNCH)),
            ),
            User(
                user_id="987654321",
                name="Charlie",
                role=Role.NON_ADMINISTRATOR,
                current_work_shift=WorkShift(start_time=T0),
                current_break=Break(break_type=BreakType.BREAK, start_time=T0 + timedelta(minutes=20)),
                prior_work_shifts=(_shift(T0 - timedelta(days=1)),),
            ),
            User(
                user_id="555",
                name="Dora",
                role=None,
                current_work_shift=WorkShift(start_time=T0),
                current_lunch_break=Break(break_type=BreakType.LUNCH, start_time=T0 + timedelta(hours=4)),
            ),
        ]
    )


@pytest.fixture
def svc(repo) -> ActivityReportService:
    return ActivityReportService(repo)


def test_no_filters_returns_everyone(svc):
    report = svc.find_user_activity("1234", ReportDataFilters())
    assert set(report) == {"1234", "123", "987654321", "555"}


@pytest.mark.parametrize("acting_user", ["123", "555"])
def test_non_admin_or_roleless_user_is_denied(svc, acting_user):
    with pytest.raises(AccessDeniedError):
        svc.find_user_activity(acting_user, ReportDataFilters(user_id_to_view="123"))


def test_unknown_admin_raises_not_found(svc):
    with pytest.raises(UserNotFoundError):
        svc.find_user_activity("missing", ReportDataFilters())


def test_user_id_filter(svc):
    assert list(svc.find_user_activity("1234", ReportDataFilters(user_id_to_view="123"))) == ["123"]


def test_role_filter(svc):
    report = svc.find_user_activity("1234", ReportDataFilters(role_to_view=Role.ADMINISTRATOR))
    assert list(report) == ["1234"]


def test_shift_threshold_is_inclusive(svc):
    report = svc.find_user_activity("1234", ReportDataFilters(prior_work_shifts_threshold=2))
    assert list(report) == ["123"]

    report = svc.find_user_activity("1234", ReportDataFilters(prior_work_shifts_threshold=1))
    assert set(report) == {"123", "987654321"}


def test_break_threshold(svc):
    report = svc.find_user_activity("1234", ReportDataFilters(prior_breaks_threshold=1))
    assert list(report) == ["123"]


def test_currently_on_break_and_lunch_filters(svc):
    assert list(svc.find_user_activity("1234", ReportDataFilters(is_currently_on_break=True))) == ["987654321"]
    assert list(svc.find_user_activity("1234", ReportDataFilters(is_currently_on_lunch=True))) == ["555"]
    assert svc.find_user_activity(
        "1234", ReportDataFilters(is_currently_on_break=True, is_currently_on_lunch=True)
    ) == {}


def test_threshold_counts_before_pruning(svc):
    filters = ReportDataFilters(
        prior_work_shifts_threshold=2,
        shift_begins_before=T0 + timedelta(minutes=30),
    )

    report = svc.find_user_activity("1234", filters)

    assert list(report) == ["123"]
    assert [s.start_time for s in report["123"].prior_work_shifts] == [T0]


def test_shift_bounds_are_strict(svc):
    report = svc.find_user_activity(
        "1234",
        ReportDataFilters(user_id_to_view="123", shift_begins_after=T0, shift_begins_before=T0 + timedelta(hours=2)),
    )
    assert [s.start_time for s in report["123"].prior_work_shifts] == [T0 + timedelta(hours=1)]


def test_break_bounds_prune_breaks_only(svc):
    report = svc.find_user_activity(
        "1234",
        ReportDataFilters(user_id_to_view="123", break_begins_after=T0 + timedelta(minutes=30)),
    )
    user = report["123"]
    assert [b.break_type for b in user.prior_breaks] == [BreakType.LUNCH]
    assert len(user.prior_work_shifts) == 2


def test_pruning_keeps_users_with_nothing_left(svc):
    report = svc.find_user_activity("1234", ReportDataFilters(shift_begins_before=T0 - timedelta(days=30)))
    assert "123" in report
    assert report["123"].prior_work_shifts == ()


def test_pruning_does_not_touch_the_store(svc, repo):
    svc.find_user_activity("1234", ReportDataFilters(shift_begins_before=T0))
    assert len(repo.find("123").prior_work_shifts) == 2


def test_break_bounds_are_strict(svc):
    first_break = T0 + timedelta(minutes=5)
    lunch = T0 + timedelta(hours=1, minutes=5)

    report = svc.find_user_activity("1234", ReportDataFilters(user_id_to_view="123", break_begins_before=first_break))
    assert report["123"].prior_breaks == ()

    report = svc.find_user_activity("1234", ReportDataFilters(user_id_to_view="123", break_begins_after=lunch))
    assert report["123"].prior_breaks == ()

    report = svc.find_user_activity(
        "1234",
        ReportDataFilters(user_id_to_view="123", break_begins_after=first_break, break_begins_before=lunch),
    )
    assert report["123"].prior_breaks == ()
