"""Unit tests for WeekViewQuery and MyScheduleQuery."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from worksync.application.queries import MyScheduleQuery, WeekViewQuery
from worksync.domain.shared.exceptions import ForbiddenError
from worksync.domain.shared.time import FixedClock

from tests.shared.fixtures.factories import TestShiftFactory, TestUserFactory

TODAY = date(2025, 7, 16)


def _entry(day, start="09:00", employee_name="Maria Manager", **kwargs):
    shift = TestShiftFactory.shift(day=day, start_time=start, **kwargs)
    return TestShiftFactory.scheduled(shift, employee_name=employee_name)


class TestWeekViewQuery:
    def setup_method(self):
        self.repo = AsyncMock()
        self.repo.find_by_date_range.return_value = []
        self.clock = FixedClock(TODAY)

    def _query(self, caller=None, locale="en"):
        return WeekViewQuery(
            shift_repository=self.repo,
            clock=self.clock,
            caller=caller or TestUserFactory.manager_caller(),
            locale=locale,
        )

    @pytest.mark.asyncio
    async def test_manager_week_with_one_shift(self):
        self.repo.find_by_date_range.return_value = [
            _entry("2025-07-14", employee_id=TestUserFactory.MANAGER_ID, task="X"),
        ]

        view = await self._query().execute(0)

        assert view.week_range.start == date(2025, 7, 14)
        assert len(view.days) == 7
        assert len(view.days_with_shifts) == 1
        day = view.days_with_shifts[0]
        assert day.day_key == "2025-07-14"
        assert day.label == "Monday, 14 Jul"
        assert day.shifts[0].shift.task == "X"
        self.repo.find_by_date_range.assert_awaited_once_with(
            "2025-07-14",
            "2025-07-20",
            employee_id=None,
        )

    @pytest.mark.asyncio
    async def test_days_are_monday_to_sunday(self):
        view = await self._query().execute(3)

        dates = [d.date for d in view.days]
        assert dates == sorted(dates)
        assert dates[0].weekday() == 0
        assert dates[-1].weekday() == 6
        assert view.days_with_shifts == []

    @pytest.mark.asyncio
    async def test_dangling_shift_is_left_out(self):
        self.repo.find_by_date_range.return_value = [
            _entry("2025-07-15", employee_name=None),
        ]

        view = await self._query().execute()

        assert view.days_with_shifts == []
        assert all(d.shifts == [] for d in view.days)

    @pytest.mark.asyncio
    async def test_manager_can_filter_by_employee(self):
        await self._query().execute(employee_id=TestUserFactory.ALICE_ID)

        kwargs = self.repo.find_by_date_range.call_args.kwargs
        assert kwargs["employee_id"] == TestUserFactory.ALICE_ID

    @pytest.mark.asyncio
    async def test_employee_sees_own_week_only(self):
        await self._query(caller=TestUserFactory.alice_caller()).execute()

        kwargs = self.repo.find_by_date_range.call_args.kwargs
        assert kwargs["employee_id"] == TestUserFactory.ALICE_ID

    @pytest.mark.asyncio
    async def test_employee_cannot_request_colleague_week(self):
        query = self._query(caller=TestUserFactory.alice_caller())

        with pytest.raises(ForbiddenError):
            await query.execute(employee_id=TestUserFactory.BOB_ID)

    @pytest.mark.asyncio
    async def test_offset_moves_window(self):
        view = await self._query().execute(-1)

        assert view.week_range.range_key == ("2025-07-07", "2025-07-13")

    @pytest.mark.asyncio
    async def test_russian_labels(self):
        view = await self._query(locale="ru").execute()

        assert view.days[2].label == "среда, 16 июл"


class TestMyScheduleQuery:
    @pytest.mark.asyncio
    async def test_groups_own_shifts_ascending(self):
        repo = AsyncMock()
        repo.find_with_filters.return_value = [
            _entry("2025-07-21", "08:00", employee_name="Alice Employee"),
            _entry("2025-07-14", "12:00", employee_name="Alice Employee"),
            _entry("2025-07-14", "07:00", employee_name="Alice Employee"),
            _entry("14.07.2025", "06:00", employee_name="Alice Employee"),
        ]
        query = MyScheduleQuery(repo, TestUserFactory.alice_caller())

        days = await query.execute()

        assert [d.day_key for d in days] == ["2025-07-14", "2025-07-21"]
        assert [s.start_time for s in days[0].shifts] == ["07:00", "12:00"]
        repo.find_with_filters.assert_awaited_once_with(
            employee_id=TestUserFactory.ALICE_ID,
        )
