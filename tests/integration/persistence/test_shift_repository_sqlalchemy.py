"""Integration tests for ShiftRepositorySQLAlchemy on in-memory SQLite."""

from uuid import uuid4

import pytest

from worksync.application.commands import CreateShiftCommand, MigrateDayFormatsCommand
from worksync.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)

from tests.shared.fixtures.factories import TestShiftFactory, TestUserFactory


@pytest.fixture
def factory(sqlite_session):
    return SQLAlchemyRepositoryFactory(sqlite_session)


async def _seed_users(factory):
    users = factory.user_repository()
    await users.save(TestUserFactory.manager())
    await users.save(TestUserFactory.alice())


class TestShiftRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_created_shift_reads_back_unchanged(self, factory):
        command = CreateShiftCommand.from_factory(
            factory,
            TestUserFactory.manager_caller(),
        )

        result = await command.execute(
            employee_id=TestUserFactory.ALICE_ID,
            day="2025-07-16",
            start_time="09:00",
            end_time="17:00",
            task="Front desk",
        )

        stored = await factory.shift_repository().find_by_employee(
            TestUserFactory.ALICE_ID,
        )
        assert len(stored) == 1
        assert stored[0].id == result.shift.id
        assert (stored[0].day, stored[0].start_time, stored[0].end_time) == (
            "2025-07-16",
            "09:00",
            "17:00",
        )
        assert stored[0].task == "Front desk"

    @pytest.mark.asyncio
    async def test_find_by_day_keeps_insertion_order(self, factory):
        repo = factory.shift_repository()
        later = TestShiftFactory.shift(start_time="15:00", task="second")
        earlier = TestShiftFactory.shift(start_time="08:00", task="first")
        await repo.save(later)
        await repo.save(earlier)
        await repo.save(TestShiftFactory.shift(day="2025-07-17"))

        first_read = await repo.find_by_day("2025-07-16")
        second_read = await repo.find_by_day("2025-07-16")

        assert [s.task for s in first_read] == ["second", "first"]
        assert first_read == second_read

    @pytest.mark.asyncio
    async def test_date_range_is_inclusive_and_skips_legacy_rows(self, factory):
        await _seed_users(factory)
        repo = factory.shift_repository()
        for day in ("2025-07-13", "2025-07-14", "2025-07-20", "2025-07-21"):
            await repo.save(TestShiftFactory.shift(day=day, task=day))
        await repo.save(TestShiftFactory.shift(day="16.07.2025", task="legacy"))

        in_range = await repo.find_by_date_range("2025-07-14", "2025-07-20")

        assert [s.shift.task for s in in_range] == ["2025-07-14", "2025-07-20"]
        assert all(s.employee_name == "Alice Employee" for s in in_range)

    @pytest.mark.asyncio
    async def test_date_range_filters_by_employee(self, factory):
        await _seed_users(factory)
        repo = factory.shift_repository()
        await repo.save(TestShiftFactory.shift())
        await repo.save(TestShiftFactory.shift(employee_id=TestUserFactory.MANAGER_ID))

        mine = await repo.find_by_date_range(
            "2025-07-14",
            "2025-07-20",
            employee_id=TestUserFactory.MANAGER_ID,
        )

        assert [s.employee_name for s in mine] == ["Maria Manager"]

    @pytest.mark.asyncio
    async def test_dangling_reference_is_unknown_member(self, factory):
        repo = factory.shift_repository()
        await repo.save(TestShiftFactory.shift(employee_id=TestUserFactory.GHOST_ID))

        [entry] = await repo.find_with_filters()

        assert entry.employee_name == "Unknown Member"
        assert entry.employee_found is False

    @pytest.mark.asyncio
    async def test_unbounded_filter_keeps_legacy_rows(self, factory):
        repo = factory.shift_repository()
        await repo.save(TestShiftFactory.shift(day="16.07.2025"))

        assert len(await repo.find_with_filters()) == 1
        assert await repo.find_with_filters(start_day="2025-01-01") == []

    @pytest.mark.asyncio
    async def test_save_updates_existing_row(self, factory):
        repo = factory.shift_repository()
        shift = TestShiftFactory.shift()
        await repo.save(shift)

        shift.apply_patch(task="Inventory", end_time="18:00")
        await repo.save(shift)

        [stored] = await repo.find_all()
        assert stored.task == "Inventory"
        assert stored.end_time == "18:00"

    @pytest.mark.asyncio
    async def test_delete(self, factory):
        repo = factory.shift_repository()
        shift = TestShiftFactory.shift()
        await repo.save(shift)

        assert await repo.delete(shift.id) is True
        assert await repo.delete(shift.id) is False
        assert await repo.find_by_id(shift.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, factory):
        assert await factory.shift_repository().delete(uuid4()) is False


class TestDayFormatMigration:
    @pytest.mark.asyncio
    async def test_legacy_rows_become_queryable(self, factory):
        await _seed_users(factory)
        repo = factory.shift_repository()
        await repo.save(TestShiftFactory.shift(day="2025-07-15"))
        await repo.save(TestShiftFactory.shift(day="16.07.2025", task="legacy"))
        await repo.save(TestShiftFactory.shift(day="n/a", task="broken"))

        assert len(await repo.find_non_canonical()) == 2

        report = await MigrateDayFormatsCommand.from_factory(
            factory,
            TestUserFactory.manager_caller(),
        ).execute()

        assert (report.converted, report.removed) == (1, 1)
        assert await repo.find_non_canonical() == []
        in_range = await repo.find_by_date_range("2025-07-14", "2025-07-20")
        assert [s.day for s in in_range] == ["2025-07-15", "2025-07-16"]
