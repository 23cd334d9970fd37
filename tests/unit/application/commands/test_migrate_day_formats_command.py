"""Unit tests for MigrateDayFormatsCommand."""

from unittest.mock import AsyncMock

import pytest

from worksync.application.commands import MigrateDayFormatsCommand
from worksync.domain.shared.exceptions import ForbiddenError

from tests.shared.fixtures.factories import TestShiftFactory, TestUserFactory


class TestMigrateDayFormatsCommand:
    @pytest.mark.asyncio
    async def test_converts_legacy_and_removes_unreadable(self):
        legacy = TestShiftFactory.shift(day="16.07.2025")
        garbage = TestShiftFactory.shift(day="next tuesday")
        repo = AsyncMock()
        repo.find_non_canonical.return_value = [legacy, garbage]

        report = await MigrateDayFormatsCommand(
            repo,
            TestUserFactory.manager_caller(),
        ).execute()

        assert report.converted == 1
        assert report.removed == 1
        assert legacy.day == "2025-07-16"
        repo.save.assert_awaited_once_with(legacy)
        repo.delete.assert_awaited_once_with(garbage.id)

    @pytest.mark.asyncio
    async def test_nothing_to_do(self):
        repo = AsyncMock()
        repo.find_non_canonical.return_value = []

        report = await MigrateDayFormatsCommand(
            repo,
            TestUserFactory.manager_caller(),
        ).execute()

        assert (report.converted, report.removed) == (0, 0)

    @pytest.mark.asyncio
    async def test_employee_cannot_migrate(self):
        repo = AsyncMock()

        with pytest.raises(ForbiddenError):
            await MigrateDayFormatsCommand(
                repo,
                TestUserFactory.alice_caller(),
            ).execute()

        repo.find_non_canonical.assert_not_awaited()
