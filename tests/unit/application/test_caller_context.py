"""Unit tests for CallerContext."""

from dataclasses import FrozenInstanceError

import pytest

from worksync.application.context import CallerContext
from worksync.domain.shared.exceptions import ForbiddenError
from worksync.domain.user import UserRole

from tests.shared.fixtures.factories import TestUserFactory


class TestCallerContext:
    def test_create_from_user(self):
        caller = CallerContext.create(TestUserFactory.alice())

        assert caller.user_id == TestUserFactory.ALICE_ID
        assert caller.username == "alice"
        assert caller.role == UserRole.EMPLOYEE

    def test_is_immutable(self):
        caller = TestUserFactory.alice_caller()

        with pytest.raises(FrozenInstanceError):
            caller.role = UserRole.MANAGER  # type: ignore[misc]

    def test_manager_passes_manager_check(self):
        TestUserFactory.manager_caller().require_manager()

    def test_employee_fails_manager_check(self):
        with pytest.raises(ForbiddenError):
            TestUserFactory.alice_caller().require_manager()

    def test_manager_can_view_anyone(self):
        caller = TestUserFactory.manager_caller()

        assert caller.can_view(TestUserFactory.ALICE_ID)
        assert caller.can_view(TestUserFactory.GHOST_ID)

    def test_employee_can_only_view_self(self):
        caller = TestUserFactory.alice_caller()

        assert caller.can_view(TestUserFactory.ALICE_ID)
        assert not caller.can_view(TestUserFactory.BOB_ID)
        with pytest.raises(ForbiddenError):
            caller.require_view(TestUserFactory.BOB_ID)

    def test_system_context_is_manager(self):
        caller = CallerContext.system()

        assert caller.is_manager
        assert caller.username == "system"
