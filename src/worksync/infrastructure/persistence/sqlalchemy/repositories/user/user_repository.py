"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from worksync.domain.user import (
    DuplicateUsernameError,
    User,
    UserRepository,
    UserRole,
)
from worksync.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_username(self, username: str) -> bool:
        stmt = select(UserModel.pk).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def list_all(self, role: Optional[UserRole] = None) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.pk)
        if role is not None:
            stmt = stmt.where(UserModel.role == role.value)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(UserModel.pk)))
        return result.scalar_one()

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.info("Created user: %s (username: %s)", user.id, user.username)

            await self._session.flush()
        except IntegrityError as e:
            # Unique constraint on username
            if "unique" in str(e).lower():
                raise DuplicateUsernameError(user.username) from e
            raise

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            username=model.username,
            password=model.password,
            role=model.role,
            avatar_url=model.avatar_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            username=user.username,
            password=user.password,
            role=user.role.value,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        # id never changes
        model.name = user.name
        model.username = user.username
        model.password = user.password
        model.role = user.role.value
        model.avatar_url = user.avatar_url
        model.updated_at = user.updated_at
