from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from worksync.domain.shared.exceptions import ValidationError
from worksync.domain.shared.time import utc_now
from worksync.domain.user.exceptions import InvalidRoleError
from worksync.domain.user.value_objects import UserIdentity, UserRole


def _parse_role(role: Union[str, UserRole]) -> UserRole:
    if isinstance(role, UserRole):
        return role
    try:
        return UserRole(role)
    except ValueError as e:
        raise InvalidRoleError(str(role)) from e


def _require_text(field: str, value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        msg = f"Field '{field}' is required"
        raise ValidationError(msg, details={"field": field})
    return value


class User:
    """
    User aggregate root.

    Holds identity, role and the stored password value. The password is
    whatever the password service produced (verbatim or a bcrypt hash) and
    never leaves the aggregate except towards persistence.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        username: str,
        password: str,
        role: Union[str, UserRole] = UserRole.EMPLOYEE,
        avatar_url: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._name = name
        self._username = username
        self._password = password
        self._role = _parse_role(role)
        self._avatar_url = avatar_url
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_manager(self) -> bool:
        return self._role == UserRole.MANAGER

    @property
    def avatar_url(self) -> Optional[str]:
        return self._avatar_url

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_role(self, role: Union[str, UserRole]) -> bool:
        return self._role == _parse_role(role)

    def identity(self) -> UserIdentity:
        return UserIdentity(
            id=self._id,
            name=self._name,
            username=self._username,
            role=self._role,
            avatar_url=self._avatar_url,
        )

    def apply_patch(  # NOQA: PLR0913
        self,
        name: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        role: Optional[Union[str, UserRole]] = None,
        avatar_url: Optional[str] = None,
    ) -> None:
        # Only provided (non-None) values are updated; others are preserved.
        if name is not None:
            self._name = _require_text("name", name)
        if username is not None:
            self._username = _require_text("username", username)
        if password is not None:
            self._password = _require_text("password", password)
        if role is not None:
            self._role = _parse_role(role)
        if avatar_url is not None:
            self._avatar_url = avatar_url
        self._updated_at = utc_now()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        name: str,
        username: str,
        password: str,
        role: Union[str, UserRole] = UserRole.EMPLOYEE,
        avatar_url: Optional[str] = None,
    ) -> "User":
        return cls(
            name=_require_text("name", name),
            username=_require_text("username", username),
            password=_require_text("password", password),
            role=role,
            avatar_url=avatar_url,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        username: str,
        password: str,
        role: Union[str, UserRole],
        avatar_url: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            username=username,
            password=password,
            role=role,
            avatar_url=avatar_url,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, username={self._username!r}, "
            f"role={self._role.value})"
        )
