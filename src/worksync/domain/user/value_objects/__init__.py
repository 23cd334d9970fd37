from worksync.domain.user.value_objects.user_identity import UserIdentity
from worksync.domain.user.value_objects.user_role import UserRole

__all__ = ["UserIdentity", "UserRole"]
