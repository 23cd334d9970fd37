from enum import Enum


class UserRole(str, Enum):
    """User roles: managers plan shifts, employees work them."""

    MANAGER = "manager"
    EMPLOYEE = "employee"
