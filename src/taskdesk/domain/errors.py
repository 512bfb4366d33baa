from __future__ import annotations


class TaskDeskError(Exception):
    """Base class for errors raised by taskdesk itself."""


class NotAuthenticated(TaskDeskError):
    """A write was attempted by a user whose session is logged out."""

    def __init__(self, user_name: str):
        self.user_name = user_name
        super().__init__(f"User {user_name!r} must be logged in to perform this action.")


class InvalidRole(TaskDeskError, ValueError):
    def __init__(self, role: object):
        self.role = role
        super().__init__(f"Invalid role: {role!r}")
