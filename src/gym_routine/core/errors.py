"""
Error taxonomy for gym-routine.

Every error here is terminal for the operation that raised it: nothing is
retried and nothing is partially written.
"""


class RoutineError(Exception):
    """Base class for all gym-routine errors."""


class ValidationError(RoutineError):
    """Raised when an input field is missing its bounds or has the wrong type."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class InsufficientDataError(RoutineError):
    """Raised when a routine is requested before days/week and muscles are set."""


class NoRoutineError(RoutineError):
    """Raised when a shuffle is requested but no routine has been generated yet."""


class ProfileNotFoundError(RoutineError):
    """Raised when no profile exists for a user id."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"No profile for user '{user_id}'. Run 'init' first.")


class ProfileExistsError(RoutineError):
    """Raised when creating a profile that already exists."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Profile for user '{user_id}' already exists.")


class UnknownMuscleWarning(UserWarning):
    """Emitted when a selected muscle group has no catalog entry."""
