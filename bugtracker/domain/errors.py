"""
errors.py - Domain exceptions
Single responsibility: error taxonomy shared by repositories, services and UI.
"""


class BugTrackerError(Exception):
    """Base class for every error the app reports to the user."""


class ValidationError(BugTrackerError):
    """User input was rejected; ``message`` is shown as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorageError(BugTrackerError):
    """Stored content could not be read or written."""

    def __init__(self, message: str = "Storage unavailable", key: str | None = None):
        super().__init__(message)
        self.key = key


class BugNotFoundError(BugTrackerError, LookupError):
    def __init__(self, bug_id: str):
        super().__init__(f"Bug {bug_id} not found")
        self.bug_id = bug_id


class DuplicateBugIdError(BugTrackerError):
    def __init__(self, bug_id: str):
        super().__init__(f"Bug id {bug_id} already exists")
        self.bug_id = bug_id


class InvalidTransitionError(BugTrackerError):
    def __init__(self, current, target):
        super().__init__(f"Cannot move bug from {current} to {target}")
        self.current = current
        self.target = target
