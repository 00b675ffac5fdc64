"""
Warrior API exception classes.

Every error raised by the store derives from WarriorApiError so the API
layer can translate them into JSON responses in one place.
"""


class WarriorApiError(Exception):
    """Base warrior API error."""

    def __init__(self, message: str = "Unknown warrior API error"):
        self.message = message
        super().__init__(self.message)


class WarriorNotFoundError(WarriorApiError):
    """No warrior with the requested id."""

    def __init__(self, warrior_id):
        self.warrior_id = warrior_id
        super().__init__(f"Warrior not found: {warrior_id}")


class DuplicateWarriorIdError(WarriorApiError):
    """A warrior with the caller supplied id already exists."""

    def __init__(self, warrior_id: int):
        self.warrior_id = warrior_id
        super().__init__(f"Warrior id already exists: {warrior_id}")


class InvalidWarriorPayloadError(WarriorApiError):
    """Payload fields could not be coerced into a warrior."""

    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Invalid warrior payload: {details}")
