"""In-memory warrior storage."""

import logging
import threading
from typing import Any, Literal, Optional

from pydantic import ValidationError

from warriorapi import helpers
from warriorapi.config import DEFAULT_ID_POLICY
from warriorapi.exceptions import (
    DuplicateWarriorIdError,
    InvalidWarriorPayloadError,
    WarriorNotFoundError,
)
from warriorapi.models.warrior import Warrior

logger = logging.getLogger(__name__.split(".")[-1])

IdPolicy = Literal["client_or_next", "server"]


class WarriorStore:
    """Ordered, process-lifetime collection of warriors keyed by id."""

    def __init__(self, id_policy: IdPolicy = DEFAULT_ID_POLICY) -> None:
        """
        Initialize an empty store.

        Args:
            id_policy: How ids are chosen on create. ``client_or_next`` keeps a
                caller supplied id and assigns ``max + 1`` when none is given;
                ``server`` always assigns ``max + 1``.
        """
        if id_policy not in ("client_or_next", "server"):
            raise ValueError(f"Invalid id policy: {id_policy}")
        self._id_policy = id_policy
        self._warriors: list[Warrior] = []
        # Guards every scan-then-mutate sequence
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._warriors)

    def list_warriors(self) -> list[Warrior]:
        """List all warriors in insertion order."""
        with self._lock:
            return self._warriors.copy()

    def list_names(self) -> list[str]:
        """List every warrior name in insertion order."""
        with self._lock:
            return [warrior.name for warrior in self._warriors]

    @helpers.log_call
    def create(self, payload: dict[str, Any]) -> Warrior:
        """
        Create a warrior from a request payload and append it.

        Args:
            payload: Warrior fields, camelCase or snake_case keys

        Returns:
            The stored warrior, including its assigned id

        Raises:
            DuplicateWarriorIdError: Caller supplied id is already taken
            InvalidWarriorPayloadError: A field has a type that can't be coerced
        """
        # null fields count as missing
        data = {key: value for key, value in payload.items() if value is not None}
        requested_id = data.get("id")
        if self._id_policy != "server" and isinstance(requested_id, bool):
            raise InvalidWarriorPayloadError("id: must be an integer, not a boolean")
        with self._lock:
            if self._id_policy == "server" or requested_id is None:
                data["id"] = self._next_id()
            elif self._find_index(requested_id) is not None:
                raise DuplicateWarriorIdError(requested_id)

            warrior = _validate(data)
            if self._find_index(warrior.id) is not None:
                # Caller id coerced into an existing one (e.g. "3" -> 3)
                raise DuplicateWarriorIdError(warrior.id)
            self._warriors.append(warrior)

        logger.info(f"Created warrior {warrior.id} ({warrior.name!r})")
        return warrior

    def get(self, warrior_id: int) -> Warrior:
        """
        Get warrior by id.

        Raises:
            WarriorNotFoundError: No warrior has this id
        """
        with self._lock:
            index = self._find_index(warrior_id)
            if index is None:
                raise WarriorNotFoundError(warrior_id)
            return self._warriors[index]

    def update(self, warrior_id: int, changes: dict[str, Any]) -> Warrior:
        """
        Shallow-merge ``changes`` onto a stored warrior.

        Fields missing from ``changes`` keep their values and the id is
        never altered. The merged warrior keeps its position in the store.

        Raises:
            WarriorNotFoundError: No warrior has this id
            InvalidWarriorPayloadError: A field has a type that can't be coerced
        """
        with self._lock:
            index = self._find_index(warrior_id)
            if index is None:
                raise WarriorNotFoundError(warrior_id)
            try:
                updated = self._warriors[index].merged(changes)
            except ValidationError as e:
                raise InvalidWarriorPayloadError(_describe(e)) from e
            self._warriors[index] = updated

        logger.info(f"Updated warrior {warrior_id}")
        return updated

    def delete(self, warrior_id: int) -> Warrior:
        """
        Remove a warrior from the store.

        Returns:
            The removed warrior

        Raises:
            WarriorNotFoundError: No warrior has this id
        """
        with self._lock:
            index = self._find_index(warrior_id)
            if index is None:
                raise WarriorNotFoundError(warrior_id)
            removed = self._warriors.pop(index)

        logger.info(f"Deleted warrior {warrior_id}")
        return removed

    def clear(self) -> None:
        """Drop every warrior."""
        with self._lock:
            self._warriors.clear()

    def _find_index(self, warrior_id: Any) -> Optional[int]:
        """Linear scan for the first warrior with ``warrior_id``."""
        for index, warrior in enumerate(self._warriors):
            if warrior.id == warrior_id:
                return index
        return None

    def _next_id(self) -> int:
        if not self._warriors:
            return 1
        return max(warrior.id for warrior in self._warriors) + 1


def _validate(data: dict[str, Any]) -> Warrior:
    try:
        return Warrior.model_validate(data)
    except ValidationError as e:
        raise InvalidWarriorPayloadError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )
