"""
JSON-file profile storage.

One document per user under a data directory:

    <data_dir>/<user_id>.json   {"user_id", "created_at", "profile": {...}}

The store does no validation beyond what deserialisation enforces; callers
run read-modify-write sequences inside ``locked(user_id)`` so concurrent
updates for the same user are serialised instead of overwriting each other.
"""

import contextlib
import json
import os
import re
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from loguru import logger

from ..core.engine.config_loader import get_home_dir
from ..core.errors import ProfileNotFoundError, ValidationError
from ..core.models import Profile
from .serializers import dict_to_profile, user_document

_USER_ID_RE = re.compile(r"^[A-Za-z0-9_.@-]{1,64}$")


class ProfileStore:
    """
    Manages per-user profile documents stored as JSON files.

    Locks are per store instance and per user id; two stores pointed at the
    same directory in one process do not share locks.
    """

    def __init__(self, data_dir: str | Path):
        """
        Initialize the profile store.

        Args:
            data_dir: Directory holding one <user_id>.json file per user
        """
        self.data_dir = Path(data_dir)
        self._locks: dict[str, threading.Lock] = {}
        self._waiters: dict[str, int] = {}  # user_id -> holders + waiters
        self._registry_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Locking
    # ------------------------------------------------------------------

    def _acquire_ref(self, user_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.setdefault(user_id, threading.Lock())
            self._waiters[user_id] = self._waiters.get(user_id, 0) + 1
            return lock

    def _release_ref(self, user_id: str) -> None:
        with self._registry_lock:
            self._waiters[user_id] -= 1
            if not self._waiters[user_id]:
                del self._waiters[user_id]
                del self._locks[user_id]

    @property
    def active_lock_count(self) -> int:
        """Number of user ids with a lock currently held or awaited."""
        with self._registry_lock:
            return len(self._locks)

    @contextlib.contextmanager
    def locked(self, user_id: str) -> Iterator[None]:
        """Context manager: hold the user's lock for a read-modify-write sequence."""
        lock = self._acquire_ref(user_id)
        try:
            with lock:
                yield
        finally:
            self._release_ref(user_id)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def path_for(self, user_id: str) -> Path:
        """
        Return the document path for a user.

        Raises:
            ValidationError: If user_id contains characters unsafe for a file name
        """
        if not _USER_ID_RE.match(user_id):
            raise ValidationError(
                "user_id", "use 1-64 letters, digits, '.', '_', '-' or '@'"
            )
        return self.data_dir / f"{user_id}.json"

    def exists(self, user_id: str) -> bool:
        """Check if a profile document exists for the user."""
        return self.path_for(user_id).exists()

    def list_users(self) -> list[str]:
        """Return the ids of all stored users, sorted."""
        if not self.data_dir.is_dir():
            return []
        return sorted(p.stem for p in self.data_dir.glob("*.json"))

    # ------------------------------------------------------------------
    # Read / write
    # ------------------------------------------------------------------

    def _read_document(self, user_id: str) -> dict:
        path = self.path_for(user_id)
        if not path.exists():
            raise ProfileNotFoundError(user_id)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError("profile", f"corrupt profile file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError("profile", f"corrupt profile file {path}: not an object")
        return data

    def load(self, user_id: str) -> Profile:
        """
        Load a user's profile.

        Raises:
            ProfileNotFoundError: If no document exists for the user
            ValidationError: If the document is malformed
        """
        data = self._read_document(user_id)
        logger.debug("Loaded profile", user_id=user_id, path=str(self.path_for(user_id)))
        return dict_to_profile(data.get("profile"))

    def created_at(self, user_id: str) -> str | None:
        """Return the ISO timestamp at which the user's profile was created."""
        return self._read_document(user_id).get("created_at")

    def save(self, user_id: str, profile: Profile) -> None:
        """
        Write a user's profile, keeping the original creation timestamp.

        The document is written to a temporary file and moved into place.
        """
        path = self.path_for(user_id)
        path.parent.mkdir(parents=True, exist_ok=True)

        created_at = None
        if path.exists():
            try:
                created_at = self.created_at(user_id)
            except ValidationError:
                created_at = None
        if created_at is None:
            created_at = datetime.now(timezone.utc).isoformat()

        tmp_path = path.with_suffix(".json.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(user_document(user_id, created_at, profile), f, indent=2)
            os.replace(tmp_path, path)
        finally:
            tmp_path.unlink(missing_ok=True)
        logger.info("Saved profile", user_id=user_id, has_routine=profile.has_routine)

    def delete(self, user_id: str) -> None:
        """
        Delete a user's profile document.

        Raises:
            ProfileNotFoundError: If no document exists for the user
        """
        path = self.path_for(user_id)
        if not path.exists():
            raise ProfileNotFoundError(user_id)
        path.unlink()
        logger.info("Deleted profile", user_id=user_id)


def get_default_data_dir() -> Path:
    """
    Get the default directory for user profile documents.

    Returns:
        ~/.gym-routine/users (or $GYM_ROUTINE_HOME/users)
    """
    return get_home_dir() / "users"
