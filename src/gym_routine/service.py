"""
Routine service: the operations exposed around the assembly engine.

Loads the profile from the store, runs validation / assembly / shuffle, and
persists the result.  Store, catalog, random source and routine settings are
all injected; the CLI builds one service per invocation.

Every read-modify-write runs under the store's per-user lock.
"""

import random
from datetime import datetime
from typing import Any, Callable

from loguru import logger

from .core.assembler import assemble
from .core.catalog.base import Catalog
from .core.catalog.registry import get_default_catalog
from .core.engine.config_loader import RoutineSettings, load_routine_settings
from .core.errors import ProfileExistsError
from .core.models import Profile, Routine
from .core.shuffle import RandomSource, shuffle_profile_routine
from .core.validation import (
    apply_profile_update,
    changed_fields,
    normalize_field,
    validate_muscles,
    validate_week_count,
)
from .io.profile_store import ProfileStore


class RoutineService:
    """Profile and routine operations for authenticated user ids."""

    def __init__(
        self,
        store: ProfileStore,
        catalog: Catalog | None = None,
        rng: RandomSource | None = None,
        settings: RoutineSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.store = store
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self.rng = rng if rng is not None else random.Random()
        self.settings = settings if settings is not None else load_routine_settings()
        self._clock = clock

    def _now(self) -> datetime | None:
        return self._clock() if self._clock is not None else None

    # ------------------------------------------------------------------
    # Profile operations
    # ------------------------------------------------------------------

    def create_profile(self, user_id: str, overwrite: bool = False, **fields: Any) -> Profile:
        """
        Create a profile for a user.

        Args:
            user_id: Authenticated user id
            overwrite: Replace an existing profile instead of failing
            **fields: Initial profile fields (same names and rules as update_profile)

        Raises:
            ProfileExistsError: If a profile exists and overwrite is False
            ValidationError: On the first invalid field
        """
        with self.store.locked(user_id):
            if self.store.exists(user_id) and not overwrite:
                raise ProfileExistsError(user_id)
            profile = apply_profile_update(Profile(), fields, self.catalog)
            self.store.save(user_id, profile)
        logger.info("Created profile", user_id=user_id)
        return profile

    def get_profile(self, user_id: str) -> Profile:
        """Return the stored profile. Raises ProfileNotFoundError if absent."""
        return self.store.load(user_id)

    def update_profile(self, user_id: str, **updates: Any) -> Profile:
        """
        Apply a partial update.

        Falsy values leave fields unchanged; the first invalid field raises
        ValidationError and nothing is written.
        """
        with self.store.locked(user_id):
            current = self.store.load(user_id)
            updated = apply_profile_update(current, updates, self.catalog)
            changed = changed_fields(current, updated)
            if changed:
                self.store.save(user_id, updated)
        logger.info("Updated profile", user_id=user_id, fields=changed)
        return updated

    def delete_profile(self, user_id: str) -> None:
        """Delete the user's profile and routine."""
        with self.store.locked(user_id):
            self.store.delete(user_id)

    # ------------------------------------------------------------------
    # Routine operations
    # ------------------------------------------------------------------

    def generate_routine(
        self,
        user_id: str,
        objective: str | None = None,
        days_per_week: int | None = None,
        muscles: list[str] | None = None,
        week_count: int | None = None,
    ) -> Routine:
        """
        Generate and store a new routine.

        Overrides apply to this generation only; the profile's own objective,
        days per week and muscle selection are left as they are.

        Raises:
            InsufficientDataError: If days per week or muscles are missing
            ValidationError: If an override is out of range or names an unknown muscle
        """
        with self.store.locked(user_id):
            profile = self.store.load(user_id)

            if objective is not None:
                objective = normalize_field("objective", objective)
            if days_per_week is not None:
                days_per_week = normalize_field("days_per_week", days_per_week)
            if muscles is not None:
                muscles = validate_muscles(muscles, self.catalog)
            if week_count is not None:
                week_count = validate_week_count(week_count)

            routine = assemble(
                muscles if muscles is not None else profile.selected_muscles,
                days_per_week if days_per_week is not None else profile.days_per_week,
                week_count if week_count is not None else self.settings.week_count,
                self.catalog,
                objective=objective if objective is not None else profile.objective,
                gender=profile.gender,
                exercises_per_slot=self.settings.exercises_per_slot,
                generated_at=self._now(),
            )
            profile.routine = routine
            self.store.save(user_id, profile)

        logger.info(
            "Generated routine",
            user_id=user_id,
            weeks=routine.week_count,
            days_per_week=routine.days_per_week,
        )
        return routine

    def shuffle_routine(self, user_id: str) -> Routine:
        """
        Reshuffle the stored routine's muscle order and store the result.

        Raises:
            NoRoutineError: If no routine has been generated yet
        """
        with self.store.locked(user_id):
            profile = self.store.load(user_id)
            routine = shuffle_profile_routine(
                profile,
                self.catalog,
                self.rng,
                exercises_per_slot=self.settings.exercises_per_slot,
                generated_at=self._now(),
            )
            profile.routine = routine
            self.store.save(user_id, profile)

        logger.info("Shuffled routine", user_id=user_id, muscles=routine.muscle_sequence())
        return routine

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def list_muscles(self) -> list[str]:
        """Muscle groups available for selection, in catalog order."""
        return self.catalog.muscle_groups()
