"""In-memory implementation of the Profile repository."""

import copy
import threading
from datetime import datetime
from typing import Callable

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import Profile, ProfileId, profile_key


class InMemoryProfileRepository:
    """Process-lifetime profile store.

    Every read-modify-write runs under one lock, so a mutation is never
    interleaved with another one whether callers run on the event loop or
    in worker threads. Callers only ever receive copies.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, Profile] = {}
        self._lock = threading.RLock()

    async def get(self, profile_id: ProfileId) -> Profile | None:
        with self._lock:
            profile = self._profiles.get(profile_key(profile_id))
            return copy.deepcopy(profile) if profile else None

    async def upsert(
        self,
        profile_id: ProfileId,
        name: str,
        username: str | None,
        avatar: str | None,
        updated_at: datetime,
    ) -> Profile:
        key = profile_key(profile_id)
        with self._lock:
            profile = self._profiles.get(key)
            if profile is None:
                profile = Profile(id=profile_id)
                self._profiles[key] = profile
            profile.apply_identity(name, username, avatar, updated_at)
            return copy.deepcopy(profile)

    async def mutate(
        self, profile_id: ProfileId, fn: Callable[[Profile], None]
    ) -> Profile:
        with self._lock:
            profile = self._profiles.get(profile_key(profile_id))
            if profile is None:
                raise ProfileNotFoundError(str(profile_id))
            fn(profile)
            return copy.deepcopy(profile)

    async def count(self) -> int:
        with self._lock:
            return len(self._profiles)
