"""Profile repository protocol."""

from datetime import datetime
from typing import Callable, Protocol

from domain.entities.profile import Profile, ProfileId


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, profile_id: ProfileId) -> Profile | None:
        """Get a profile by its external identifier."""
        ...

    async def upsert(
        self,
        profile_id: ProfileId,
        name: str,
        username: str | None,
        avatar: str | None,
        updated_at: datetime,
    ) -> Profile:
        """Create a profile or replace its identity fields."""
        ...

    async def mutate(
        self, profile_id: ProfileId, fn: Callable[[Profile], None]
    ) -> Profile:
        """Apply ``fn`` to an existing profile atomically.

        Raises:
            ProfileNotFoundError: if no profile exists for the identifier.
        """
        ...

    async def count(self) -> int:
        """Number of stored profiles."""
        ...
