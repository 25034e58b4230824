from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Artist


class IArtistRepository(ABC):
    """Artist repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, artist_id: UUID) -> Optional[Artist]:
        """Get artist by ID"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[Artist]:
        """Get the artist profile owned by a user"""
        pass

    @abstractmethod
    async def create(self, artist: Artist) -> Artist:
        """Create a new artist profile"""
        pass

    @abstractmethod
    async def update(self, artist: Artist) -> Artist:
        """Update existing artist profile"""
        pass
