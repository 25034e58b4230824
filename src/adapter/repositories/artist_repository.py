from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.artist_repository import IArtistRepository
from src.domain.entities import Artist


class ArtistRepository(IArtistRepository):
    """Artist repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, artist_id: UUID) -> Optional[Artist]:
        """Get artist by ID"""
        stmt = select(Artist).where(Artist.id == artist_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> Optional[Artist]:
        """Get the artist profile owned by a user"""
        stmt = select(Artist).where(Artist.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, artist: Artist) -> Artist:
        """Create a new artist profile"""
        self.session.add(artist)
        await self.session.flush()
        await self.session.refresh(artist)
        return artist

    async def update(self, artist: Artist) -> Artist:
        """Update existing artist profile"""
        self.session.add(artist)
        await self.session.flush()
        await self.session.refresh(artist)
        return artist
