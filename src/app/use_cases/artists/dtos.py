"""
Artist Use Case DTOs
"""

from typing import Optional
from pydantic import BaseModel

from src.domain.entities import Artist


class UpdateArtistProfileCommand(BaseModel):
    """Profile fields an artist's manager may change; None leaves a field as is"""

    name: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None


class ArtistProfile(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_entity(cls, artist: Artist) -> "ArtistProfile":
        return cls(
            id=str(artist.id),
            name=artist.name,
            email=artist.email,
            bio=artist.bio,
            avatar=artist.avatar,
            created_at=artist.created_at.isoformat() if artist.created_at else None,
        )


class ArtistProfileResponse(BaseModel):
    """Response for get and update artist profile use cases"""

    message: Optional[str] = None
    artist: ArtistProfile
