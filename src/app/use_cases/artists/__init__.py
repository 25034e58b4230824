"""
Artist Use Cases

Artist profile business logic.
"""

from .dtos import ArtistProfile, ArtistProfileResponse, UpdateArtistProfileCommand
from .get_artist_profile_use_case import GetArtistProfileUseCase
from .update_artist_profile_use_case import UpdateArtistProfileUseCase

__all__ = [
    "GetArtistProfileUseCase",
    "UpdateArtistProfileUseCase",
    "UpdateArtistProfileCommand",
    "ArtistProfile",
    "ArtistProfileResponse",
]
