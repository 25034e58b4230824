from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ArtistProfile, ArtistProfileResponse


class GetArtistProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, artist_id: UUID) -> Result[ArtistProfileResponse]:
        async with self.uow:
            artist = await self.uow.artists.get_by_id(artist_id)
            if artist is None:
                return Return.err(Error("ARTIST_NOT_FOUND", "Artist profile not found"))

            return Return.ok(ArtistProfileResponse(artist=ArtistProfile.from_entity(artist)))
