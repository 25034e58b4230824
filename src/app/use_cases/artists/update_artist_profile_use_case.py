"""
Update Artist Profile Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent

from .dtos import ArtistProfile, ArtistProfileResponse, UpdateArtistProfileCommand

logger = logging.getLogger(__name__)


class UpdateArtistProfileUseCase:
    """
    Use case for editing the current artist's profile.

    Business Rules:
    - Caller must hold manage_team (checked by the authorization gate)
    - Only fields present in the command are changed
    - Creates audit event listing the changed fields
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_user_id: UUID, artist_id: UUID, command: UpdateArtistProfileCommand
    ) -> Result[ArtistProfileResponse]:
        async with self.uow:
            artist = await self.uow.artists.get_by_id(artist_id)
            if artist is None:
                return Return.err(Error("ARTIST_NOT_FOUND", "Artist profile not found"))

            changes = command.model_dump(exclude_none=True)
            for field, value in changes.items():
                setattr(artist, field, value)
            artist = await self.uow.artists.update(artist)

            audit = AuditEvent(
                artist_id=artist.id,
                user_id=requester_user_id,
                action="artist_profile_updated",
                event_metadata={"fields": sorted(changes.keys())},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()
            logger.info("Artist %s profile updated", artist.id)

            return Return.ok(
                ArtistProfileResponse(
                    message="Artist profile updated successfully",
                    artist=ArtistProfile.from_entity(artist),
                )
            )
