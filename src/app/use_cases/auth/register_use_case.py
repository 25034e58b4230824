import logging

import bcrypt
from libs.result import Error, Result, Return

from config import ApplicationConfig
from src.app.services.context_resolver import ContextResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Artist, AuditEvent, User

from .dtos import AuthResponse, RegisterCommand
from .sessions import issue_token, open_session
from .user_payload import build_user_payload

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Reject duplicate email
    2. Hash password with bcrypt
    3. Create User and, when artist_name is given, the owned Artist profile
    4. Refresh contexts so the new user starts in a resolved context
    5. Open a session, record an audit event, commit
    6. Return bearer token and user payload
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"),
                bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS),
            )

            user = User(
                name=command.name,
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
            )
            user = await self.uow.users.create(user)

            artist = None
            if command.artist_name:
                artist = Artist(
                    name=command.artist_name,
                    email=command.email,
                    user_id=user.id,
                )
                artist = await self.uow.artists.create(artist)

            user = await ContextResolver(self.uow).refresh_contexts(user)

            session = await open_session(self.uow, user.id)

            audit_event = AuditEvent(
                artist_id=artist.id if artist else None,
                user_id=user.id,
                action="register",
                event_metadata={
                    "email": command.email,
                    "artist_profile_created": artist is not None,
                },
            )
            await self.uow.audit_events.create(audit_event)

            await self.uow.commit()
            logger.info("Registered user %s", user.id)

            return Return.ok(
                AuthResponse(
                    token=issue_token(session),
                    user=await build_user_payload(self.uow, user),
                )
            )
