from src.app.services.context_resolver import ContextResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User

from .dtos import ArtistSummary, UserPayload


async def build_user_payload(uow: UnitOfWork, user: User) -> UserPayload:
    """Describe a user in its current context (call inside an open UoW)"""
    resolver = ContextResolver(uow)
    artist = await resolver.get_current_artist(user)

    return UserPayload(
        id=str(user.id),
        name=user.name,
        email=user.email,
        current_context=user.current_context.value if user.current_context else None,
        available_contexts=list(user.available_contexts or []),
        is_multi_role=user.is_multi_role,
        current_role=await resolver.get_current_role(user),
        permissions=await resolver.get_permissions(user),
        artist=ArtistSummary(
            id=str(artist.id),
            name=artist.name,
            bio=artist.bio,
            avatar=artist.avatar,
        )
        if artist
        else None,
    )
