"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import List, Optional
from pydantic import BaseModel

from src.domain.permissions import Permissions


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - validated registration intent

    artist_name creates an owned artist profile alongside the user.
    """

    name: str
    email: str
    password: str
    artist_name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ArtistSummary(BaseModel):
    """Artist for the user's current context"""

    id: str
    name: str
    bio: Optional[str] = None
    avatar: Optional[str] = None


class UserPayload(BaseModel):
    """User with resolved context, role and permissions"""

    id: str
    name: str
    email: str
    current_context: Optional[str]
    available_contexts: List[str]
    is_multi_role: bool
    current_role: Optional[str]
    permissions: Permissions
    artist: Optional[ArtistSummary] = None


class AuthResponse(BaseModel):
    """Response for register, login and token refresh"""

    token: str
    user: UserPayload


class SwitchContextResponse(BaseModel):
    """Response for switch context use case"""

    message: str
    user: UserPayload


class ContextsResponse(BaseModel):
    """Response for refresh contexts use case"""

    available_contexts: List[str]
    current_context: Optional[str]
    is_multi_role: bool


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    message: str


class AuthenticatedUser(BaseModel):
    """Identity behind a verified bearer token"""

    user_id: str
    session_id: str
