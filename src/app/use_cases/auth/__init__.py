"""
Authentication Use Cases

Identity, session and context switching business logic.
"""

from .authenticate_use_case import AuthenticateUseCase
from .dtos import (
    ArtistSummary,
    AuthenticatedUser,
    AuthResponse,
    ContextsResponse,
    LogoutResponse,
    RegisterCommand,
    SwitchContextResponse,
    UserPayload,
)
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .refresh_contexts_use_case import RefreshContextsUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .register_use_case import RegisterUseCase
from .switch_context_use_case import SwitchContextUseCase

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
    "SwitchContextUseCase",
    "RefreshContextsUseCase",
    "AuthenticateUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "SwitchContextResponse",
    "ContextsResponse",
    "LogoutResponse",
    "AuthenticatedUser",
    # DTOs - Nested Models
    "UserPayload",
    "ArtistSummary",
]
