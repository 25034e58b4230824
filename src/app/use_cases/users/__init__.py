"""
User Use Cases

Current-user business logic.
"""

from .load_context_use_case import LoadContextUseCase

__all__ = [
    "LoadContextUseCase",
]
