"""
Shared infrastructure for the Tach accounts backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Document repository contracts and the Supabase implementation
- security: Password hashing
- container: Wiring of concrete services

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    TachError,
    BadRequestError,
    NotFoundError,
    ServerError,
    ExternalServiceError,
)
from .repository import IQueryRepository, ICommandRepository, BaseRepository, SupabaseRepository
from .security import IPasswordHasher, BcryptPasswordHasher

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "TachError",
    "BadRequestError",
    "NotFoundError",
    "ServerError",
    "ExternalServiceError",
    "IQueryRepository",
    "ICommandRepository",
    "BaseRepository",
    "SupabaseRepository",
    "IPasswordHasher",
    "BcryptPasswordHasher",
]
