"""
Supabase client for the user, account and address stores.

Records are read and written on behalf of callers, so only the
service-role client is used.
"""

from typing import Optional
from supabase import Client, ClientOptions, create_client

from .config import get_settings

_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the shared service-role client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    if _service_client is not None:
        return _service_client

    settings = get_settings()
    if not (settings.supabase_url and settings.supabase_service_role_key):
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )

    _service_client = create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(postgrest_client_timeout=settings.supabase_timeout),
    )
    return _service_client


def reset_client_cache() -> None:
    """Drop the cached client so the next call reads settings again."""
    global _service_client
    _service_client = None
