from __future__ import annotations

from supabase import Client, create_client

from profile_service.infrastructure.config import Settings


def create_supabase_client(settings: Settings) -> Client | None:
    """Build a Supabase client, or None when Supabase is disabled or unconfigured."""
    if settings.supabase_disabled or not settings.supabase_url or not settings.supabase_key:
        return None
    return create_client(settings.supabase_url, settings.supabase_key)
