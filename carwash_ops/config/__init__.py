"""
Configuration for the Supabase-backed data stores.
"""

from .settings import SupabaseSettings, get_supabase_settings, load_env

__all__ = [
    'SupabaseSettings',
    'get_supabase_settings',
    'load_env'
]
