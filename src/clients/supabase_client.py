from supabase import Client, create_client
from supabase.client import ClientOptions


def create_supabase_client(url: str, key: str) -> Client:
    """One client per browser session; it carries that session's auth."""
    assert url and key, "Supabase URL and anon key are required."
    return create_client(
        url, key, options=ClientOptions(flow_type="implicit", auto_refresh_token=True)
    )
