from supabase import Client, create_client
from adminpage.config import get_config
from adminpage.logging import get_logger

class SupabaseAuthentication:
    """Handles Supabase authentication and client creation using AppConfig singleton."""
    def __init__(self) -> None:
        """Initializes the authentication handler using the singleton AppConfig."""
        self.config = get_config()
        self.logger = get_logger(__name__)

    def get_supabase_credentials(self):
        """Picks the URL and API key the client should use.

        Returns:
            tuple[str, str]: The project URL and API key.
        Raises:
            RuntimeError: If required configuration is missing.
        """
        if not self.config.supabase_url:
            self.logger.error("Missing Supabase configuration values.")
            raise RuntimeError("Missing Supabase configuration values.")
        if self.config.supabase_service_role_key:
            self.logger.info("Configuring Supabase authentication with service role key")
            return self.config.supabase_url, self.config.supabase_service_role_key
        elif self.config.supabase_key:
            self.logger.info("Configuring Supabase authentication with anon key")
            return self.config.supabase_url, self.config.supabase_key
        else:
            self.logger.error("Missing Supabase configuration values.")
            raise RuntimeError("Missing Supabase configuration values.")

    def get_client(self) -> Client:
        """Returns an authenticated Supabase client.

        Returns:
            Client: The Supabase client instance.
        """
        url, key = self.get_supabase_credentials()
        self.logger.info(f"Instantiating Supabase client for {url}")
        return create_client(url, key)

def get_supabase_auth() -> SupabaseAuthentication:
    """Returns a new SupabaseAuthentication instance using the latest config."""
    return SupabaseAuthentication()
