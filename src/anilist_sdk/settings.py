"""Settings loader for the AniList client.

Reads the API endpoint, request timeout and optional credentials from
environment variables or a local .env file.

Recognised keys:
- ANILIST_API_URL (optional, defaults to the public endpoint)
- ANILIST_TIMEOUT (optional, seconds)
- ANILIST_ACCESS_TOKEN (optional, only needed for user-scoped data)
- ANILIST_MAX_PAGES (optional, bound for paginated helpers)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://graphql.anilist.co"


class Settings(BaseSettings):
    """Settings for the AniList GraphQL client."""

    ANILIST_API_URL: str = DEFAULT_API_URL
    ANILIST_TIMEOUT: float = 10.0
    ANILIST_ACCESS_TOKEN: str | None = None
    ANILIST_MAX_PAGES: int | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="allow")

    def auth_headers(self) -> dict[str, str]:
        """Return the Authorization header when an access token is configured."""
        if not self.ANILIST_ACCESS_TOKEN:
            return {}
        return {"Authorization": f"Bearer {self.ANILIST_ACCESS_TOKEN}"}
