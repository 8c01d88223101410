from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PAUPERLIST_")

    app_name: str = "PauperList"
    debug: bool = False

    scryfall_api_url: str = "https://api.scryfall.com"
    scryfall_user_agent: str = "PauperList/1.0"
    scryfall_timeout: float = 30.0

    # Scryfall's /cards/collection endpoint accepts at most 75 identifiers
    scryfall_batch_size: int = 75

    # Scryfall asks for 50-100ms between requests
    scryfall_request_interval: float = 0.1

    # Extra typo -> canonical name pairs merged over the built-in whitelist.
    # Set as JSON, e.g. PAUPERLIST_AUTOCORRECT_OVERRIDES='{"Ponderr": "Ponder"}'
    autocorrect_overrides: dict[str, str] = {}


settings = Settings()
