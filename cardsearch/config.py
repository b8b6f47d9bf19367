from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "cardsearch"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8080

    # Upstream card database. The search path is joined onto the base URL,
    # so an absolute path replaces whatever path the base URL carries.
    scryfall_base_url: str = "https://api.scryfall.com/"
    scryfall_search_path: str = "/cards/search"

    user_agent: str = "cardsearch/1.0"


settings = Settings()
