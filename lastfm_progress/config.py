from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LASTFM_PROGRESS_",
        case_sensitive=True,
        extra="ignore",  # .env may be shared with the SDK's own settings
        frozen=True,
    )

    # Documentation page listing every API method, grouped by package
    API_INTRO_PAGE: str = "http://www.last.fm/api/intro"

    # Per-method documentation link and progress bar image used in the report
    API_METHOD_URL: str = "http://www.last.fm/api/show/{method}"
    PROGRESS_BAR_URL: str = "http://progressed.io/bar/{percent}"

    # HTTP
    HTTP_TIMEOUT: float = 30.0  # seconds
    FOLLOW_REDIRECTS: bool = True
    USER_AGENT: str = "lastfm-progress/1.0"

    # Output
    OUTPUT_PATH: str = "PROGRESS.md"

    # How much of the page to keep in a ParseError for diagnosis
    PARSE_ERROR_FRAGMENT_LENGTH: int = 500


settings = Settings()
