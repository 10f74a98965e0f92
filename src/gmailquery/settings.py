"""Settings for gmailquery."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class GmailQuerySettings(BaseSettings):
    """gmailquery configuration settings."""

    LOG_LEVEL: str = "INFO"

    # Gmail date bounds have day granularity in the mailbox's local zone
    SEARCH_TIMEZONE: str = "US/Pacific"
    SEARCH_DATE_FORMAT: str = "%Y/%m/%d"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = GmailQuerySettings()
