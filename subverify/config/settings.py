from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from subverify.config.exceptions import ConfigInvalidError


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    channel_name: str = ""
    channel_id: str = ""
    channel_link: str = ""
    keywords: str = "subscribed"
    verification_mode: str = "lenient"
    require_literal_subscribed: bool = False

    role_id: str = ""
    entitlement_backend: str = "http"
    bot_token: str = ""
    guild_id: str = ""
    platform_api_base_url: str = "https://discord.com/api/v10"
    platform_timeout_seconds: int = 10

    save_data: bool = True
    ledger_backend: str = "json"
    ledger_path: str = "subscriber.json"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "subverify"
    db_username: str = "subverify"
    db_password: str = "secret"

    owner_id: str = ""

    image_target_width: int = 1000
    image_fetch_timeout_seconds: int = 15

    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"
    ocr_timeout_seconds: int = 60

    listing_page_size: int = 10
    listing_timeout_seconds: int = 120

    @field_validator("verification_mode")
    @classmethod
    def _check_mode(cls, value: str) -> str:
        mode = value.strip().lower()
        if mode not in ("exact", "lenient"):
            raise ValueError("verification_mode must be 'exact' or 'lenient'")
        return mode

    def validate_required(self) -> None:
        """Check startup-fatal options.

        Raises:
            ConfigInvalidError: if no channel identity token is configured, or
                the http granter is selected without its credentials,
                or the log-only granter is selected outside app_env=dev.
        """
        if not self.channel_name.strip() and not self.channel_id.strip():
            raise ConfigInvalidError("channel_name or channel_id is required")
        if self.entitlement_backend.lower() == "http":
            if not self.bot_token:
                raise ConfigInvalidError(
                    "bot_token is required for entitlement_backend=http"
                )
            if not self.guild_id:
                raise ConfigInvalidError(
                    "guild_id is required for entitlement_backend=http"
                )
        elif self.entitlement_backend.lower() == "log" and self.app_env != "dev":
            raise ConfigInvalidError(
                f"entitlement_backend=log grants no roles and is refused in app_env={self.app_env}"
            )
