"""
Pydantic model for application configuration.
Provides validation for all settings.
"""

from pydantic import BaseModel, Field, field_validator

from suttaplex_csv.api.client import DEFAULT_BASE_URL
from suttaplex_csv.api.pacer import DEFAULT_DELAY_MS


class AppConfig(BaseModel):
    """A validated configuration model for the application."""

    # API
    api_base_url: str = DEFAULT_BASE_URL
    request_timeout: int = 30

    # Report Settings
    request_delay_ms: int = DEFAULT_DELAY_MS
    output_dir: str = "."
    catalog_path: str = ""

    # Internal fields not loaded from INI file
    config_path: str = Field("", repr=False)

    class Config:
        """Pydantic model configuration."""

        validate_assignment = True
        str_strip_whitespace = True

    @field_validator("api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensures the API root is an http(s) URL and drops any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API base URL must start with http:// or https://.")
        return v.rstrip("/")

    @field_validator("request_delay_ms")
    @classmethod
    def validate_delay(cls, v: int) -> int:
        if v < 0 or v > 60000:
            raise ValueError("Request delay must be between 0 and 60000 ms.")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v < 1 or v > 300:
            raise ValueError("Request timeout must be between 1 and 300 seconds.")
        return v

    @field_validator("output_dir")
    @classmethod
    def validate_output_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("Output directory cannot be empty.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        internal_fields = {"config_path"}
        return {key for key in cls.model_fields if key not in internal_fields}
