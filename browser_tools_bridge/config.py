from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3025
DEFAULT_HOST = "127.0.0.1"
DEFAULT_NPX_COMMAND = "@agentdeskai/browser-tools-server@1.2.0"


class Settings(BaseSettings):
    # API Settings
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # BrowserTools agent Settings
    BROWSER_TOOLS_HOST: str = DEFAULT_HOST
    BROWSER_TOOLS_PORT: int = DEFAULT_PORT
    BROWSER_TOOLS_NPX_COMMAND: str = DEFAULT_NPX_COMMAND

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()


class BrowserToolsSettings(BaseModel):
    """Per-session configuration of the BrowserTools agent."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    port: int = Field(DEFAULT_PORT, ge=0, le=65535)
    host: str = DEFAULT_HOST
    npx_command: str = DEFAULT_NPX_COMMAND

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @classmethod
    def from_host(cls, raw: Any) -> "BrowserToolsSettings":
        """
        Build settings from the host-provided settings object.

        Invalid settings are replaced by the defaults as a whole.
        """
        if raw is None:
            return cls()
        try:
            return cls.model_validate(raw)
        except ValidationError:
            return cls()

    @classmethod
    def from_environment(cls, env: Settings = settings) -> "BrowserToolsSettings":
        return cls(
            port=env.BROWSER_TOOLS_PORT,
            host=env.BROWSER_TOOLS_HOST,
            npx_command=env.BROWSER_TOOLS_NPX_COMMAND,
        )
