from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

import os
import yaml


class Settings(BaseModel):
    """Configuration options loaded from YAML or environment variables."""

    # LLM Configuration
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4"
    openai_base_url: Optional[str] = None
    # ``None`` waits for the provider indefinitely
    request_timeout: Optional[float] = None

    # Default output locations
    changelog: Optional[str] = None
    output: Optional[str] = None

    @field_validator("request_timeout")
    @classmethod
    def _check_timeout(cls, value: Optional[float]) -> Optional[float]:
        """Ensure the request timeout is positive when set."""
        if value is not None and value <= 0:
            raise ValueError("request_timeout must be positive")
        return value

    @field_validator("openai_model")
    @classmethod
    def _check_model(cls, value: str) -> str:
        """Reject an empty model name."""
        if not value.strip():
            raise ValueError("openai_model must not be empty")
        return value


def load_settings(path: str | None = None) -> Settings:
    """Return :class:`Settings` from ``path`` and environment variables."""

    data: dict[str, object] = {}
    if path:
        with open(path, "r", encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid configuration: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Invalid configuration: {path} must contain a mapping")
    env = os.getenv
    if "openai_api_key" not in data and env("OPENAI_API_KEY"):
        data["openai_api_key"] = env("OPENAI_API_KEY")
    if "openai_model" not in data and env("OPENAI_MODEL"):
        data["openai_model"] = env("OPENAI_MODEL")
    if "openai_base_url" not in data and env("OPENAI_BASE_URL"):
        data["openai_base_url"] = env("OPENAI_BASE_URL")
    if "request_timeout" not in data and env("SUMMIT_REQUEST_TIMEOUT"):
        try:
            data["request_timeout"] = float(env("SUMMIT_REQUEST_TIMEOUT"))
        except ValueError:
            pass
    if "changelog" not in data and env("SUMMIT_CHANGELOG"):
        data["changelog"] = env("SUMMIT_CHANGELOG")
    if "output" not in data and env("SUMMIT_OUTPUT"):
        data["output"] = env("SUMMIT_OUTPUT")

    try:
        settings_obj = Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
    globals()["settings"] = settings_obj
    return settings_obj


# Global settings instance used by the package
settings = load_settings()
