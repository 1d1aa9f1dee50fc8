from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, SecretStr, field_validator

from .endpoints import PRIVATE_ENDPOINT, PUBLIC_ENDPOINT


class EndpointSettings(BaseModel):
    public: str = PUBLIC_ENDPOINT
    private: str = PRIVATE_ENDPOINT

    model_config = {"extra": "forbid"}

    @field_validator("public", "private")
    @classmethod
    def _absolute_http_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"endpoint must be an absolute http(s) URL, got {value!r}")
        return value.rstrip("/")


class HttpSettings(BaseModel):
    timeout_seconds: float = Field(default=10.0, gt=0)
    proxy: str | None = None

    model_config = {"extra": "forbid"}


class CredentialSettings(BaseModel):
    api_key: SecretStr
    api_secret: SecretStr

    model_config = {"extra": "forbid"}


class Settings(BaseModel):
    env: str = "dev"
    endpoints: EndpointSettings = Field(default_factory=EndpointSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    credentials: CredentialSettings | None = None

    model_config = {"extra": "forbid"}

    def redacted(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        creds = data.get("credentials")
        if isinstance(creds, dict):
            for key in ("api_key", "api_secret"):
                if key in creds:
                    creds[key] = "***"
        return data
