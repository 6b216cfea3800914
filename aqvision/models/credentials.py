"""Pydantic models for upstream credentials and their diagnostic status."""

from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import List


class CredentialSource(str, Enum):
    """Where a resolved credential value came from."""

    ENVIRONMENT = "environment"
    BUILTIN_DEFAULT = "built-in default"


class Credential(BaseModel):
    """A resolved API key for one upstream provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    source: CredentialSource

    @property
    def configured(self) -> bool:
        return bool(self.value)


class CredentialStatus(BaseModel):
    """Credential check reported at startup and by /health. Never carries the value."""

    name: str
    configured: bool
    length: int
    source: CredentialSource


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""

    status: str
    credentials: List[CredentialStatus]
