"""Resolves upstream API keys from settings, falling back to built-in demo keys."""

from typing import Dict, List
from aqvision.config import Settings
from aqvision.models.credentials import Credential, CredentialSource, CredentialStatus

OPENWEATHER = "openweather_api_key"
AIRNOW = "airnow_api_key"
GOOGLE_MAPS = "google_maps_api_key"
GEMINI = "gemini_api_key"

# Shipped demo keys. The Gemini default stays empty so the summary endpoint
# serves its fallback text until a real key is configured.
BUILTIN_DEFAULTS: Dict[str, str] = {
    OPENWEATHER: "demo-openweather-key",
    AIRNOW: "DEMO-AIRNOW-KEY",
    GOOGLE_MAPS: "demo-google-maps-key",
    GEMINI: "",
}


class CredentialSet:
    """Immutable set of resolved credentials, built once at startup."""

    def __init__(self, credentials: Dict[str, Credential]):
        self._credentials = dict(credentials)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialSet":
        resolved = {}
        for name, default in BUILTIN_DEFAULTS.items():
            value = getattr(settings, name, None)
            if value:
                resolved[name] = Credential(
                    name=name, value=value, source=CredentialSource.ENVIRONMENT
                )
            else:
                resolved[name] = Credential(
                    name=name, value=default, source=CredentialSource.BUILTIN_DEFAULT
                )
        return cls(resolved)

    def resolve(self, name: str) -> Credential:
        """Returns the credential for one of the four known upstream keys."""
        return self._credentials[name]

    def value(self, name: str) -> str:
        return self.resolve(name).value

    def statuses(self) -> List[CredentialStatus]:
        return [
            CredentialStatus(
                name=credential.name,
                configured=credential.configured,
                length=len(credential.value),
                source=credential.source,
            )
            for credential in self._credentials.values()
        ]
