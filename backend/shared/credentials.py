"""
Service-account credential sources.

A credential source is a small capability object that knows how to produce
a service-account JSON blob. The Firebase app factory tries an ordered list
of sources and uses the first one that yields a valid JSON object.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Protocol, runtime_checkable

from .config import Settings
from .exceptions import CredentialLoadError

logger = logging.getLogger(__name__)


@runtime_checkable
class ICredentialSource(Protocol):
    """Interface for anything that can supply a service-account blob."""

    @property
    def name(self) -> str:
        """Human-readable description used in logs and errors."""
        ...

    def load(self) -> Optional[dict[str, Any]]:
        """
        Load the credential.

        Returns:
            The parsed service-account mapping, or None if this source
            has nothing to offer.

        Raises:
            ValueError: If the source holds a value that is not a JSON object
        """
        ...


def _parse_blob(raw: str) -> dict[str, Any]:
    blob = json.loads(raw)
    if not isinstance(blob, dict):
        raise ValueError("Service account credential must be a JSON object")
    return blob


class EnvironmentCredentialSource:
    """Reads a JSON blob from an environment variable."""

    def __init__(self, variable: str = "SERVICE_ACCOUNT_KEY", value: Optional[str] = None):
        self._variable = variable
        self._value = value

    @property
    def name(self) -> str:
        return f"env:{self._variable}"

    def load(self) -> Optional[dict[str, Any]]:
        raw = self._value if self._value is not None else os.environ.get(self._variable)
        if not raw:
            return None
        return _parse_blob(raw)


class ConfigCredentialSource:
    """Uses a JSON blob (or an already parsed mapping) supplied through configuration."""

    def __init__(self, credentials: Optional[str | Mapping[str, Any]]):
        self._credentials = credentials

    @property
    def name(self) -> str:
        return "config"

    def load(self) -> Optional[dict[str, Any]]:
        if not self._credentials:
            return None
        if isinstance(self._credentials, str):
            return _parse_blob(self._credentials)
        return dict(self._credentials)


class FileCredentialSource:
    """Reads a JSON blob from a file on disk."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def name(self) -> str:
        return f"file:{self._path}"

    def load(self) -> Optional[dict[str, Any]]:
        if not self._path.is_file():
            return None
        return _parse_blob(self._path.read_text(encoding="utf-8"))


def default_credential_sources(settings: Settings) -> list[ICredentialSource]:
    """Build the standard lookup chain: environment, configuration, file."""
    return [
        EnvironmentCredentialSource(value=settings.service_account_key or None),
        ConfigCredentialSource(settings.firebase_credentials),
        FileCredentialSource(settings.firebase_credentials_path),
    ]


def load_service_account(sources: Iterable[ICredentialSource]) -> dict[str, Any]:
    """
    Return the first valid service-account blob from ``sources``.

    A source holding malformed JSON is logged and skipped.

    Raises:
        CredentialLoadError: If no source yields a valid JSON object
    """
    tried: list[str] = []
    for source in sources:
        tried.append(source.name)
        try:
            blob = source.load()
        except (ValueError, OSError) as e:
            logger.warning(f"Ignoring invalid credential from {source.name}: {e}")
            continue
        if blob:
            logger.debug(f"Loaded service account credential from {source.name}")
            return blob

    raise CredentialLoadError(tried)
