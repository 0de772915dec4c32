"""
Firebase Admin app factory.

Builds an explicitly named firebase_admin.App from a service-account
credential. The app handle is passed to each adapter rather than relying
on the SDK's global default app.
"""

import logging
from typing import Iterable, Optional

import firebase_admin
from firebase_admin import credentials

from .config import Settings, get_settings
from .credentials import (
    ICredentialSource,
    default_credential_sources,
    load_service_account,
)

logger = logging.getLogger(__name__)


def create_firebase_app(
    settings: Optional[Settings] = None,
    sources: Optional[Iterable[ICredentialSource]] = None,
) -> firebase_admin.App:
    """
    Create a Firebase Admin app for this process.

    Args:
        settings: Settings instance. Defaults to the cached process settings.
        sources: Credential sources to try in order. Defaults to
            environment, configuration, then credentials file.

    Returns:
        Initialized firebase_admin.App

    Raises:
        CredentialLoadError: If no credential source yields valid JSON
    """
    settings = settings or get_settings()
    if sources is None:
        sources = default_credential_sources(settings)

    service_account = load_service_account(sources)

    options = {}
    if service_account.get("database_url"):
        options["databaseURL"] = service_account["database_url"]

    app = firebase_admin.initialize_app(
        credentials.Certificate(service_account),
        options,
        name=settings.firebase_app_name,
    )
    logger.info(
        f"Initialized Firebase app '{app.name}' "
        f"for project {service_account.get('project_id', '<unknown>')}"
    )
    return app


def delete_firebase_app(app: firebase_admin.App) -> None:
    """Tear down an app created by create_firebase_app."""
    firebase_admin.delete_app(app)
