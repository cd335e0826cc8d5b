"""
Backend identity.

An identity has to be acquired before any collection listener is attached. The
identity is only logged; it is never used to filter queries, and write
authorization is left to the backend's own access rules.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import google.auth
from google.auth.credentials import AnonymousCredentials, Credentials
from google.auth.exceptions import DefaultCredentialsError, GoogleAuthError
from google.oauth2 import service_account

from src.config import Settings
from src.utils.exceptions import AuthenticationException, ConfigurationException

logger = logging.getLogger(__name__)

FIRESTORE_SCOPES = [
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/datastore",
]


@dataclass
class BackendIdentity:
    uid: str
    credentials: Optional[Credentials]
    anonymous: bool = False


class AuthService:
    def __init__(self, settings: Settings):
        self._settings = settings

    def validate_config(self) -> None:
        missing = [
            name
            for name, value in (
                ("FIREBASE_PROJECT_ID", self._settings.firebase_project_id),
                ("FIREBASE_APP_ID", self._settings.firebase_app_id),
            )
            if not value
        ]
        if missing:
            raise ConfigurationException(
                "Firebase configuration is missing or invalid. "
                f"Make sure {', '.join(missing)} are set in your environment or .env file."
            )

    def acquire_identity(self) -> BackendIdentity:
        """
        Resolve credentials for the Firestore client.

        Order: anonymous against the emulator, then an explicit service-account
        file, then Google application-default credentials.

        Raises:
            AuthenticationException: if no credentials can be obtained
        """
        if self._settings.firestore_emulator_host:
            logger.info(f"Using Firestore emulator at {self._settings.firestore_emulator_host}")
            return BackendIdentity(uid="anonymous", credentials=AnonymousCredentials(), anonymous=True)

        if self._settings.firebase_credentials_file:
            try:
                credentials = service_account.Credentials.from_service_account_file(
                    self._settings.firebase_credentials_file, scopes=FIRESTORE_SCOPES
                )
            except (OSError, ValueError, GoogleAuthError) as e:
                raise AuthenticationException(f"Failed to authenticate: {e}")
            return BackendIdentity(uid=credentials.service_account_email, credentials=credentials)

        try:
            credentials, _ = google.auth.default(scopes=FIRESTORE_SCOPES)
        except DefaultCredentialsError as e:
            raise AuthenticationException(f"Failed to authenticate: {e}")

        uid = getattr(credentials, "service_account_email", None) or "application-default"
        return BackendIdentity(uid=uid, credentials=credentials)
