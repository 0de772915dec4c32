"""
Identity admin service implementation.

Wraps the Firebase Admin auth API: user lookup and deletion, custom claims,
and ID token verification reconciled against the local user record store.
"""

import asyncio
import logging
from typing import Any, Optional, Union

import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin.auth import ExpiredIdTokenError, UserNotFoundError

from shared.config import Settings
from shared.models import ServiceResponse
from shared.service import BaseService
from modules.users.interfaces import IUserRecordStore
from modules.users.models import LocalUserRecord

from .claims import IDefaultClaimsProvider, StaticDefaultClaims
from .exceptions import TokenExpiredError
from .interfaces import IIdentityAdminService
from .models import ExternalIdentity, VerificationResult

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "user-not-found"


class IdentityAdminService(BaseService):
    """
    Implementation of the identity admin service.

    Every SDK call goes through the injected Firebase app. Failures are
    logged and collapsed into the result envelope, except for an expired
    ID token which is raised as TokenExpiredError.
    """

    def __init__(
        self,
        app: firebase_admin.App,
        user_store: IUserRecordStore,
        default_claims: Optional[IDefaultClaimsProvider] = None,
        settings: Optional[Settings] = None,
    ):
        super().__init__(settings)
        self._app = app
        self._user_store = user_store
        self._default_claims = default_claims or StaticDefaultClaims()

    async def delete_user(
        self,
        correlation_id: str,
        user_id: str,
    ) -> ServiceResponse:
        """Delete a user; deleting a user that does not exist is not an error."""
        if not user_id:
            return self._success()

        try:
            await asyncio.to_thread(firebase_auth.get_user, user_id, app=self._app)
            await asyncio.to_thread(firebase_auth.delete_user, user_id, app=self._app)
            logger.info(f"Deleted user {user_id} (correlation_id={correlation_id})")
            return self._success()
        except UserNotFoundError as e:
            logger.warning(
                f"User {user_id} not found for deletion: {e} (correlation_id={correlation_id})"
            )
            return self._success(USER_NOT_FOUND)
        except Exception:
            logger.exception(f"Failed to delete user {user_id} (correlation_id={correlation_id})")
            return self._error()

    async def get_user(
        self,
        correlation_id: str,
        user_id: str,
    ) -> Optional[ExternalIdentity]:
        """Get a user's identity; custom claims are never included."""
        if not user_id:
            return None

        try:
            record = await asyncio.to_thread(firebase_auth.get_user, user_id, app=self._app)
            return ExternalIdentity.from_user_record(record)
        except Exception:
            logger.exception(f"Failed to get user {user_id} (correlation_id={correlation_id})")
            return None

    async def set_claims(
        self,
        correlation_id: str,
        user_id: str,
        claims: Optional[dict[str, Any]],
        replace: bool = False,
    ) -> ServiceResponse:
        """
        Set custom claims on a user.

        Without ``replace`` the new claims are merged over the user's existing
        custom claims (new keys win). The change reaches the user's ID token
        the next time a new one is issued.
        """
        if not user_id:
            return self._error()

        try:
            record = await asyncio.to_thread(firebase_auth.get_user, user_id, app=self._app)

            if replace:
                updated_claims = dict(claims) if claims else None
            else:
                updated_claims = {**(record.custom_claims or {}), **(claims or {})}

            await asyncio.to_thread(
                firebase_auth.set_custom_user_claims,
                user_id,
                updated_claims,
                app=self._app,
            )
            return self._init_response()
        except Exception:
            logger.exception(
                f"Failed to set claims for user {user_id} (correlation_id={correlation_id})"
            )
            return self._error()

    async def verify_token(
        self,
        correlation_id: str,
        token: str,
    ) -> Union[VerificationResult, ServiceResponse, None]:
        """
        Verify an ID token and resolve the matching local user.

        A user seen for the first time gets a local record created through
        the user store. Claims come from the local record, falling back to
        the default claims when auth.claims.use_default is enabled.
        """
        results = VerificationResult()
        if not token:
            return results

        try:
            decoded = await asyncio.to_thread(
                firebase_auth.verify_id_token, token, app=self._app
            )
            if not decoded:
                return results

            logger.debug(f"verify_token decoded uid={decoded.get('uid')} (correlation_id={correlation_id})")

            uid = decoded.get("uid")
            if not uid:
                return results

            user_response = await self._user_store.fetch_by_external_id(correlation_id, uid)
            if not user_response.success or not user_response.results:
                user_response = await self._user_store.update(correlation_id, {"id": uid})
                if not user_response.success or not user_response.results:
                    logger.warning(
                        f"Failed to reconcile local user {uid} "
                        f"(error_code={user_response.error_code}, correlation_id={correlation_id})"
                    )
                    if self._settings.auth.reconciliation_failure == "propagate":
                        return user_response
                    return results

            results.user = self._as_record(user_response.results)
            results.claims = results.user.claims
            if self._settings.auth.claims.use_default and not results.claims:
                results.claims = self._default_claims.default_claims()

            results.success = True
            return results
        except ExpiredIdTokenError:
            logger.info(f"ID token expired (correlation_id={correlation_id})")
            raise TokenExpiredError()
        except Exception:
            logger.exception(f"Failed to verify ID token (correlation_id={correlation_id})")

        return None

    @staticmethod
    def _as_record(value: Any) -> LocalUserRecord:
        # Results never share state with the store's record
        if isinstance(value, LocalUserRecord):
            return value.model_copy(deep=True)
        return LocalUserRecord.model_validate(value)


# Verify the implementation satisfies the interface
def _verify_interface(app: firebase_admin.App, user_store: IUserRecordStore):
    """Type check that IdentityAdminService implements IIdentityAdminService."""
    service: IIdentityAdminService = IdentityAdminService(app, user_store)
    return service
