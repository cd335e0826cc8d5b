"""
Admin authorization gate.

A UI-level switch only: the secret code is compared against one configured
value and grants no backend privileges. Write authorization has to be enforced
by the backend's own access rules.
"""
import hmac
import logging

from src.model.state import AppState, Notification
from src.services import navigation_service as navigation
from src.utils.exceptions import AccessDeniedException

logger = logging.getLogger(__name__)


class AdminGateService:
    def __init__(self, secret_code: str):
        self._secret_code = secret_code

    def submit_secret_code(self, state: AppState, code: str) -> AppState:
        if hmac.compare_digest(code.encode("utf-8"), self._secret_code.encode("utf-8")):
            logger.info("Admin mode enabled for session")
            return navigation.open_admin_panel(state.model_copy(update={"admin_mode": True}))

        logger.warning("Rejected admin secret code")
        return state.model_copy(
            update={
                "notification": Notification.error(
                    "The secret code is incorrect.", title="Access Denied"
                )
            }
        )

    @staticmethod
    def logout(state: AppState) -> AppState:
        logger.info("Admin mode disabled for session")
        return navigation.go_home(state.model_copy(update={"admin_mode": False}))

    @staticmethod
    def require_admin(state: AppState) -> None:
        if not state.admin_mode:
            raise AccessDeniedException("Admin mode is required for this action")
