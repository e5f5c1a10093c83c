"""
Permission checks for the acting user.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostel_admin.core.exceptions import AuthenticationError, AuthorizationError, UserNotFoundError
from hostel_admin.core.logging import get_logger
from hostel_admin.models.people import User
from hostel_admin.services.base import ServiceResult

logger = get_logger(__name__)

# Owners always manage their own roles, whatever their role grants.
OWNER_ROLE_NAME = "owner"
OWNER_ALWAYS_ALLOWED = {"user_roles"}


class AccessControlService:
    def __init__(self, db_session: Session):
        self.db = db_session

    def check(self, user_id: Optional[int], resource: str, action: str) -> ServiceResult[User]:
        """
        Resolve the acting user and verify they may perform ``action`` on
        ``resource``. On success the user row is returned.
        """
        if user_id is None:
            return ServiceResult.from_app_exception(AuthenticationError("User identification required"))

        user = self.db.get(User, user_id)
        if user is None:
            return ServiceResult.from_app_exception(UserNotFoundError(user_id))

        if user.is_admin:
            return ServiceResult.success(user)

        role = user.user_role
        if role is None:
            logger.info(f"User {user_id} has no role; denied {resource}.{action}")
            return ServiceResult.from_app_exception(
                AuthorizationError("Access denied. No role assigned.", resource=resource, action=action)
            )

        if role.role_name.lower() == OWNER_ROLE_NAME and resource in OWNER_ALWAYS_ALLOWED:
            return ServiceResult.success(user)

        if not role.has_permission(resource, action):
            logger.info(f"User {user_id} ({role.role_name}) denied {resource}.{action}")
            return ServiceResult.from_app_exception(
                AuthorizationError(
                    f"Access denied. You don't have permission to {action} {resource}.",
                    resource=resource,
                    action=action,
                )
            )

        return ServiceResult.success(user)
