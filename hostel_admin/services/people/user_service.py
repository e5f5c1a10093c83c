"""
Back-office user accounts and role assignment.
"""

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from hostel_admin.core.exceptions import (
    AuthorizationError,
    BusinessRuleError,
    DuplicateEntryError,
    RoleNotFoundError,
    UserNotFoundError,
)
from hostel_admin.core.pagination import normalize_pagination, paginate_items
from hostel_admin.models.people import User
from hostel_admin.models.rbac import Role
from hostel_admin.repositories.people_repository import UserRepository
from hostel_admin.repositories.rbac_repository import RoleRepository
from hostel_admin.schemas.common.pagination import PaginatedResponse
from hostel_admin.schemas.people import UserCreate, UserResponse, UserUpdate
from hostel_admin.services.base import BaseService, ServiceResult


class UserService(BaseService[User, UserRepository]):
    """
    User accounts.

    Non-admin callers may only hand out roles they can see (global roles
    and their own), and may neither grant nor modify administrator access.
    """

    def __init__(self, repository: UserRepository, db_session: Session):
        super().__init__(repository, db_session)
        self.roles = RoleRepository(db_session)

    def list_users(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ServiceResult[PaginatedResponse[UserResponse]]:
        try:
            params = normalize_pagination(page, page_size)
            items = self.repository.list(offset=params.offset, limit=params.limit)
            result = paginate_items(
                items=items,
                total_items=self.repository.count(),
                params=params,
                mapper=UserResponse.model_validate,
            )
            return ServiceResult.success(result, message="Users fetched successfully")
        except Exception as e:
            return self._handle_exception(e, "list users")

    def create_user(self, request: UserCreate, acting_user: User) -> ServiceResult[UserResponse]:
        try:
            with self.transaction():
                if request.is_admin:
                    self._require_admin(acting_user, "grant administrator access")
                self._ensure_unique(request.email, request.username)
                if request.user_role_id is not None:
                    self._get_assignable_role(request.user_role_id, acting_user)
                user = self.repository.create(request.model_dump())
            return ServiceResult.success(UserResponse.model_validate(user), message="User created successfully")
        except Exception as e:
            return self._handle_exception(e, "create user")

    def get_user(self, user_id: int) -> ServiceResult[User]:
        """Return the ORM row; used by access checks as well as the API."""
        user = self.repository.get(user_id)
        if user is None:
            return ServiceResult.from_app_exception(UserNotFoundError(user_id))
        return ServiceResult.success(user)

    def get_user_details(self, user_id: int) -> ServiceResult[UserResponse]:
        try:
            user = self.get_user(user_id).unwrap()
            return ServiceResult.success(UserResponse.model_validate(user), message="User fetched successfully")
        except Exception as e:
            return self._handle_exception(e, "get user", user_id)

    def update_user(self, user_id: int, request: UserUpdate, acting_user: User) -> ServiceResult[UserResponse]:
        try:
            data: Dict[str, Any] = request.model_dump(exclude_unset=True)
            with self.transaction():
                user = self.get_user(user_id).unwrap()
                if user.is_admin or data.get("is_admin"):
                    self._require_admin(acting_user, "change administrator accounts")
                if "email" in data or "username" in data:
                    self._ensure_unique(data.get("email"), data.get("username"), exclude_id=user_id)
                if data.get("user_role_id") is not None:
                    self._get_assignable_role(data["user_role_id"], acting_user)
                user = self.repository.update(user, data)
            self._logger.info(f"User {user_id} updated: {sorted(data)}")
            return ServiceResult.success(UserResponse.model_validate(user), message="User updated successfully")
        except Exception as e:
            return self._handle_exception(e, "update user", user_id)

    def delete_user(self, user_id: int, acting_user: User) -> ServiceResult[None]:
        """Delete an account together with the private roles it owns."""
        try:
            with self.transaction():
                user = self.get_user(user_id).unwrap()
                if user.id == acting_user.id:
                    raise BusinessRuleError("You cannot delete your own account.")
                if user.is_admin:
                    self._require_admin(acting_user, "delete administrator accounts")
                for role in self.repository.owned_roles(user_id):
                    for holder in list(role.users):
                        holder.user_role_id = None
                    self.roles.delete(role)
                self.repository.delete(user)
            self._logger.info(f"User {user_id} deleted by user {acting_user.id}")
            return ServiceResult.success(None, message="User deleted successfully")
        except Exception as e:
            return self._handle_exception(e, "delete user", user_id)

    def assign_role(self, user_id: int, role_id: Optional[int], acting_user: User) -> ServiceResult[UserResponse]:
        try:
            with self.transaction():
                user = self.get_user(user_id).unwrap()
                if user.is_admin:
                    self._require_admin(acting_user, "change administrator accounts")
                if role_id is not None:
                    self._get_assignable_role(role_id, acting_user)
                user = self.repository.update(user, {"user_role_id": role_id})
            self._logger.info(f"User {user_id} assigned role {role_id}")
            return ServiceResult.success(UserResponse.model_validate(user), message="User role updated successfully")
        except Exception as e:
            return self._handle_exception(e, "assign user role", user_id)

    # -------------------------------------------------------------------------

    def _get_assignable_role(self, role_id: int, acting_user: User) -> Role:
        role = self.roles.get(role_id)
        if role is None:
            raise RoleNotFoundError(role_id)
        if acting_user.is_admin or self.roles.count(Role.id == role_id, self.roles.visible_to(acting_user.id)):
            return role
        raise AuthorizationError(
            "Access denied. You don't have permission to assign this role.",
            resource="user_roles",
        )

    def _ensure_unique(self, email: Optional[str], username: Optional[str], exclude_id: Optional[int] = None) -> None:
        if self.repository.find_by_email_or_username(email, username, exclude_id=exclude_id):
            raise DuplicateEntryError(
                "User with this email or username already exists",
                details={"email": email, "username": username},
            )

    @staticmethod
    def _require_admin(acting_user: User, verb: str) -> None:
        if not acting_user.is_admin:
            raise AuthorizationError(f"Access denied. Only administrators can {verb}.", resource="users")
