"""
Role management: CRUD, permission assignment and the role editor form.

Visibility rules: admins see every role; other users see global roles
(``owner_user_id IS NULL``) plus the roles they own, and may modify only
those.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hostel_admin.core.exceptions import (
    AuthorizationError,
    BusinessRuleError,
    DuplicateEntryError,
    RoleNotFoundError,
)
from hostel_admin.core.pagination import normalize_pagination, paginate_items
from hostel_admin.models.people import User
from hostel_admin.models.rbac import Role
from hostel_admin.repositories.rbac_repository import PermissionRepository, RoleRepository
from hostel_admin.schemas.common.pagination import PaginatedResponse
from hostel_admin.schemas.rbac import (
    PermissionBrief,
    RoleCreate,
    RoleFormData,
    RoleResponse,
    RoleUpdate,
)
from hostel_admin.services.base import BaseService, ServiceResult
from hostel_admin.services.rbac.permission_catalog import PermissionCatalog
from hostel_admin.services.rbac.permission_mapper import extract_permission_ids, map_permissions_to_form


class RoleService(BaseService[Role, RoleRepository]):
    def __init__(self, repository: RoleRepository, db_session: Session):
        super().__init__(repository, db_session)
        self.permissions = PermissionRepository(db_session)

    # =========================================================================
    # CRUD Operations
    # =========================================================================

    def list_roles(
        self,
        acting_user: User,
        search: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ServiceResult[PaginatedResponse[RoleResponse]]:
        try:
            params = normalize_pagination(page, page_size)
            items, total = self.repository.list_visible(
                acting_user.id,
                is_admin=acting_user.is_admin,
                query=search,
                offset=params.offset,
                limit=params.limit,
            )
            result = paginate_items(
                items=items,
                total_items=total,
                params=params,
                mapper=RoleResponse.model_validate,
            )
            return ServiceResult.success(result, message="Roles retrieved successfully")
        except Exception as e:
            return self._handle_exception(e, "list roles")

    def get_role(self, role_id: int, acting_user: User) -> ServiceResult[RoleResponse]:
        try:
            role = self._get_visible(role_id, acting_user, "view")
            return ServiceResult.success(RoleResponse.model_validate(role), message="Role retrieved successfully")
        except Exception as e:
            return self._handle_exception(e, "get role", role_id)

    def create_role(self, request: RoleCreate, acting_user: User) -> ServiceResult[RoleResponse]:
        """
        Create a role. Admins create global roles unless they name an owner;
        everyone else creates a role private to themselves.
        """
        try:
            owner_id = request.user_id if acting_user.is_admin else acting_user.id
            with self.transaction():
                self._ensure_unique_name(request.role_name, owner_id)
                role = Role(
                    role_name=request.role_name,
                    description=request.description or None,
                    owner_user_id=owner_id,
                )
                role.permissions = self._resolve_permissions(request.permissions)
                role = self.repository.add(role)
            self._logger.info(
                f"Role '{role.role_name}' created with {len(role.permissions)} permission(s)",
                extra={"role_id": role.id, "owner_user_id": owner_id},
            )
            return ServiceResult.success(RoleResponse.model_validate(role), message="Role created successfully")
        except Exception as e:
            return self._handle_exception(e, "create role")

    def update_role(self, role_id: int, request: RoleUpdate, acting_user: User) -> ServiceResult[RoleResponse]:
        try:
            data = request.model_dump(exclude_unset=True)
            with self.transaction():
                role = self._get_visible(role_id, acting_user, "update")

                owner_id = role.owner_user_id
                if acting_user.is_admin and "user_id" in data:
                    owner_id = data["user_id"]

                name = data.get("role_name") or role.role_name
                if name.lower() != role.role_name.lower() or owner_id != role.owner_user_id:
                    self._ensure_unique_name(name, owner_id, exclude_id=role.id)

                changes = {"role_name": name, "owner_user_id": owner_id}
                if "description" in data:
                    changes["description"] = data["description"] or None
                if data.get("permissions") is not None:
                    changes["permissions"] = self._resolve_permissions(data["permissions"])
                role = self.repository.update(role, changes)
            return ServiceResult.success(RoleResponse.model_validate(role), message="Role updated successfully")
        except Exception as e:
            return self._handle_exception(e, "update role", role_id)

    def delete_role(self, role_id: int, acting_user: User) -> ServiceResult[None]:
        try:
            with self.transaction():
                role = self._get_visible(role_id, acting_user, "delete")
                if role.user_count > 0:
                    raise BusinessRuleError(
                        f"Cannot delete role. It is assigned to {role.user_count} user(s). "
                        "Please reassign users before deleting.",
                        details={"user_count": role.user_count},
                    )
                self.repository.delete(role)
            return ServiceResult.success(None, message="Role deleted successfully")
        except Exception as e:
            return self._handle_exception(e, "delete role", role_id)

    # =========================================================================
    # Permission Assignment
    # =========================================================================

    def get_permissions(self, role_id: int, acting_user: User) -> ServiceResult[List[PermissionBrief]]:
        try:
            role = self._get_visible(role_id, acting_user, "view")
            return ServiceResult.success(
                [PermissionBrief.model_validate(p) for p in role.permissions],
                message="Role permissions retrieved successfully",
            )
        except Exception as e:
            return self._handle_exception(e, "get role permissions", role_id)

    def update_permissions(
        self,
        role_id: int,
        permission_ids: List[int],
        acting_user: User,
    ) -> ServiceResult[RoleResponse]:
        """Replace the role's permission set."""
        try:
            with self.transaction():
                role = self._get_visible(role_id, acting_user, "update")
                role = self.repository.update(role, {"permissions": self._resolve_permissions(permission_ids)})
            self._logger.info(f"Role {role_id} now holds {len(role.permissions)} permission(s)")
            return ServiceResult.success(
                RoleResponse.model_validate(role),
                message="Role permissions updated successfully",
            )
        except Exception as e:
            return self._handle_exception(e, "update role permissions", role_id)

    # =========================================================================
    # Role Editor Form
    # =========================================================================

    def get_form(self, role_id: int, acting_user: User) -> ServiceResult[RoleFormData]:
        try:
            role = self._get_visible(role_id, acting_user, "view")
            return ServiceResult.success(self._to_form(role))
        except Exception as e:
            return self._handle_exception(e, "get role form", role_id)

    def update_form(self, role_id: int, form: RoleFormData, acting_user: User) -> ServiceResult[RoleFormData]:
        """
        Save the editor form. Blank name or description leave the stored
        values untouched; the permission matrix always replaces the set.
        """
        try:
            with self.transaction():
                role = self._get_visible(role_id, acting_user, "update")
                ids = extract_permission_ids(form.permissions, self._catalog())

                changes = {"permissions": self._resolve_permissions(ids)}
                if form.role_name and form.role_name.lower() != role.role_name.lower():
                    self._ensure_unique_name(form.role_name, role.owner_user_id, exclude_id=role.id)
                    changes["role_name"] = form.role_name
                if form.role_description:
                    changes["description"] = form.role_description
                role = self.repository.update(role, changes)
            return ServiceResult.success(self._to_form(role), message="Role updated successfully")
        except Exception as e:
            return self._handle_exception(e, "update role form", role_id)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _catalog(self) -> PermissionCatalog:
        return PermissionCatalog.from_permissions(self.permissions.all())

    def _resolve_permissions(self, permission_ids: List[int]):
        ids = self._catalog().require_ids(permission_ids)
        return sorted(self.permissions.get_many(ids), key=lambda p: p.id)

    def _to_form(self, role: Role) -> RoleFormData:
        return RoleFormData(
            role_name=role.role_name,
            role_description=role.description or "",
            permissions=map_permissions_to_form(role.permissions),
        )

    def _get_visible(self, role_id: int, acting_user: User, verb: str) -> Role:
        role = self.repository.get_with_permissions(role_id)
        if role is None:
            raise RoleNotFoundError(role_id)
        if not acting_user.is_admin and not role.is_global and role.owner_user_id != acting_user.id:
            raise AuthorizationError(
                f"Access denied. You don't have permission to {verb} this role.",
                resource="user_roles",
            )
        return role

    def _ensure_unique_name(self, role_name: str, owner_id: Optional[int], exclude_id: Optional[int] = None) -> None:
        existing = self.repository.find_by_name(role_name, owner_id)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateEntryError(
                "Role with this name already exists",
                details={"role_name": role_name, "owner_user_id": owner_id},
            )
