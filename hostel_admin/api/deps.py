"""
FastAPI dependencies shared by the v1 routers.

Example usage in a router:
    from fastapi import Depends, APIRouter
    from hostel_admin.api import deps

    router = APIRouter()

    @router.get("/tenants")
    def list_tenants(user = Depends(deps.require_permission("tenants", "view_list"))):
        ...
"""

from typing import Callable, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from hostel_admin.core.exceptions import AuthenticationError
from hostel_admin.db.session import get_db
from hostel_admin.models.people import User
from hostel_admin.repositories import (
    EmployeeRepository,
    HostelRepository,
    PermissionRepository,
    RoleRepository,
    TenantRepository,
    UserRepository,
)
from hostel_admin.services.hostel.hostel_service import HostelService
from hostel_admin.services.people import EmployeeService, PeopleTableService, TenantService, UserService
from hostel_admin.services.rbac import AccessControlService, PermissionService, RoleService

# Authentication is handled upstream; the gateway forwards the caller's id.
USER_ID_HEADER = "X-User-Id"


# --- Services ------------------------------------------------------------------

def get_hostel_service(db: Session = Depends(get_db)) -> HostelService:
    return HostelService(HostelRepository(db), db)


def get_tenant_service(db: Session = Depends(get_db)) -> TenantService:
    return TenantService(TenantRepository(db), db)


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(EmployeeRepository(db), db)


def get_table_service(db: Session = Depends(get_db)) -> PeopleTableService:
    return PeopleTableService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db), db)


def get_role_service(db: Session = Depends(get_db)) -> RoleService:
    return RoleService(RoleRepository(db), db)


def get_permission_service(db: Session = Depends(get_db)) -> PermissionService:
    return PermissionService(PermissionRepository(db), db)


# --- Acting user & authorization -----------------------------------------------

def get_acting_user_id(
    x_user_id: Optional[int] = Header(default=None, alias=USER_ID_HEADER),
) -> Optional[int]:
    return x_user_id


def get_current_user(
    user_id: Optional[int] = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Acting user without a permission requirement."""
    if user_id is None:
        raise AuthenticationError("User identification required")
    return UserService(UserRepository(db), db).get_user(user_id).unwrap()


def require_permission(resource: str, action: str) -> Callable[..., User]:
    """
    Build a dependency that resolves the acting user and enforces
    ``resource``/``action`` on their role. Returns the user.
    """

    def _check(
        user_id: Optional[int] = Depends(get_acting_user_id),
        db: Session = Depends(get_db),
    ) -> User:
        return AccessControlService(db).check(user_id, resource, action).unwrap()

    _check.__name__ = f"require_{resource}_{action}"
    return _check


__all__ = [
    "get_db",
    "get_hostel_service",
    "get_tenant_service",
    "get_employee_service",
    "get_table_service",
    "get_user_service",
    "get_role_service",
    "get_permission_service",
    "get_acting_user_id",
    "get_current_user",
    "require_permission",
]
