# hostel_admin/db/seed.py
"""
Default RBAC data: the permission catalog, the global roles and the
bootstrap admin account. Every step is idempotent.
"""

from typing import Dict, List, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from hostel_admin.core.logging import get_logger
from hostel_admin.models.base.enums import PermissionAction, UserStatus
from hostel_admin.models.people.user import User
from hostel_admin.models.rbac.permission import Permission
from hostel_admin.models.rbac.role import Role

logger = get_logger(__name__)

# Catalog order determines the ids a fresh database hands out.
PERMISSION_RESOURCES: List[str] = [
    "owners",
    "vendors",
    "tenants",
    "users",
    "user_roles",
    "prospects",
    "api_keys",
    "tasks",
    "work_orders",
    "tenant_requests",
    "owner_requests",
]

PERMISSION_ACTIONS: List[PermissionAction] = list(PermissionAction)

_VIEW = [PermissionAction.VIEW_LIST, PermissionAction.VIEW_ONE]

DEFAULT_ROLES: List[Dict] = [
    {
        "name": "owner",
        "description": "Property owner with access to manage their properties, tenants, and vendors",
        "permissions": (
            [("owners", a) for a in _VIEW + [PermissionAction.EDIT]]
            + [("vendors", a) for a in _VIEW + [PermissionAction.CREATE, PermissionAction.EDIT]]
            + [("tenants", a) for a in _VIEW + [PermissionAction.CREATE, PermissionAction.EDIT]]
            + [("users", a) for a in _VIEW]
        ),
    },
    {
        "name": "manager",
        "description": "Manager with access to view and create, but limited edit/delete",
        "permissions": (
            [("owners", a) for a in _VIEW]
            + [("vendors", a) for a in _VIEW]
            + [("tenants", a) for a in _VIEW + [PermissionAction.CREATE]]
            + [("users", PermissionAction.VIEW_LIST)]
        ),
    },
    {
        "name": "staff",
        "description": "Staff member with limited view access",
        "permissions": (
            [("tenants", a) for a in _VIEW]
            + [("owners", a) for a in _VIEW]
            + [("vendors", a) for a in _VIEW]
        ),
    },
    {
        "name": "user",
        "description": "Regular user with minimal access",
        "permissions": [],
    },
]

DEFAULT_ADMIN = {"username": "admin", "email": "admin@example.com"}


def describe_permission(resource: str, action: PermissionAction) -> str:
    return f"Permission to {action.value.replace('_', ' ')} {resource}"


def seed_permissions(db: Session) -> List[Permission]:
    existing: Dict[Tuple[str, PermissionAction], Permission] = {
        (p.resource, p.action): p for p in db.scalars(select(Permission))
    }
    created = 0
    catalog: List[Permission] = []

    for resource in PERMISSION_RESOURCES:
        for action in PERMISSION_ACTIONS:
            permission = existing.get((resource, action))
            if permission is None:
                permission = Permission(
                    resource=resource,
                    action=action,
                    description=describe_permission(resource, action),
                )
                db.add(permission)
                created += 1
            catalog.append(permission)

    db.flush()
    logger.info(f"Permission catalog seeded: {created} created, {len(catalog)} total")
    return catalog


def seed_roles(db: Session) -> List[Role]:
    by_key = {(p.resource, p.action): p for p in db.scalars(select(Permission))}
    roles: List[Role] = []

    for config in DEFAULT_ROLES:
        role = db.scalars(
            select(Role).where(Role.role_name == config["name"], Role.owner_user_id.is_(None))
        ).first()
        if role is None:
            role = Role(role_name=config["name"], description=config["description"])
            db.add(role)
            logger.info(f"Created global role: {role.role_name}")

        assigned = {p.id for p in role.permissions}
        for key in config["permissions"]:
            permission = by_key.get(key)
            if permission is not None and permission.id not in assigned:
                role.permissions.append(permission)
                assigned.add(permission.id)

        roles.append(role)

    db.flush()
    return roles


def seed_admin_user(db: Session) -> User:
    admin = db.scalars(select(User).where(User.email == DEFAULT_ADMIN["email"])).first()
    if admin is None:
        admin = User(
            username=DEFAULT_ADMIN["username"],
            email=DEFAULT_ADMIN["email"],
            status=UserStatus.ACTIVE,
            is_admin=True,
        )
        db.add(admin)
        logger.info(f"Created admin user: {admin.email}")
    elif not admin.is_admin:
        admin.is_admin = True
        admin.user_role_id = None
        logger.info("Updated existing admin user with is_admin flag")

    db.flush()
    return admin


def seed_defaults(db: Session) -> None:
    """Seed catalog, roles and admin in one transaction."""
    try:
        seed_permissions(db)
        seed_roles(db)
        seed_admin_user(db)
        db.commit()
    except Exception:
        db.rollback()
        logger.error("Seeding default RBAC data failed", exc_info=True)
        raise
