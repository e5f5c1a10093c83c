# hostel_admin/services/rbac/permission_mapper.py
"""
Conversion between the role editor form and the flat permission-id list
stored for a role.

The round trip is lossy: the tri-state ``edit`` view level collapses to
``view`` and permissions outside the form layout are dropped.
"""

import re
from typing import Any, Iterable, List

from hostel_admin.core.logging import get_logger
from hostel_admin.models.base.enums import PermissionAction
from hostel_admin.schemas.rbac.role import (
    EntityPermissions,
    RoleFormPermissions,
    TaskPermissions,
    ViewLevel,
)
from hostel_admin.services.rbac.permission_catalog import PermissionCatalog, action_value

logger = get_logger(__name__)

PEOPLE_ENTITIES = (
    "prospects",
    "owners",
    "vendors",
    "tenants",
    "users",
    "userRoles",
    "apiKeys",
)

TASK_ENTITIES = (
    "tasks",
    "workOrders",
    "tenantRequests",
    "ownerRequests",
)

# form field -> permission action
FIELD_ACTIONS = {
    "view_list": PermissionAction.VIEW_LIST,
    "view_one": PermissionAction.VIEW_ONE,
    "create": PermissionAction.CREATE,
    "edit": PermissionAction.EDIT,
    "delete": PermissionAction.DELETE,
}
ACTION_FIELDS = {action.value: field for field, action in FIELD_ACTIONS.items()}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def form_key_to_resource(key: str) -> str:
    """``userRoles`` -> ``user_roles``"""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def resource_to_form_key(resource: str) -> str:
    """``user_roles`` -> ``userRoles``"""
    head, *rest = resource.split("_")
    return head + "".join(part.capitalize() for part in rest)


def blank_form() -> RoleFormPermissions:
    """Form with every permission denied."""
    return RoleFormPermissions(
        people={key: EntityPermissions() for key in PEOPLE_ENTITIES},
        tasks_and_maintenance={key: TaskPermissions() for key in TASK_ENTITIES},
    )


def _granted_actions(flags: Any) -> List[PermissionAction]:
    granted: List[PermissionAction] = []
    for field, action in FIELD_ACTIONS.items():
        value = getattr(flags, field)
        if isinstance(value, ViewLevel):
            value = value != ViewLevel.NONE
        if value:
            granted.append(action)
    return granted


def extract_permission_ids(form: RoleFormPermissions, catalog: PermissionCatalog) -> List[int]:
    """
    Collect the catalog ids of every permission granted by the form.

    Granted flags without a catalog entry are skipped. The result is
    sorted and free of duplicates.
    """
    ids = set()
    sections = list(form.people.items()) + list(form.tasks_and_maintenance.items())

    for form_key, flags in sections:
        resource = form_key_to_resource(form_key)
        for action in _granted_actions(flags):
            permission_id = catalog.id_for(resource, action)
            if permission_id is None:
                logger.debug(f"No catalog entry for {resource}_{action.value}; skipped")
                continue
            ids.add(permission_id)

    return sorted(ids)


def map_permissions_to_form(permissions: Iterable[Any]) -> RoleFormPermissions:
    """
    Build the role editor form from granted permissions.

    Accepts Permission rows or any objects with ``resource`` and
    ``action``. Resources outside the form layout and unknown actions are
    ignored.
    """
    form = blank_form()

    for permission in permissions:
        form_key = resource_to_form_key(permission.resource)
        field = ACTION_FIELDS.get(action_value(permission.action))
        if field is None:
            continue

        if form_key in form.people:
            setattr(form.people[form_key], field, True)
        elif form_key in form.tasks_and_maintenance:
            flags = form.tasks_and_maintenance[form_key]
            if field in ("view_list", "view_one"):
                setattr(flags, field, ViewLevel.VIEW)
            else:
                setattr(flags, field, True)

    return form
