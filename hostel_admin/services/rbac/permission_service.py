"""
Permission catalog service.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hostel_admin.core.exceptions import DuplicateEntryError, ResourceNotFoundError
from hostel_admin.core.pagination import normalize_pagination, paginate_items
from hostel_admin.models.base.enums import PermissionAction
from hostel_admin.models.rbac import Permission
from hostel_admin.repositories.rbac_repository import PermissionRepository
from hostel_admin.schemas.common.pagination import PaginatedResponse
from hostel_admin.schemas.rbac import PermissionCreate, PermissionResponse
from hostel_admin.services.base import BaseService, ServiceResult
from hostel_admin.services.rbac.permission_catalog import PermissionCatalog


class PermissionService(BaseService[Permission, PermissionRepository]):
    def __init__(self, repository: PermissionRepository, db_session: Session):
        super().__init__(repository, db_session)

    def catalog(self) -> PermissionCatalog:
        """Snapshot of the persisted permission rows."""
        return PermissionCatalog.from_permissions(self.repository.all())

    def list_permissions(
        self,
        resource: Optional[str] = None,
        action: Optional[PermissionAction] = None,
        search: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ServiceResult[PaginatedResponse[PermissionResponse]]:
        try:
            params = normalize_pagination(page, page_size)
            items, total = self.repository.search(
                resource=resource.strip().lower() if resource else None,
                action=action,
                query=search,
                offset=params.offset,
                limit=params.limit,
            )
            result = paginate_items(
                items=items,
                total_items=total,
                params=params,
                mapper=PermissionResponse.model_validate,
            )
            return ServiceResult.success(result, message="Permissions retrieved successfully")
        except Exception as e:
            return self._handle_exception(e, "list permissions")

    def get_permission(self, permission_id: int) -> ServiceResult[PermissionResponse]:
        try:
            permission = self.repository.get(permission_id)
            if permission is None:
                raise ResourceNotFoundError("Permission", permission_id)
            return ServiceResult.success(PermissionResponse.model_validate(permission))
        except Exception as e:
            return self._handle_exception(e, "get permission", permission_id)

    def create_permission(self, request: PermissionCreate) -> ServiceResult[PermissionResponse]:
        try:
            with self.transaction():
                if self.repository.find(request.resource, request.action) is not None:
                    raise DuplicateEntryError(
                        f"Permission {request.resource}_{request.action.value} already exists",
                        details={"resource": request.resource, "action": request.action.value},
                    )
                permission = self.repository.create(request.model_dump())
            return ServiceResult.success(
                PermissionResponse.model_validate(permission),
                message="Permission created successfully",
            )
        except Exception as e:
            return self._handle_exception(e, "create permission")

    def list_resources(self) -> ServiceResult[List[str]]:
        """Distinct resources in catalog order."""
        return ServiceResult.success(self.catalog().resources(), message="Resources retrieved successfully")

    def list_actions(self) -> ServiceResult[List[str]]:
        return ServiceResult.success([a.value for a in PermissionAction], message="Actions retrieved successfully")
