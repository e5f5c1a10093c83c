"""
Tenant service: CRUD and filtered listings.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostel_admin.core.exceptions import HostelNotFoundError, TenantNotFoundError, create_validation_error
from hostel_admin.core.pagination import normalize_pagination, paginate_items
from hostel_admin.models.base.enums import TenantStatus
from hostel_admin.models.hostel import Hostel
from hostel_admin.models.people import Tenant
from hostel_admin.repositories.people_repository import TenantRepository
from hostel_admin.schemas.common.pagination import PaginatedResponse
from hostel_admin.schemas.people import TenantCreate, TenantResponse, TenantUpdate
from hostel_admin.schemas.people.tenant import LEASE_ORDER_MESSAGE, lease_out_of_order
from hostel_admin.services.base import BaseService, ServiceResult


class TenantService(BaseService[Tenant, TenantRepository]):
    """
    Tenant records.

    ``room``/``bed`` are kept as entered; they are matched against the
    hostel layout only when the architecture is built. Placing an active
    tenant on a bed already held by another active tenant is logged but
    allowed, and surfaces as a seat conflict.
    """

    def __init__(self, repository: TenantRepository, db_session: Session):
        super().__init__(repository, db_session)

    def create_tenant(self, request: TenantCreate) -> ServiceResult[TenantResponse]:
        try:
            with self.transaction():
                self._check_hostel(request.hostel_id)
                tenant = self.repository.create(request.model_dump())
                self._warn_on_shared_bed(tenant)
            return ServiceResult.success(TenantResponse.model_validate(tenant), message="Tenant created successfully")
        except Exception as e:
            return self._handle_exception(e, "create tenant")

    def get_tenant(self, tenant_id: int) -> ServiceResult[TenantResponse]:
        try:
            return ServiceResult.success(TenantResponse.model_validate(self._get_or_raise(tenant_id)))
        except Exception as e:
            return self._handle_exception(e, "get tenant", tenant_id)

    def update_tenant(self, tenant_id: int, request: TenantUpdate) -> ServiceResult[TenantResponse]:
        try:
            data = request.model_dump(exclude_unset=True)
            with self.transaction():
                tenant = self._get_or_raise(tenant_id)
                if data.get("hostel_id") is not None:
                    self._check_hostel(data["hostel_id"])
                self._check_lease_dates(tenant, data)
                tenant = self.repository.update(tenant, data)
                self._warn_on_shared_bed(tenant)
            return ServiceResult.success(TenantResponse.model_validate(tenant), message="Tenant updated successfully")
        except Exception as e:
            return self._handle_exception(e, "update tenant", tenant_id)

    def delete_tenant(self, tenant_id: int) -> ServiceResult[None]:
        try:
            with self.transaction():
                self.repository.delete(self._get_or_raise(tenant_id))
            return ServiceResult.success(None, message="Tenant deleted successfully")
        except Exception as e:
            return self._handle_exception(e, "delete tenant", tenant_id)

    def list_tenants(
        self,
        hostel_id: Optional[int] = None,
        status: Optional[TenantStatus] = None,
        search: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ServiceResult[PaginatedResponse[TenantResponse]]:
        try:
            params = normalize_pagination(page, page_size)
            items, total = self.repository.search(
                hostel_id=hostel_id,
                status=status,
                query=search,
                offset=params.offset,
                limit=params.limit,
            )
            result = paginate_items(
                items=items,
                total_items=total,
                params=params,
                mapper=TenantResponse.model_validate,
            )
            return ServiceResult.success(result, message="Tenants fetched successfully")
        except Exception as e:
            return self._handle_exception(e, "list tenants")

    # -------------------------------------------------------------------------

    def _get_or_raise(self, tenant_id: int) -> Tenant:
        tenant = self.repository.get(tenant_id)
        if tenant is None:
            raise TenantNotFoundError(tenant_id)
        return tenant

    def _check_hostel(self, hostel_id: Optional[int]) -> None:
        if hostel_id is not None and self.db.get(Hostel, hostel_id) is None:
            raise HostelNotFoundError(hostel_id)

    def _check_lease_dates(self, tenant: Tenant, data: dict) -> None:
        lease_start = data.get("lease_start", tenant.lease_start)
        lease_end = data.get("lease_end", tenant.lease_end)
        if lease_out_of_order(lease_start, lease_end):
            raise create_validation_error({"lease_end": [LEASE_ORDER_MESSAGE]})

    def _warn_on_shared_bed(self, tenant: Tenant) -> None:
        if not tenant.is_active or tenant.hostel_id is None or not tenant.room or not tenant.bed:
            return
        others = self.repository.active_at_seat(tenant.hostel_id, tenant.room, tenant.bed, exclude_id=tenant.id)
        if others:
            self._logger.warning(
                f"Room {tenant.room} bed {tenant.bed} already held by active tenant(s) "
                f"{[t.id for t in others]}",
                extra={"hostel_id": tenant.hostel_id, "tenant_id": tenant.id},
            )
