# hostel_admin/services/rbac/permission_catalog.py
"""
Permission catalog: the ``"{resource}_{action}" -> id`` lookup shared by
the role editor and the permission endpoints.

The catalog is always built from the persisted permission rows, so the ids
it hands out are the ids the API validates against.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from hostel_admin.core.exceptions import BusinessRuleError, ErrorCode
from hostel_admin.core.logging import get_logger

logger = get_logger(__name__)


def action_value(action: Any) -> str:
    return getattr(action, "value", action)


def catalog_key(resource: str, action: Any) -> str:
    return f"{resource}_{action_value(action)}"


class CatalogEntry(NamedTuple):
    id: int
    resource: str
    action: str

    @property
    def key(self) -> str:
        return catalog_key(self.resource, self.action)


@dataclass(frozen=True)
class PermissionCatalog:
    """
    Immutable, validated permission lookup.

    Construction fails when two entries share an id or a
    (resource, action) pair.
    """

    entries: Tuple[CatalogEntry, ...]

    def __post_init__(self) -> None:
        by_key: Dict[str, CatalogEntry] = {}
        by_id: Dict[int, CatalogEntry] = {}
        duplicates: List[str] = []

        for entry in self.entries:
            if entry.key in by_key or entry.id in by_id:
                duplicates.append(f"{entry.key}#{entry.id}")
                continue
            by_key[entry.key] = entry
            by_id[entry.id] = entry

        if duplicates:
            raise BusinessRuleError(
                "Permission catalog contains duplicate entries",
                error_code=ErrorCode.PERMISSION_CATALOG_MISMATCH,
                details={"duplicates": duplicates},
            )

        object.__setattr__(self, "_by_key", by_key)
        object.__setattr__(self, "_by_id", by_id)

    @classmethod
    def from_permissions(cls, permissions: Iterable[Any]) -> "PermissionCatalog":
        """Build from Permission rows or any objects with id/resource/action."""
        return cls(tuple(
            CatalogEntry(int(p.id), p.resource, action_value(p.action))
            for p in permissions
        ))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def id_for(self, resource: str, action: Any) -> Optional[int]:
        entry = self._by_key.get(catalog_key(resource, action))
        return entry.id if entry else None

    def get(self, permission_id: int) -> Optional[CatalogEntry]:
        return self._by_id.get(permission_id)

    def resources(self) -> List[str]:
        seen: Dict[str, None] = {}
        for entry in self.entries:
            seen.setdefault(entry.resource, None)
        return list(seen)

    def unknown_ids(self, permission_ids: Sequence[int]) -> List[int]:
        return sorted({pid for pid in permission_ids if pid not in self._by_id})

    def require_ids(self, permission_ids: Sequence[int]) -> List[int]:
        """
        Return the de-duplicated ids in input order, or raise when any id
        is not in the catalog.
        """
        missing = self.unknown_ids(permission_ids)
        if missing:
            logger.info(f"Rejected unknown permission ids: {missing}")
            raise BusinessRuleError(
                "One or more permissions not found",
                details={"missing_permission_ids": missing},
            )
        return list(dict.fromkeys(permission_ids))
