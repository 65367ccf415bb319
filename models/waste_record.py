"""Waste record model and its disposal lifecycle."""
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional
from core.errors import ValidationError
from core.validation import require_positive_int, require_non_blank


class DisposalStatus(str, Enum):
    PENDING = "PENDING"
    IN_CART = "IN_CART"
    DISPOSED = "DISPOSED"


_ALLOWED_TRANSITIONS = {
    DisposalStatus.PENDING: {DisposalStatus.IN_CART, DisposalStatus.DISPOSED},
    DisposalStatus.IN_CART: {DisposalStatus.DISPOSED},
    DisposalStatus.DISPOSED: set(),
}


@dataclass(frozen=True)
class WasteRecord:
    id: str
    user_id: str
    waste_type: str
    category: str
    item_count: int
    status: DisposalStatus
    scanned_at: datetime
    created_at: datetime
    updated_at: datetime
    disposed_at: Optional[datetime] = None
    disposal_center_id: Optional[str] = None

    @classmethod
    def create(cls, id: str, user_id: str, waste_type: str, category: str,
               item_count: int = 1, now: Optional[datetime] = None) -> "WasteRecord":
        """Build a new PENDING record with all timestamps set to ``now``."""
        require_non_blank(id, "id")
        require_non_blank(waste_type, "waste_type")
        require_positive_int(item_count, "item_count")
        now = now or datetime.now()
        return cls(
            id=id,
            user_id=user_id,
            waste_type=waste_type,
            category=category,
            item_count=item_count,
            status=DisposalStatus.PENDING,
            scanned_at=now,
            created_at=now,
            updated_at=now,
        )

    def advance(self, status: DisposalStatus, now: Optional[datetime] = None,
                disposal_center_id: Optional[str] = None) -> "WasteRecord":
        """Return a copy moved forward to ``status``; backward or repeated moves are rejected."""
        try:
            status = DisposalStatus(status)
        except ValueError:
            raise ValidationError(f"unknown disposal status {status!r}", "status")
        if status not in _ALLOWED_TRANSITIONS[self.status]:
            raise ValidationError(
                f"cannot move record {self.id} from {self.status.value} to {status.value}",
                "status",
            )
        now = now or datetime.now()
        changes = {"status": status, "updated_at": now}
        if status is DisposalStatus.DISPOSED:
            changes["disposed_at"] = now
            changes["disposal_center_id"] = disposal_center_id
        return replace(self, **changes)

    @property
    def is_disposed(self) -> bool:
        return self.status is DisposalStatus.DISPOSED
