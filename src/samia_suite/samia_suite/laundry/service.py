from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..apartments.repository import ApartmentRepository
from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.permissions import require_role
from ..common.validators import require_non_empty
from ..core.enums import LaundryStatus, Role, Site
from ..core.exceptions import ValidationError
from .model import LaundryRequest
from .repository import LaundryRepository

_RECEPTION = (Role.RECEPTIONNISTE, Role.BOSS)


@dataclass(frozen=True)
class LaundryPulse:
    pending: int
    in_wash: int
    ready: int


class LaundryService:
    def __init__(self, laundry: LaundryRepository, apartments: ApartmentRepository):
        self._laundry = laundry
        self._apartments = apartments

    def list_all(self, site: Site) -> list[LaundryRequest]:
        return self._laundry.list_all(site)

    def create_request(
        self,
        *,
        current_role: Role,
        site: Site,
        apartment_id: str,
        items: str,
        now: Optional[datetime] = None,
    ) -> LaundryRequest:
        require_role(current_role, *_RECEPTION)
        items = require_non_empty(items, "Détails linge")

        apt = self._apartments.get_by_id(site, apartment_id)
        if not apt or not apt.is_occupied:
            raise ValidationError("Sélectionner une suite occupée")

        stamp = (now or now_local()).isoformat(timespec="seconds")
        req = LaundryRequest(
            id=new_id(),
            client_name=apt.current_client or "",
            apartment_id=apt.id,
            apartment_number=apt.label,
            items=items,
            status=LaundryStatus.PENDING,
            created_at=stamp,
            updated_at=stamp,
        )
        self._laundry.save_all(site, [req, *self._laundry.list_all(site)])
        return req

    def advance(self, *, current_role: Role, site: Site, request_id: str, now: Optional[datetime] = None) -> LaundryRequest:
        """Move one step along the flow; a delivered request stays delivered."""
        require_role(current_role, *_RECEPTION)

        requests = self._laundry.list_all(site)
        for idx, req in enumerate(requests):
            if req.id != request_id:
                continue
            nxt = req.status.next()
            if nxt is None:
                raise ValidationError("Linge déjà livré")
            requests[idx] = replace(req, status=nxt, updated_at=(now or now_local()).isoformat(timespec="seconds"))
            self._laundry.save_all(site, requests)
            return requests[idx]
        raise ValidationError("Dépôt introuvable")

    def pulse(self, site: Site) -> LaundryPulse:
        requests = self._laundry.list_all(site)
        return LaundryPulse(
            pending=sum(1 for r in requests if r.status == LaundryStatus.PENDING),
            in_wash=sum(1 for r in requests if r.status == LaundryStatus.WASHING),
            ready=sum(1 for r in requests if r.status == LaundryStatus.AT_RECEPTION),
        )
