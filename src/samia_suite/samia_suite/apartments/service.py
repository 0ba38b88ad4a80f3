from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.permissions import require_role
from ..common.validators import require_non_empty
from ..core.enums import AccommodationType, ApartmentStatus, ApartmentType, Role, Site
from ..core.exceptions import ValidationError
from .model import ALLOWED_CAPACITIES, RESIDENCES_BY_SITE, Apartment, ApartmentHistory
from .repository import ApartmentRepository

_RECEPTION = (Role.RECEPTIONNISTE, Role.BOSS)


@dataclass(frozen=True)
class OccupancyStats:
    total: int
    occupied: int
    clients: int

    @property
    def rate(self) -> float:
        return (self.occupied / self.total) * 100 if self.total else 0.0


class ApartmentService:
    def __init__(self, apartments: ApartmentRepository):
        self._apartments = apartments

    def list_all(self, site: Site) -> list[Apartment]:
        return self._apartments.list_all(site)

    def list_occupied(self, site: Site) -> list[Apartment]:
        return [a for a in self._apartments.list_all(site) if a.is_occupied]

    def get(self, site: Site, apartment_id: str) -> Apartment:
        apt = self._apartments.get_by_id(site, apartment_id)
        if not apt:
            raise ValidationError("Suite introuvable")
        return apt

    @staticmethod
    def residences(site: Site) -> list[str]:
        return RESIDENCES_BY_SITE.get(site, ["Standard"])

    def _replace_one(self, site: Site, updated: Apartment) -> Apartment:
        apartments = [updated if a.id == updated.id else a for a in self._apartments.list_all(site)]
        self._apartments.save_all(site, apartments)
        return updated

    def add_apartment(
        self,
        *,
        current_role: Role,
        site: Site,
        residence: str,
        block: str,
        number: str,
        apartment_type: ApartmentType = ApartmentType.SUITE,
        capacity: int = 4,
    ) -> Apartment:
        require_role(current_role, Role.BOSS)
        number = require_non_empty(number, "Numéro")
        if int(capacity) not in ALLOWED_CAPACITIES:
            raise ValidationError("Capacité invalide")
        if residence not in self.residences(site):
            raise ValidationError("Résidence invalide pour ce site")

        apt = Apartment(
            id=new_id(),
            residence_name=residence,
            block=(block or "").strip(),
            number=number,
            type=apartment_type,
            capacity=int(capacity),
        )
        self._apartments.save_all(site, [*self._apartments.list_all(site), apt])
        return apt

    def check_in(
        self,
        *,
        current_role: Role,
        site: Site,
        apartment_id: str,
        client_name: str,
        accommodation: AccommodationType = AccommodationType.SINGLE,
        now: Optional[datetime] = None,
    ) -> Apartment:
        require_role(current_role, *_RECEPTION)
        client_name = require_non_empty(client_name, "Nom du client")

        apt = self.get(site, apartment_id)
        if apt.status != ApartmentStatus.FREE:
            raise ValidationError(f"La suite {apt.label} n'est pas libre")
        if accommodation not in apt.allowed_accommodations():
            raise ValidationError("Formule incompatible avec la capacité")

        return self._replace_one(
            site,
            replace(
                apt,
                status=ApartmentStatus.OCCUPIED,
                current_client=client_name,
                current_occupants_count=accommodation.occupants,
                accommodation_type=accommodation,
                check_in_date=(now or now_local()).isoformat(timespec="seconds"),
            ),
        )

    def check_out(self, *, current_role: Role, site: Site, apartment_id: str, now: Optional[datetime] = None) -> Apartment:
        """Archive the stay (newest first) and send the suite to housekeeping."""
        require_role(current_role, *_RECEPTION)

        apt = self.get(site, apartment_id)
        if not apt.is_occupied:
            raise ValidationError(f"La suite {apt.label} n'est pas occupée")

        entry = ApartmentHistory(
            id=new_id(),
            client_name=apt.current_client or "",
            check_in_date=apt.check_in_date or "",
            check_out_date=(now or now_local()).isoformat(timespec="seconds"),
            occupant_count=apt.current_occupants_count,
            accommodation_type=apt.accommodation_type.value if apt.accommodation_type else "N/A",
        )
        return self._replace_one(
            site,
            replace(
                apt,
                status=ApartmentStatus.CLEANING,
                current_client=None,
                current_occupants_count=0,
                accommodation_type=None,
                check_in_date=None,
                history=(entry, *apt.history),
            ),
        )

    def mark_ready(self, *, current_role: Role, site: Site, apartment_id: str) -> Apartment:
        require_role(current_role, *_RECEPTION)
        apt = self.get(site, apartment_id)
        if apt.status != ApartmentStatus.CLEANING:
            raise ValidationError(f"La suite {apt.label} n'est pas en ménage")
        return self._replace_one(site, replace(apt, status=ApartmentStatus.FREE))

    def set_status(self, *, current_role: Role, site: Site, apartment_id: str, status: ApartmentStatus) -> Apartment:
        """Manual status change for unoccupied suites (e.g. maintenance)."""
        require_role(current_role, *_RECEPTION)
        if status == ApartmentStatus.OCCUPIED:
            raise ValidationError("Utiliser l'arrivée client pour occuper une suite")

        apt = self.get(site, apartment_id)
        if apt.is_occupied:
            raise ValidationError(f"La suite {apt.label} est occupée")
        return self._replace_one(site, replace(apt, status=status))

    def occupancy(self, site: Site) -> OccupancyStats:
        apartments = self._apartments.list_all(site)
        return OccupancyStats(
            total=len(apartments),
            occupied=sum(1 for a in apartments if a.status == ApartmentStatus.OCCUPIED),
            clients=sum(a.current_occupants_count or 0 for a in apartments),
        )
