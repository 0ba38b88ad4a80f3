from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import AccommodationType, ApartmentStatus, ApartmentType, Site

RESIDENCES_BY_SITE: dict[Site, list[str]] = {
    Site.FNIDEQ: ["Résidence Fnideq", "Bouzaghlal"],
    Site.MDIQ: ["Résidence M'diq"],
    Site.AL_HOCEIMA: ["Résidence Al Hoceima"],
}

ALLOWED_CAPACITIES = (2, 4)


@dataclass(frozen=True)
class ApartmentHistory:
    """Passage d'un client, archivé au départ."""

    id: str
    client_name: str
    check_in_date: str
    check_out_date: str
    occupant_count: int
    accommodation_type: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "client_name": self.client_name,
            "check_in_date": self.check_in_date,
            "check_out_date": self.check_out_date,
            "occupant_count": self.occupant_count,
            "accommodation_type": self.accommodation_type,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ApartmentHistory":
        return cls(
            id=str(data["id"]),
            client_name=str(data["client_name"]),
            check_in_date=str(data.get("check_in_date", "")),
            check_out_date=str(data.get("check_out_date", "")),
            occupant_count=int(data.get("occupant_count", 0)),
            accommodation_type=str(data.get("accommodation_type", "N/A")),
        )


@dataclass(frozen=True)
class Apartment:
    id: str
    residence_name: str
    block: str
    number: str
    type: ApartmentType
    capacity: int
    status: ApartmentStatus = ApartmentStatus.FREE
    current_client: Optional[str] = None
    current_occupants_count: int = 0
    accommodation_type: Optional[AccommodationType] = None
    check_in_date: Optional[str] = None
    history: tuple[ApartmentHistory, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return f"{self.block}{self.number}"

    @property
    def is_occupied(self) -> bool:
        return self.status == ApartmentStatus.OCCUPIED and bool(self.current_client)

    def allowed_accommodations(self) -> list[AccommodationType]:
        return [t for t in AccommodationType if t.occupants <= self.capacity]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "residence_name": self.residence_name,
            "block": self.block,
            "number": self.number,
            "type": self.type.value,
            "capacity": self.capacity,
            "status": self.status.value,
            "current_client": self.current_client,
            "current_occupants_count": self.current_occupants_count,
            "accommodation_type": self.accommodation_type.value if self.accommodation_type else None,
            "check_in_date": self.check_in_date,
            "history": [h.to_dict() for h in self.history],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Apartment":
        acc = data.get("accommodation_type")
        return cls(
            id=str(data["id"]),
            residence_name=str(data["residence_name"]),
            block=str(data.get("block", "")),
            number=str(data["number"]),
            type=ApartmentType(data.get("type", ApartmentType.SUITE.value)),
            capacity=int(data.get("capacity", 4)),
            status=ApartmentStatus(data.get("status", ApartmentStatus.FREE.value)),
            current_client=data.get("current_client") or None,
            current_occupants_count=int(data.get("current_occupants_count") or 0),
            accommodation_type=AccommodationType(acc) if acc else None,
            check_in_date=data.get("check_in_date") or None,
            history=tuple(ApartmentHistory.from_dict(h) for h in data.get("history", [])),
        )
