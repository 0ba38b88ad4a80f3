from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import MealCategory, VoucherStatus, VoucherType

BEVERAGES = ["Café noir", "Café", "Thé", "Jus", "Eau", "Soda"]


@dataclass(frozen=True)
class MealVoucher:
    """Bon repas/boisson émis en caisse pour le client d'une suite occupée.

    Note: client et suite sont recopiés en texte, sans lien vers l'appartement.
    """

    id: str
    type: VoucherType
    client_name: str
    apartment_number: str
    status: VoucherStatus
    date: str
    timestamp: str
    meal_type: Optional[MealCategory] = None
    beverages: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "client_name": self.client_name,
            "apartment_number": self.apartment_number,
            "meal_type": self.meal_type.value if self.meal_type else None,
            "beverages": list(self.beverages),
            "status": self.status.value,
            "date": self.date,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MealVoucher":
        meal = data.get("meal_type")
        return cls(
            id=str(data["id"]),
            type=VoucherType(data["type"]),
            client_name=str(data.get("client_name", "")),
            apartment_number=str(data.get("apartment_number", "")),
            meal_type=MealCategory(meal) if meal else None,
            beverages=tuple(str(b) for b in data.get("beverages", [])),
            status=VoucherStatus(data["status"]),
            date=str(data["date"]),
            timestamp=str(data.get("timestamp", "")),
        )
