from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LaundryStatus


@dataclass(frozen=True)
class LaundryRequest:
    id: str
    client_name: str
    apartment_id: str
    apartment_number: str
    items: str
    status: LaundryStatus
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "client_name": self.client_name,
            "apartment_id": self.apartment_id,
            "apartment_number": self.apartment_number,
            "items": self.items,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LaundryRequest":
        return cls(
            id=str(data["id"]),
            client_name=str(data.get("client_name", "")),
            apartment_id=str(data.get("apartment_id", "")),
            apartment_number=str(data.get("apartment_number", "")),
            items=str(data.get("items", "")),
            status=LaundryStatus(data["status"]),
            created_at=str(data.get("created_at", "")),
            updated_at=str(data.get("updated_at", "")),
        )
