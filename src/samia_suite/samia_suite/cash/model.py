from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CashType


@dataclass(frozen=True)
class CashTransaction:
    id: str
    type: CashType
    amount: float
    description: str
    timestamp: str
    category: str

    @property
    def day(self) -> str:
        return self.timestamp[:10]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "amount": self.amount,
            "description": self.description,
            "timestamp": self.timestamp,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CashTransaction":
        return cls(
            id=str(data["id"]),
            type=CashType(data["type"]),
            amount=float(data["amount"]),
            description=str(data.get("description", "")),
            timestamp=str(data.get("timestamp", "")),
            category=str(data.get("category", "")),
        )
