from __future__ import annotations

from dataclasses import dataclass, replace

from ..core.enums import CommandStatus, StockCategory, StockUnit


@dataclass(frozen=True)
class StockItem:
    """Article du catalogue magasin d'un site."""

    id: str
    name: str
    category: StockCategory
    quantity: float
    unit: StockUnit
    unit_price: float
    min_threshold: float

    @property
    def is_critical(self) -> bool:
        return self.quantity <= self.min_threshold

    @property
    def value(self) -> float:
        return self.quantity * self.unit_price

    def adjusted(self, delta: float) -> "StockItem":
        return replace(self, quantity=max(0, self.quantity + delta))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "quantity": self.quantity,
            "unit": self.unit.value,
            "unit_price": self.unit_price,
            "min_threshold": self.min_threshold,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StockItem":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            category=StockCategory(data["category"]),
            quantity=float(data.get("quantity", 0)),
            unit=StockUnit(data["unit"]),
            unit_price=float(data.get("unit_price", 0)),
            min_threshold=float(data.get("min_threshold", 0)),
        )


@dataclass(frozen=True)
class ChefCommand:
    """Bon de commande émis par la cuisine vers le magasin."""

    id: str
    product_id: str
    product_name: str
    quantity: float
    unit: str
    status: CommandStatus
    timestamp: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "product_id": self.product_id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "unit": self.unit,
            "status": self.status.value,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ChefCommand":
        return cls(
            id=str(data["id"]),
            product_id=str(data["product_id"]),
            product_name=str(data["product_name"]),
            quantity=float(data["quantity"]),
            unit=str(data.get("unit", "")),
            status=CommandStatus(data["status"]),
            timestamp=str(data.get("timestamp", "")),
        )
