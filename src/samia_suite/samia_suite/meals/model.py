from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import MealCategory


@dataclass(frozen=True)
class Dish:
    id: str
    name: str
    description: str
    price: float
    category: MealCategory

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Dish":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            description=str(data.get("description", "")),
            price=float(data.get("price", 0)),
            category=MealCategory(data["category"]),
        )


@dataclass(frozen=True)
class DailyPlan:
    """Case du planning hebdomadaire: un jour x un service -> plat principal."""

    id: str
    day: str
    category: MealCategory
    main_dish_id: str
    alternatives: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "day": self.day,
            "category": self.category.value,
            "main_dish_id": self.main_dish_id,
            "alternatives": list(self.alternatives),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DailyPlan":
        return cls(
            id=str(data["id"]),
            day=str(data["day"]),
            category=MealCategory(data["category"]),
            main_dish_id=str(data.get("main_dish_id", "")),
            alternatives=tuple(str(a) for a in data.get("alternatives", [])),
        )


@dataclass(frozen=True)
class MenuLine:
    category: MealCategory
    dish_name: str
