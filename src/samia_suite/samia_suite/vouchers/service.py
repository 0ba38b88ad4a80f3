from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, Optional

from ..apartments.repository import ApartmentRepository
from ..common.datetime_utils import iso_day, now_local
from ..common.ids import short_code
from ..common.permissions import require_role
from ..core.enums import MealCategory, Role, Site, VoucherStatus, VoucherType
from ..core.exceptions import ValidationError
from .model import BEVERAGES, MealVoucher
from .repository import VoucherRepository


@dataclass(frozen=True)
class VoucherStats:
    """Bons consommés du jour, par service."""

    breakfast: int
    lunch: int
    snack: int
    dinner: int
    beverages: int

    @property
    def total(self) -> int:
        return self.breakfast + self.lunch + self.snack + self.dinner + self.beverages


class VoucherService:
    def __init__(self, vouchers: VoucherRepository, apartments: ApartmentRepository):
        self._vouchers = vouchers
        self._apartments = apartments

    def list_all(self, site: Site) -> list[MealVoucher]:
        return self._vouchers.list_all(site)

    def create_voucher(
        self,
        *,
        current_role: Role,
        site: Site,
        voucher_type: VoucherType,
        apartment_id: str,
        meal_type: Optional[MealCategory] = None,
        beverages: Iterable[str] = (),
        now: Optional[datetime] = None,
    ) -> MealVoucher:
        # Issuing is strictly a cashier task, even the Boss cannot do it.
        require_role(current_role, Role.CAISSIER)

        apt = self._apartments.get_by_id(site, apartment_id)
        if not apt or not apt.current_client:
            raise ValidationError("Sélectionner une suite occupée")

        picked = tuple(b for b in beverages if b)
        unknown = [b for b in picked if b not in BEVERAGES]
        if unknown:
            raise ValidationError(f"Boisson inconnue: {', '.join(unknown)}")

        if voucher_type == VoucherType.MEAL:
            meal_type = meal_type or MealCategory.BREAKFAST
        else:
            meal_type = None
            if not picked:
                raise ValidationError("Choisir au moins une boisson")

        now = now or now_local()
        voucher = MealVoucher(
            id=short_code("R" if voucher_type == VoucherType.MEAL else "B"),
            type=voucher_type,
            client_name=apt.current_client,
            apartment_number=apt.label,
            meal_type=meal_type,
            beverages=picked,
            status=VoucherStatus.VALID,
            date=iso_day(now),
            timestamp=now.isoformat(timespec="seconds"),
        )
        self._vouchers.save_all(site, [voucher, *self._vouchers.list_all(site)])
        return voucher

    def mark_consumed(self, *, current_role: Role, site: Site, voucher_id: str) -> MealVoucher:
        require_role(current_role, Role.CHEF, Role.BOSS, Role.CAISSIER)

        vouchers = self._vouchers.list_all(site)
        for idx, v in enumerate(vouchers):
            if v.id == voucher_id:
                if v.status != VoucherStatus.VALID:
                    raise ValidationError(f"Bon {v.id} déjà {v.status.value.lower()}")
                vouchers[idx] = replace(v, status=VoucherStatus.CONSUMED)
                self._vouchers.save_all(site, vouchers)
                return vouchers[idx]
        raise ValidationError("Bon introuvable")

    def daily_vouchers(self, site: Site, *, now: Optional[datetime] = None) -> list[MealVoucher]:
        today = iso_day(now or now_local())
        return [v for v in self._vouchers.list_all(site) if v.date == today]

    def daily_stats(self, site: Site, *, now: Optional[datetime] = None) -> VoucherStats:
        consumed = [v for v in self.daily_vouchers(site, now=now) if v.status == VoucherStatus.CONSUMED]

        def _count(category: MealCategory) -> int:
            return sum(1 for v in consumed if v.meal_type == category)

        return VoucherStats(
            breakfast=_count(MealCategory.BREAKFAST),
            lunch=_count(MealCategory.LUNCH),
            snack=_count(MealCategory.SNACK),
            dinner=_count(MealCategory.DINNER),
            beverages=sum(1 for v in consumed if v.type == VoucherType.BEVERAGE),
        )
