from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.permissions import require_role
from ..common.validators import parse_amount, require_non_empty, require_positive
from ..core.constants import DEFAULT_MIN_THRESHOLD
from ..core.enums import CommandStatus, Role, Site, StockCategory, StockUnit
from ..core.exceptions import ValidationError
from .model import ChefCommand, StockItem
from .repository import StockRepository


class StockService:
    def __init__(self, stock: StockRepository):
        self._stock = stock

    def list_items(self, site: Site) -> list[StockItem]:
        return self._stock.list_items(site)

    def list_commands(self, site: Site) -> list[ChefCommand]:
        return self._stock.list_commands(site)

    def add_product(
        self,
        *,
        current_role: Role,
        site: Site,
        name: str,
        category: StockCategory,
        unit: StockUnit,
        unit_price: float,
        min_threshold: Optional[float] = None,
    ) -> StockItem:
        require_role(current_role, Role.BOSS)
        name = require_non_empty(name, "Désignation")
        unit_price = require_positive(unit_price, "Prix unitaire")
        threshold = DEFAULT_MIN_THRESHOLD if min_threshold is None else parse_amount(min_threshold, "Seuil minimum")
        if threshold < 0:
            raise ValidationError("Seuil minimum invalide")

        item = StockItem(
            id=new_id(),
            name=name,
            category=category,
            quantity=0,
            unit=unit,
            unit_price=unit_price,
            min_threshold=threshold,
        )
        self._stock.save_items(site, [*self._stock.list_items(site), item])
        return item

    def adjust_stock(self, *, current_role: Role, site: Site, item_id: str, delta: float) -> StockItem:
        """Manual +/- on the shelf count; never goes below zero."""
        require_role(current_role, Role.MAGASINIER, Role.BOSS, Role.GERANT)

        items = self._stock.list_items(site)
        for idx, item in enumerate(items):
            if item.id == item_id:
                items[idx] = item.adjusted(parse_amount(delta, "Quantité"))
                self._stock.save_items(site, items)
                return items[idx]
        raise ValidationError("Article introuvable")

    def create_command(
        self,
        *,
        current_role: Role,
        site: Site,
        item_id: str,
        quantity: float,
        now: Optional[datetime] = None,
    ) -> ChefCommand:
        require_role(current_role, Role.CHEF, Role.BOSS)
        quantity = require_positive(quantity, "Quantité")

        item = next((i for i in self._stock.list_items(site) if i.id == item_id), None)
        if not item:
            raise ValidationError("Article introuvable")

        command = ChefCommand(
            id=new_id(),
            product_id=item.id,
            product_name=item.name,
            quantity=quantity,
            unit=item.unit.value,
            status=CommandStatus.PENDING,
            timestamp=(now or now_local()).isoformat(timespec="seconds"),
        )
        self._stock.save_commands(site, [command, *self._stock.list_commands(site)])
        return command

    def mark_delivered(self, *, current_role: Role, site: Site, command_id: str) -> None:
        require_role(current_role, Role.MAGASINIER, Role.BOSS)

        commands = self._stock.list_commands(site)
        for idx, cmd in enumerate(commands):
            if cmd.id == command_id:
                if cmd.status != CommandStatus.PENDING:
                    raise ValidationError("Commande déjà livrée")
                commands[idx] = replace(cmd, status=CommandStatus.DELIVERED)
                self._stock.save_commands(site, commands)
                return
        raise ValidationError("Commande introuvable")

    def critical_items(self, site: Site) -> list[StockItem]:
        return [i for i in self._stock.list_items(site) if i.is_critical]

    def pending_commands_count(self, site: Site) -> int:
        return sum(1 for c in self._stock.list_commands(site) if c.status == CommandStatus.PENDING)

    def stock_value(self, site: Site) -> float:
        return sum(i.value for i in self._stock.list_items(site))
