from __future__ import annotations

from ..core.constants import KEY_PREFIX
from ..core.enums import Site

STOCK_ITEMS = "stock_items"
STOCK_COMMANDS = "stock_commands"
APARTMENTS = "apartments"
STAFF = "staff"
VOUCHERS = "vouchers"
CASH = "cash"
LAUNDRY = "blanchisserie"
DISHES = "dishes"
PLANNING = "planning"


def site_key(entity: str, site: Site | str) -> str:
    site_name = site.value if isinstance(site, Site) else str(site)
    return f"{KEY_PREFIX}_{entity}_{site_name}"
