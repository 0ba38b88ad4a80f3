from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .apartments.repository import StoreApartmentRepository
from .apartments.service import ApartmentService
from .cash.repository import StoreCashRepository
from .cash.service import CashService
from .laundry.repository import StoreLaundryRepository
from .laundry.service import LaundryService
from .meals.repository import StoreMealsRepository
from .meals.service import MealService
from .messages.repository import StoreMessageRepository
from .messages.service import MessageService
from .reports.dashboard import DashboardService
from .reports.service import ReportService
from .staff.repository import StoreStaffRepository
from .staff.service import StaffService
from .stock.repository import StoreStockRepository
from .stock.service import StockService
from .storage.base import KeyValueStore
from .users.repository import StoreActivityLog, StoreUserDirectory
from .users.service import AuthService, SessionService, UserService
from .vouchers.repository import StoreVoucherRepository
from .vouchers.service import VoucherService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    directory_repo: StoreUserDirectory
    logs_repo: StoreActivityLog

    session_service: SessionService
    auth_service: AuthService
    user_service: UserService
    stock_service: StockService
    meal_service: MealService
    apartment_service: ApartmentService
    voucher_service: VoucherService
    laundry_service: LaundryService
    staff_service: StaffService
    cash_service: CashService
    message_service: MessageService
    report_service: ReportService
    dashboard_service: DashboardService


def build_container(
    *,
    store: KeyValueStore,
    durable: KeyValueStore,
    ephemeral: KeyValueStore,
    hash_password: Callable[[str], str],
) -> Container:
    """Wire every service on one record store.

    ``durable``/``ephemeral`` only hold the session token ("rester connecté" or not).
    """
    directory_repo = StoreUserDirectory(store, hash_password=hash_password)
    logs_repo = StoreActivityLog(store)
    apartments_repo = StoreApartmentRepository(store)

    session_service = SessionService(durable, ephemeral, logs_repo)
    auth_service = AuthService(directory_repo, session_service, logs_repo)
    user_service = UserService(directory_repo, logs_repo, hash_password=hash_password)

    stock_service = StockService(StoreStockRepository(store))
    meal_service = MealService(StoreMealsRepository(store))
    apartment_service = ApartmentService(apartments_repo)
    voucher_service = VoucherService(StoreVoucherRepository(store), apartments_repo)
    laundry_service = LaundryService(StoreLaundryRepository(store), apartments_repo)
    staff_service = StaffService(StoreStaffRepository(store))
    cash_service = CashService(StoreCashRepository(store))
    message_service = MessageService(StoreMessageRepository(store))

    report_service = ReportService(staff_service, cash_service, stock_service, apartment_service)
    dashboard_service = DashboardService(
        apartments=apartment_service,
        cash=cash_service,
        vouchers=voucher_service,
        staff=staff_service,
        laundry=laundry_service,
        stock=stock_service,
        meals=meal_service,
    )

    return Container(
        store=store,
        directory_repo=directory_repo,
        logs_repo=logs_repo,
        session_service=session_service,
        auth_service=auth_service,
        user_service=user_service,
        stock_service=stock_service,
        meal_service=meal_service,
        apartment_service=apartment_service,
        voucher_service=voucher_service,
        laundry_service=laundry_service,
        staff_service=staff_service,
        cash_service=cash_service,
        message_service=message_service,
        report_service=report_service,
        dashboard_service=dashboard_service,
    )
