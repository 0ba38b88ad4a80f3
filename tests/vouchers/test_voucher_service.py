from __future__ import annotations

from datetime import timedelta

import pytest

from src.samia_suite.samia_suite.core.enums import MealCategory, Role, Site, VoucherStatus, VoucherType
from src.samia_suite.samia_suite.core.exceptions import AuthorizationError, ValidationError

SITE = Site.AL_HOCEIMA


@pytest.fixture
def occupied(container):
    apt = container.apartment_service.add_apartment(
        current_role=Role.BOSS, site=SITE, residence="Résidence Al Hoceima", block="A", number="3"
    )
    return container.apartment_service.check_in(
        current_role=Role.RECEPTIONNISTE, site=SITE, apartment_id=apt.id, client_name="M. Tazi"
    )


def test_only_cashier_issues_vouchers(container, occupied):
    for role in (Role.BOSS, Role.CHEF, Role.GERANT):
        with pytest.raises(AuthorizationError):
            container.voucher_service.create_voucher(
                current_role=role, site=SITE, voucher_type=VoucherType.MEAL, apartment_id=occupied.id
            )


def test_meal_voucher_copies_client(container, occupied, fixed_now):
    v = container.voucher_service.create_voucher(
        current_role=Role.CAISSIER,
        site=SITE,
        voucher_type=VoucherType.MEAL,
        apartment_id=occupied.id,
        meal_type=MealCategory.DINNER,
        now=fixed_now,
    )

    assert v.id.startswith("R") and len(v.id) == 7
    assert v.client_name == "M. Tazi"
    assert v.apartment_number == "A3"
    assert v.status == VoucherStatus.VALID
    assert v.date == "2025-03-12"
    assert v.meal_type == MealCategory.DINNER


def test_beverage_voucher(container, occupied):
    svc = container.voucher_service
    v = svc.create_voucher(
        current_role=Role.CAISSIER,
        site=SITE,
        voucher_type=VoucherType.BEVERAGE,
        apartment_id=occupied.id,
        meal_type=MealCategory.LUNCH,
        beverages=["Thé", "Jus"],
    )

    assert v.id.startswith("B")
    assert v.meal_type is None
    assert v.beverages == ("Thé", "Jus")

    with pytest.raises(ValidationError):
        svc.create_voucher(
            current_role=Role.CAISSIER, site=SITE, voucher_type=VoucherType.BEVERAGE, apartment_id=occupied.id
        )
    with pytest.raises(ValidationError):
        svc.create_voucher(
            current_role=Role.CAISSIER,
            site=SITE,
            voucher_type=VoucherType.BEVERAGE,
            apartment_id=occupied.id,
            beverages=["Whisky"],
        )


def test_voucher_needs_current_client(container):
    apt = container.apartment_service.add_apartment(
        current_role=Role.BOSS, site=SITE, residence="Résidence Al Hoceima", block="", number="9"
    )
    with pytest.raises(ValidationError):
        container.voucher_service.create_voucher(
            current_role=Role.CAISSIER, site=SITE, voucher_type=VoucherType.MEAL, apartment_id=apt.id
        )
    with pytest.raises(ValidationError):
        container.voucher_service.create_voucher(
            current_role=Role.CAISSIER, site=SITE, voucher_type=VoucherType.MEAL, apartment_id="missing"
        )


def test_consume_only_from_valid(container, occupied):
    svc = container.voucher_service
    v = svc.create_voucher(current_role=Role.CAISSIER, site=SITE, voucher_type=VoucherType.MEAL, apartment_id=occupied.id)

    with pytest.raises(AuthorizationError):
        svc.mark_consumed(current_role=Role.RECEPTIONNISTE, site=SITE, voucher_id=v.id)

    assert svc.mark_consumed(current_role=Role.CHEF, site=SITE, voucher_id=v.id).status == VoucherStatus.CONSUMED
    with pytest.raises(ValidationError):
        svc.mark_consumed(current_role=Role.BOSS, site=SITE, voucher_id=v.id)


def test_daily_stats_count_consumed_today(container, occupied, fixed_now):
    svc = container.voucher_service

    def issue(vtype, meal=None, drinks=(), now=fixed_now):
        return svc.create_voucher(
            current_role=Role.CAISSIER,
            site=SITE,
            voucher_type=vtype,
            apartment_id=occupied.id,
            meal_type=meal,
            beverages=drinks,
            now=now,
        )

    for v in (
        issue(VoucherType.MEAL, MealCategory.BREAKFAST),
        issue(VoucherType.MEAL, MealCategory.BREAKFAST),
        issue(VoucherType.MEAL, MealCategory.DINNER),
        issue(VoucherType.BEVERAGE, drinks=["Café"]),
        issue(VoucherType.MEAL, MealCategory.LUNCH, now=fixed_now - timedelta(days=1)),
    ):
        svc.mark_consumed(current_role=Role.CAISSIER, site=SITE, voucher_id=v.id)
    issue(VoucherType.MEAL, MealCategory.SNACK)

    stats = svc.daily_stats(SITE, now=fixed_now)
    assert (stats.breakfast, stats.lunch, stats.snack, stats.dinner, stats.beverages) == (2, 0, 0, 1, 1)
    assert stats.total == 4
    assert len(svc.daily_vouchers(SITE, now=fixed_now)) == 5
