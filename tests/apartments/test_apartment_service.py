from __future__ import annotations

import pytest

from src.samia_suite.samia_suite.core.enums import AccommodationType, ApartmentStatus, Role, Site
from src.samia_suite.samia_suite.core.exceptions import AuthorizationError, ValidationError

SITE = Site.FNIDEQ


def _suite(container, number="12", capacity=4):
    return container.apartment_service.add_apartment(
        current_role=Role.BOSS, site=SITE, residence="Bouzaghlal", block="B", number=number, capacity=capacity
    )


def test_add_apartment_rules(container):
    svc = container.apartment_service
    apt = _suite(container)

    assert apt.label == "B12"
    assert apt.status == ApartmentStatus.FREE
    with pytest.raises(AuthorizationError):
        svc.add_apartment(current_role=Role.RECEPTIONNISTE, site=SITE, residence="Bouzaghlal", block="", number="1")
    with pytest.raises(ValidationError):
        svc.add_apartment(current_role=Role.BOSS, site=SITE, residence="Bouzaghlal", block="", number=" ")
    with pytest.raises(ValidationError):
        svc.add_apartment(current_role=Role.BOSS, site=SITE, residence="Résidence M'diq", block="", number="1")
    with pytest.raises(ValidationError):
        _suite(container, capacity=3)


def test_accommodation_limited_by_capacity(container):
    small = _suite(container, capacity=2)
    assert small.allowed_accommodations() == [AccommodationType.SINGLE, AccommodationType.DOUBLE]

    with pytest.raises(ValidationError):
        container.apartment_service.check_in(
            current_role=Role.RECEPTIONNISTE,
            site=SITE,
            apartment_id=small.id,
            client_name="Amal",
            accommodation=AccommodationType.TRIPLE,
        )


def test_stay_lifecycle(container, fixed_now):
    svc = container.apartment_service
    apt = _suite(container)

    occupied = svc.check_in(
        current_role=Role.RECEPTIONNISTE,
        site=SITE,
        apartment_id=apt.id,
        client_name="Famille Idrissi",
        accommodation=AccommodationType.TRIPLE,
        now=fixed_now,
    )
    assert occupied.status == ApartmentStatus.OCCUPIED
    assert occupied.current_occupants_count == 3
    assert svc.occupancy(SITE).clients == 3

    with pytest.raises(ValidationError):
        svc.check_in(current_role=Role.BOSS, site=SITE, apartment_id=apt.id, client_name="Autre")

    left = svc.check_out(current_role=Role.BOSS, site=SITE, apartment_id=apt.id, now=fixed_now)
    assert left.status == ApartmentStatus.CLEANING
    assert left.current_client is None
    assert left.current_occupants_count == 0
    assert left.history[0].client_name == "Famille Idrissi"
    assert left.history[0].occupant_count == 3
    assert left.history[0].accommodation_type == "1/3 Triple"

    ready = svc.mark_ready(current_role=Role.RECEPTIONNISTE, site=SITE, apartment_id=apt.id)
    assert ready.status == ApartmentStatus.FREE


def test_check_in_requires_client_name_and_role(container):
    svc = container.apartment_service
    apt = _suite(container)
    with pytest.raises(ValidationError):
        svc.check_in(current_role=Role.BOSS, site=SITE, apartment_id=apt.id, client_name="")
    with pytest.raises(AuthorizationError):
        svc.check_in(current_role=Role.CAISSIER, site=SITE, apartment_id=apt.id, client_name="X")


def test_history_newest_first(container):
    svc = container.apartment_service
    apt = _suite(container)
    for client in ("A", "B"):
        svc.check_in(current_role=Role.BOSS, site=SITE, apartment_id=apt.id, client_name=client)
        svc.check_out(current_role=Role.BOSS, site=SITE, apartment_id=apt.id)
        svc.mark_ready(current_role=Role.BOSS, site=SITE, apartment_id=apt.id)

    assert [h.client_name for h in svc.get(SITE, apt.id).history] == ["B", "A"]


def test_manual_status(container):
    svc = container.apartment_service
    apt = _suite(container)

    assert svc.set_status(
        current_role=Role.BOSS, site=SITE, apartment_id=apt.id, status=ApartmentStatus.MAINTENANCE
    ).status == ApartmentStatus.MAINTENANCE
    with pytest.raises(ValidationError):
        svc.set_status(current_role=Role.BOSS, site=SITE, apartment_id=apt.id, status=ApartmentStatus.OCCUPIED)


def test_occupancy_rate(container):
    svc = container.apartment_service
    assert svc.occupancy(SITE).rate == 0.0

    a = _suite(container, "1")
    _suite(container, "2")
    svc.check_in(current_role=Role.BOSS, site=SITE, apartment_id=a.id, client_name="X")

    stats = svc.occupancy(SITE)
    assert (stats.total, stats.occupied, stats.clients) == (2, 1, 1)
    assert stats.rate == 50.0
