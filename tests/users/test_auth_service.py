from __future__ import annotations

import json
from datetime import datetime

import pytest

from src.samia_suite.samia_suite.core.constants import LOGS_KEY, SESSION_KEY, USERS_KEY
from src.samia_suite.samia_suite.core.enums import ActivityAction, Role, Site
from src.samia_suite.samia_suite.core.exceptions import AuthenticationError, RoleMismatchError
from src.samia_suite.samia_suite.users.model import ActivityLog, User
from src.samia_suite.samia_suite.users.repository import StoreActivityLog, StoreUserDirectory
from src.samia_suite.samia_suite.users.service import AuthService, SessionService


def _build(make_store, hash_password):
    store, durable, ephemeral = make_store(), make_store(), make_store()
    logs = StoreActivityLog(store)
    sessions = SessionService(durable, ephemeral, logs)
    auth = AuthService(StoreUserDirectory(store, hash_password=hash_password), sessions, logs)
    return store, durable, ephemeral, logs, sessions, auth


def test_directory_is_seeded_on_first_access(make_store, hash_password):
    store = make_store()
    entries = StoreUserDirectory(store, hash_password=hash_password).load()

    assert len(entries) == 16
    assert entries["1"].user.role == Role.BOSS
    assert entries["1"].user.site == Site.SIEGE
    assert entries["Ch3"].user.site == Site.AL_HOCEIMA
    assert store.get_item(USERS_KEY) is not None


@pytest.mark.parametrize("raw", ["{}", "[]", "oops", json.dumps({"1": {"user": {}}})])
def test_directory_reseeds_when_unusable(make_store, hash_password, raw):
    store = make_store({USERS_KEY: raw})
    entries = StoreUserDirectory(store, hash_password=hash_password).load()
    assert "G1" in entries


def test_login_persist_writes_durable_store(make_store, hash_password, fixed_now):
    _, durable, ephemeral, logs, sessions, auth = _build(make_store, hash_password)

    user = auth.login("G1", "1", Role.GERANT, persist=True, now=fixed_now)

    assert user.site == Site.FNIDEQ
    assert durable.get_item(SESSION_KEY) is not None
    assert ephemeral.get_item(SESSION_KEY) is None
    assert sessions.current_user() == user

    log = logs.list_logs()[0]
    assert log.action == ActivityAction.LOGIN
    assert log.user_name == "Gérant Fnideq"
    assert log.timestamp == "2025-03-12T09:30:00"


def test_login_without_persist_uses_tab_store(make_store, hash_password):
    _, durable, ephemeral, _, sessions, auth = _build(make_store, hash_password)

    auth.login("Ch3", "3", Role.CHEF, persist=False)

    assert durable.get_item(SESSION_KEY) is None
    assert ephemeral.get_item(SESSION_KEY) is not None
    assert sessions.current_user().email == "Ch3"


@pytest.mark.parametrize("identifier,password", [("nobody", "1"), ("G1", "wrong"), ("Ch3", "1"), ("", "")])
def test_login_rejects_bad_credentials(make_store, hash_password, identifier, password):
    store, *_, auth = _build(make_store, hash_password)

    with pytest.raises(AuthenticationError, match="Identifiant ou mot de passe incorrect"):
        auth.login(identifier, password, Role.GERANT, persist=False)
    assert store.get_item(LOGS_KEY) is None


def test_login_rejects_wrong_role(make_store, hash_password):
    _, durable, ephemeral, _, _, auth = _build(make_store, hash_password)

    with pytest.raises(RoleMismatchError, match="ne correspond pas"):
        auth.login("G1", "1", Role.CHEF, persist=True)
    assert durable.get_item(SESSION_KEY) is None
    assert ephemeral.get_item(SESSION_KEY) is None


def test_role_mismatch_is_an_authentication_error():
    assert issubclass(RoleMismatchError, AuthenticationError)


def test_unreadable_session_is_cleared(make_store, hash_password):
    _, durable, ephemeral, _, sessions, _ = _build(make_store, hash_password)
    durable.set_item(SESSION_KEY, "{broken")
    ephemeral.set_item(SESSION_KEY, json.dumps({"email": "x"}))

    assert sessions.current_user() is None
    assert durable.get_item(SESSION_KEY) is None
    assert ephemeral.get_item(SESSION_KEY) is None


def test_durable_session_wins_over_tab_session(make_store, hash_password):
    _, durable, ephemeral, _, sessions, _ = _build(make_store, hash_password)
    boss = User(email="1", name="Le Boss", role=Role.BOSS, site=Site.SIEGE)
    chef = User(email="Ch1", name="Chef Fnideq", role=Role.CHEF, site=Site.FNIDEQ)
    sessions.open(boss, persist=True)
    sessions.open(chef, persist=False)

    assert sessions.current_user() == boss


def test_logout_logs_and_clears_both_stores(make_store, hash_password, fixed_now):
    _, durable, ephemeral, logs, sessions, auth = _build(make_store, hash_password)
    auth.login("R2", "1", Role.RECEPTIONNISTE, persist=True, now=fixed_now)

    sessions.logout(now=fixed_now)

    assert sessions.current_user() is None
    assert durable.get_item(SESSION_KEY) is None
    assert [log.action for log in logs.list_logs()] == [ActivityAction.LOGOUT, ActivityAction.LOGIN]


def test_logout_without_session_logs_nothing(make_store, hash_password):
    store, *_, sessions, _ = _build(make_store, hash_password)
    sessions.logout()
    assert store.get_item(LOGS_KEY) is None


def test_activity_log_keeps_newest_500(make_store):
    logs = StoreActivityLog(make_store())
    for i in range(505):
        logs.prepend(
            ActivityLog(
                id=str(i),
                user_name="u",
                user_role="Boss",
                action=ActivityAction.LOGIN,
                timestamp=datetime(2025, 1, 1).isoformat(),
                site="Siège Social",
            )
        )

    items = logs.list_logs()
    assert len(items) == 500
    assert items[0].id == "504"
    assert items[-1].id == "5"


def test_active_site_for_boss_and_staff():
    boss = User(email="1", name="Le Boss", role=Role.BOSS, site=Site.SIEGE)
    chef = User(email="Ch2", name="Chef M'diq", role=Role.CHEF, site=Site.MDIQ)

    assert SessionService.active_site(boss) == Site.FNIDEQ
    assert SessionService.active_site(boss, "Al Hoceima") == Site.AL_HOCEIMA
    assert SessionService.active_site(boss, "Siège Social") == Site.FNIDEQ
    assert SessionService.active_site(chef, "Fnideq") == Site.MDIQ
