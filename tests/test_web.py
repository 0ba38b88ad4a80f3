from __future__ import annotations

import pytest

from src.samia_suite.samia_suite.container import build_container
from src.samia_suite.samia_suite.core.constants import LOGS_KEY
from src.samia_suite.samia_suite.main import create_app
from src.samia_suite.samia_suite.storage.session_storage import FlaskSessionStorage


@pytest.fixture
def app(monkeypatch, store, hash_password):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container(
        store=store,
        durable=FlaskSessionStorage("durable", permanent=True),
        ephemeral=FlaskSessionStorage("tab", permanent=False),
        hash_password=hash_password,
    )
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, identifier, role, password="1", remember=False):
    data = {"identifier": identifier, "password": password, "role": role}
    if remember:
        data["remember_me"] = "1"
    return client.post("/", data=data)


def test_login_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Rester connecté" in resp.get_data(as_text=True)


def test_pages_require_login(client):
    resp = client.get("/dashboard")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")


def test_bad_credentials_are_flashed(client):
    resp = client.post("/", data={"identifier": "G1", "password": "x", "role": "Gérant"})
    assert "Identifiant ou mot de passe incorrect" in resp.get_data(as_text=True)

    resp = client.post("/", data={"identifier": "G1", "password": "1", "role": "Caissier"})
    assert "ne correspond pas" in resp.get_data(as_text=True)


def test_remember_me_sets_persistent_cookie(client):
    resp = login(client, "G1", "Gérant", remember=True)
    assert resp.status_code == 302
    cookie = "; ".join(resp.headers.getlist("Set-Cookie"))
    assert "Expires=" in cookie


def test_tab_session_cookie_is_not_persistent(client):
    resp = login(client, "G1", "Gérant")
    assert resp.status_code == 302
    cookie = "; ".join(resp.headers.getlist("Set-Cookie"))
    assert "session=" in cookie
    assert "Expires=" not in cookie

    assert client.get("/dashboard").status_code == 200


def test_dashboard_renders_for_each_role(client):
    for identifier, role, password in (("1", "Boss", "1"), ("Ch3", "Chef de Cuisine", "3"), ("R2", "Réceptionniste", "1")):
        login(client, identifier, role, password)
        resp = client.get("/dashboard")
        assert resp.status_code == 200, identifier
        assert "Tableau de bord" in resp.get_data(as_text=True)
        client.get("/logout")


@pytest.mark.parametrize("path", ["/stock", "/meals", "/vouchers", "/apartments", "/laundry", "/staff", "/messages"])
def test_common_pages_render(client, path):
    login(client, "M1", "Magasinier")
    assert client.get(path).status_code == 200


def test_navigation_gating(client):
    login(client, "Ch1", "Chef de Cuisine")
    assert client.get("/cash").status_code == 403
    assert client.get("/reports").status_code == 403
    assert client.get("/settings").status_code == 403
    assert "Caisse" not in client.get("/dashboard").get_data(as_text=True)
    client.get("/logout")

    login(client, "G1", "Gérant")
    assert client.get("/cash").status_code == 200
    assert client.get("/reports").status_code == 200
    assert client.get("/settings").status_code == 403
    client.get("/logout")

    login(client, "1", "Boss")
    assert client.get("/settings").status_code == 200


def test_boss_switches_site(client, store):
    login(client, "1", "Boss")
    client.post("/site", data={"site": "M'diq"})
    client.post(
        "/stock/products",
        data={"name": "Riz", "category": "Épicerie", "unit": "Kg", "unit_price": "12,5", "min_threshold": ""},
    )

    assert "Riz" in store.get_item("samia_stock_items_M'diq")
    assert store.get_item("samia_stock_items_Fnideq") is None


def test_non_boss_stays_on_own_site(client, store):
    login(client, "G2", "Gérant")
    assert client.post("/site", data={"site": "Fnideq"}).status_code == 403
    client.post("/cash/expenses", data={"amount": "40", "description": "Gaz", "category": "Divers"})

    assert store.get_item("samia_cash_M'diq") is not None


def test_forbidden_action_is_flashed(client):
    login(client, "Ch1", "Chef de Cuisine")
    resp = client.post(
        "/stock/products",
        data={"name": "Riz", "category": "Épicerie", "unit": "Kg", "unit_price": "3"},
        follow_redirects=True,
    )
    assert "Action non autorisée" in resp.get_data(as_text=True)


def test_logout_logs_and_ends_session(client, store):
    login(client, "C1", "Caissier", remember=True)
    client.get("/logout")

    assert client.get("/dashboard").status_code == 302
    assert '"Déconnexion"' in store.get_item(LOGS_KEY)


def test_report_export(client):
    login(client, "G1", "Gérant")
    resp = client.get("/reports/export")

    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert resp.data[:2] == b"PK"


def test_messages_unread_badge(client):
    login(client, "1", "Boss")
    client.post("/messages", data={"recipient_role": "Caissier", "recipient_site": "Fnideq", "content": "Bonjour"})
    client.get("/logout")

    login(client, "C1", "Caissier")
    assert "Messagerie (1)" in client.get("/dashboard").get_data(as_text=True)
    assert "Bonjour" in client.get("/messages").get_data(as_text=True)
    assert "Messagerie (1)" not in client.get("/dashboard").get_data(as_text=True)


def test_password_update_for_unknown_account_is_flashed(client):
    login(client, "1", "Boss")
    resp = client.post("/settings/users/NOPE/password", data={"password": "9"}, follow_redirects=True)
    body = resp.get_data(as_text=True)

    assert "Compte introuvable" in body
    assert "Mot de passe mis à jour" not in body


def test_staff_form_saves_previous_month_salary(client):
    login(client, "G2", "Gérant")
    resp = client.post(
        "/staff",
        data={
            "name": "Karim",
            "function": "Serveur",
            "monthly_base_salary": "4000",
            "previous_month_salary": "3900",
            "status": "En poste",
        },
        follow_redirects=True,
    )
    body = resp.get_data(as_text=True)

    assert "Fiche employé enregistrée" in body
    assert "3900.0" in body
