"""HTTP tests for the Orders API against an in-memory SQLite database."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from ordersvc.infrastructure.api.app import create_app
from ordersvc.infrastructure.config import Settings
from ordersvc.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)
from tests.fakes import FakeNotifier

PREFIX = "/api/v1/orders"


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def client(uow_factory, notifier):
    settings = Settings(database_url="sqlite://", environment="test")
    app = create_app(settings, uow_factory=uow_factory, notifier=notifier)
    return TestClient(app)


def _payload(catalog, **overrides) -> dict:
    body = {
        "orderItems": [
            {"product": catalog.widget.id, "quantity": 3},
            {"product": catalog.gadget.id, "quantity": 5},
        ],
        "shippingAddress1": "1 Main St",
        "shippingAddress2": "Apt 4",
        "city": "Springfield",
        "zip": "62701",
        "country": "US",
        "phone": "555-0100",
        "status": "pending",
        "user": catalog.alice.id,
    }
    body.update(overrides)
    return body


def _create(client, catalog, **overrides) -> dict:
    response = client.post(PREFIX, json=_payload(catalog, **overrides))
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateOrder:

    def test_created_with_total_and_item_ids(self, client, catalog):
        body = _create(client, catalog)

        assert body["totalPrice"] == "170.00"
        assert body["user"] == catalog.alice.id
        assert body["status"] == "pending"
        assert body["shippingAddress2"] == "Apt 4"
        assert len(body["orderItems"]) == 2
        assert "dateOrdered" in body

    def test_stock_decremented(self, client, catalog, uow_factory):
        _create(client, catalog)

        with uow_factory() as uow:
            assert uow.products.get_by_id(catalog.widget.id).count_in_stock == 97
            assert uow.products.get_by_id(catalog.gadget.id).count_in_stock == -2

    def test_confirmation_sent_to_purchaser(self, client, catalog, notifier):
        _create(client, catalog)

        assert [m["to"] for m in notifier.sent] == ["alice@example.com"]
        assert "Order total: 170.00" in notifier.sent[0]["body"]

    def test_unknown_product_is_400_and_nothing_written(self, client, catalog, uow_factory):
        response = client.post(
            PREFIX,
            json=_payload(catalog, orderItems=[
                {"product": catalog.widget.id, "quantity": 1},
                {"product": "missing", "quantity": 1},
            ]),
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Product with ID missing not found"}
        with uow_factory() as uow:
            assert uow.orders.count() == 0
            assert uow.products.get_by_id(catalog.widget.id).count_in_stock == 100

    def test_unknown_user_is_400(self, client, catalog):
        response = client.post(PREFIX, json=_payload(catalog, user="ghost"))
        assert response.status_code == 400
        assert response.json()["error"] == "User with ID ghost not found"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"city": ""},
            {"orderItems": []},
            {"orderItems": [{"product": "x", "quantity": 0}]},
            {"phone": None},
            {"orderItems": [{"product": "x", "quantity": True}]},
            {"orderItems": [{"product": "x", "quantity": 1_000_001}]},
            {"orderItems": [{"product": "x", "quantity": 10**19}]},
            {"orderItems": [{"product": "x", "quantity": 10**27}]},
        ],
    )
    def test_invalid_body_is_400(self, client, catalog, overrides):
        response = client.post(PREFIX, json=_payload(catalog, **overrides))
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Required fields missing or invalid",
        }

    def test_storage_fault_is_500_and_rolled_back(self, client, catalog, uow_factory, monkeypatch):
        def broken(self, product_id, quantity):
            raise SQLAlchemyError("disk I/O error")

        monkeypatch.setattr(SqlAlchemyProductRepository, "decrement_stock", broken)

        response = client.post(PREFIX, json=_payload(catalog))

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}
        with uow_factory() as uow:
            assert uow.orders.count() == 0


class TestReadOrders:

    def test_list_newest_first_with_user_name(self, client, catalog):
        first = _create(client, catalog)
        second = _create(client, catalog, user=catalog.bob.id)

        response = client.get(PREFIX)

        assert response.status_code == 200
        body = response.json()
        assert [o["id"] for o in body] == [second["id"], first["id"]]
        assert body[0]["user"] == {"id": catalog.bob.id, "name": "Bob"}
        assert body[0]["orderItems"] == second["orderItems"]

    def test_list_empty(self, client):
        response = client.get(PREFIX)
        assert response.status_code == 200
        assert response.json() == []

    def test_detail_expands_items(self, client, catalog):
        created = _create(client, catalog)

        response = client.get(f"{PREFIX}/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["name"] == "Alice"
        widget_line = body["orderItems"][0]
        assert widget_line["quantity"] == 3
        assert widget_line["product"]["name"] == "Widget"
        assert widget_line["product"]["price"] == "15.00"
        assert widget_line["product"]["countInStock"] == 97
        assert widget_line["product"]["category"] == {"id": catalog.tools.id, "name": "Tools"}
        assert body["orderItems"][1]["product"]["category"] is None

    def test_detail_missing_is_404(self, client):
        response = client.get(f"{PREFIX}/missing")
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_order_item_returns_product_id(self, client, catalog):
        created = _create(client, catalog)

        response = client.get(f"{PREFIX}/orderItems/{created['orderItems'][1]}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "product": catalog.gadget.id}

    def test_order_item_missing_is_404(self, client):
        response = client.get(f"{PREFIX}/orderItems/missing")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Order item not found"}

    def test_user_orders(self, client, catalog):
        mine = _create(client, catalog)
        _create(client, catalog, user=catalog.bob.id)

        response = client.get(f"{PREFIX}/get/userorders/{catalog.alice.id}")

        assert response.status_code == 200
        body = response.json()
        assert [o["id"] for o in body] == [mine["id"]]
        assert body[0]["orderItems"][0]["product"]["name"] == "Widget"

    def test_user_orders_empty(self, client):
        response = client.get(f"{PREFIX}/get/userorders/nobody")
        assert response.status_code == 200
        assert response.json() == []


class TestModifyOrders:

    def test_update_status(self, client, catalog):
        created = _create(client, catalog)

        response = client.put(f"{PREFIX}/{created['id']}", json={"status": "shipped"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "shipped"
        assert body["totalPrice"] == created["totalPrice"]
        assert body["orderItems"] == created["orderItems"]

    def test_update_missing_is_404(self, client):
        response = client.put(f"{PREFIX}/missing", json={"status": "shipped"})
        assert response.status_code == 404

    def test_update_without_status_is_400(self, client, catalog):
        created = _create(client, catalog)
        response = client.put(f"{PREFIX}/{created['id']}", json={})
        assert response.status_code == 400

    def test_delete_removes_order_and_items(self, client, catalog):
        created = _create(client, catalog)

        response = client.delete(f"{PREFIX}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "the order is deleted!"}
        assert client.get(f"{PREFIX}/{created['id']}").status_code == 404
        for item_id in created["orderItems"]:
            assert client.get(f"{PREFIX}/orderItems/{item_id}").status_code == 404

    def test_delete_missing_is_404(self, client):
        response = client.delete(f"{PREFIX}/missing")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "order not found!"}


class TestReports:

    def test_total_sales_empty(self, client):
        response = client.get(f"{PREFIX}/get/totalsales")
        assert response.status_code == 200
        assert response.json() == {"totalsales": "0.00"}

    def test_total_sales_and_count(self, client, catalog):
        _create(client, catalog)
        _create(client, catalog, orderItems=[{"product": catalog.widget.id, "quantity": 1}])

        assert client.get(f"{PREFIX}/get/totalsales").json() == {"totalsales": "185.00"}
        assert client.get(f"{PREFIX}/get/count").json() == {"orderCount": 2}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


class TestErrorEnvelope:

    def test_unexpected_error_keeps_json_envelope(self, uow_factory, monkeypatch):
        def explode(self):
            raise RuntimeError("boom")

        monkeypatch.setattr(
            "ordersvc.application.sales_report.OrderCountHandler.handle", explode
        )
        app = create_app(Settings(environment="test"), uow_factory=uow_factory, notifier=FakeNotifier())
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get(f"{PREFIX}/get/count")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}


class TestDefaultWiring:

    def test_tables_created_on_fresh_database(self, tmp_path, monkeypatch):
        configured = []
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'fresh.db'}")
        monkeypatch.delenv("SMTP_HOST", raising=False)
        monkeypatch.setattr(
            "ordersvc.infrastructure.api.app.configure_logging", configured.append
        )

        client = TestClient(create_app())

        assert client.get(PREFIX).json() == []
        assert client.get(f"{PREFIX}/get/count").json() == {"orderCount": 0}
        assert [s.database_url for s in configured] == [f"sqlite:///{tmp_path / 'fresh.db'}"]
