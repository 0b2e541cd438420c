"""HTTP tests for the cart endpoints."""

import pytest
from protean.utils.globals import current_domain

from bookstore.catalogue.series.management import CreateBookSeries

HEADERS = {"X-User-Id": "customer-1", "X-User-Role": "CUSTOMER"}


def _add(client, book_id, quantity=1, headers=HEADERS):
    return client.post("/cart/items", json={"bookId": book_id, "quantity": quantity}, headers=headers)


class TestCartItems:
    def test_requires_session(self, client):
        assert client.get("/cart").status_code == 401

    def test_add_returns_item_with_nested_book(self, client, make_book):
        response = _add(client, make_book(stock=3), 2)
        assert response.status_code == 201
        body = response.json()
        assert body["quantity"] == 2
        assert body["book"]["title"] == "Dế Mèn phiêu lưu ký"

    def test_add_above_stock_is_400(self, client, make_book):
        response = _add(client, make_book(stock=3), 4)
        assert response.status_code == 400
        assert response.json() == {"error": "Số lượng không đủ. Chỉ còn 3 cuốn"}

    def test_patch_above_stock_is_400(self, client, make_book):
        item = _add(client, make_book(stock=5)).json()

        response = client.patch(f"/cart/items/{item['id']}", json={"quantity": 6}, headers=HEADERS)
        assert response.status_code == 400
        assert response.json() == {"error": "Số lượng không đủ. Chỉ còn 5 cuốn"}

    def test_patch_at_stock_succeeds(self, client, make_book):
        item = _add(client, make_book(stock=5)).json()

        response = client.patch(f"/cart/items/{item['id']}", json={"quantity": 5}, headers=HEADERS)
        assert response.status_code == 200
        assert response.json()["quantity"] == 5

    def test_patch_zero_quantity_is_400(self, client, make_book):
        item = _add(client, make_book()).json()
        response = client.patch(f"/cart/items/{item['id']}", json={"quantity": 0}, headers=HEADERS)
        assert response.status_code == 400

    def test_patch_other_users_item_is_403(self, client, make_book):
        item = _add(client, make_book()).json()
        other = {"X-User-Id": "customer-2", "X-User-Role": "CUSTOMER"}

        response = client.patch(f"/cart/items/{item['id']}", json={"quantity": 1}, headers=other)
        assert response.status_code == 403

    def test_delete_item(self, client, make_book):
        item = _add(client, make_book()).json()

        response = client.delete(f"/cart/items/{item['id']}", headers=HEADERS)
        assert response.json() == {"message": "Đã xóa item khỏi giỏ hàng"}
        assert client.get("/cart", headers=HEADERS).json()["itemCount"] == 0


class TestCartSummary:
    @pytest.fixture()
    def series_id(self):
        return current_domain.process(CreateBookSeries(name="Harry Potter"), asynchronous=False)

    def test_empty_cart(self, client):
        body = client.get("/cart", headers=HEADERS).json()
        assert body["cart"]["items"] == []
        assert (body["total"], body["itemCount"], body["seriesDiscount"]) == (0, 0, 0)

    def test_plain_total(self, client, make_book):
        _add(client, make_book(price=50000.0), 2)
        _add(client, make_book(title="Khác", price=30000.0), 1)

        body = client.get("/cart", headers=HEADERS).json()
        assert body["total"] == 130000
        assert body["itemCount"] == 3
        assert body["appliedSeries"] == []

    def test_complete_series_gets_bundle_discount(self, client, make_book, series_id):
        first = make_book(title="Tập 1", price=100000.0, series_id=series_id)
        second = make_book(title="Tập 2", price=150000.0, series_id=series_id)
        _add(client, first)
        _add(client, second)

        body = client.get("/cart", headers=HEADERS).json()
        assert body["appliedSeries"] == [series_id]
        assert body["seriesDiscount"] == 25000
        assert body["total"] == 225000

    def test_incomplete_series_pays_full_price(self, client, make_book, series_id):
        first = make_book(title="Tập 1", price=100000.0, series_id=series_id)
        make_book(title="Tập 2", price=150000.0, series_id=series_id)
        _add(client, first)

        body = client.get("/cart", headers=HEADERS).json()
        assert body["appliedSeries"] == []
        assert body["total"] == 100000

    def test_clear_cart(self, client, make_book):
        _add(client, make_book())
        response = client.delete("/cart", headers=HEADERS)
        assert response.json() == {"message": "Đã xóa giỏ hàng"}
        assert client.get("/cart", headers=HEADERS).json()["itemCount"] == 0
