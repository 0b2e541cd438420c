"""HTTP tests for the public storefront endpoints."""

import pytest
from protean.utils.globals import current_domain

from bookstore.catalogue.author.management import CreateAuthor
from bookstore.catalogue.book.management import DeleteBook
from bookstore.catalogue.category.management import CreateCategory, DeleteCategory
from bookstore.catalogue.series.management import CreateBookSeries


@pytest.fixture()
def series_id():
    return current_domain.process(CreateBookSeries(name="Harry Potter"), asynchronous=False)


@pytest.fixture()
def category_id():
    return current_domain.process(CreateCategory(name="Văn học", slug="van-hoc"), asynchronous=False)


@pytest.fixture()
def author_id():
    return current_domain.process(CreateAuthor(name="Nguyễn Nhật Ánh"), asynchronous=False)


class TestPublicSeries:
    def test_detail_carries_bundle_price(self, client, make_book, series_id):
        make_book(title="Tập 1", price=100000.0, series_id=series_id)
        make_book(title="Tập 2", price=150000.0, series_id=series_id)

        response = client.get(f"/public/book-series/{series_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["totalPrice"] == 250000
        assert body["discountedPrice"] == 225000
        assert body["discount"] == 25000
        assert [b["title"] for b in body["books"]] == ["Tập 1", "Tập 2"]

    def test_detail_excludes_inactive_and_deleted_books(self, client, make_book, series_id):
        make_book(title="Tập 1", price=100000.0, series_id=series_id)
        make_book(title="Ngừng bán", price=90000.0, status="INACTIVE", series_id=series_id)
        deleted = make_book(title="Đã xóa", price=80000.0, series_id=series_id)
        current_domain.process(DeleteBook(book_id=deleted), asynchronous=False)

        body = client.get(f"/public/book-series/{series_id}").json()
        assert [b["title"] for b in body["books"]] == ["Tập 1"]
        assert body["totalPrice"] == 100000

    def test_list_carries_stock_summary_and_pagination(self, client, make_book, series_id):
        make_book(title="Tập 1", price=100000.0, stock=3, series_id=series_id)
        make_book(title="Tập 2", price=100000.0, stock=0, series_id=series_id)

        body = client.get("/public/book-series").json()
        assert body["pagination"] == {"page": 1, "limit": 12, "total": 1, "totalPages": 1}
        [series] = body["series"]
        assert series["allInStock"] is False
        assert series["minStock"] == 0
        assert series["totalPrice"] == 200000

    def test_empty_series_prices_at_zero(self, client, series_id):
        series = client.get("/public/book-series").json()["series"][0]
        assert (series["totalPrice"], series["discountedPrice"], series["discount"]) == (0, 0, 0)
        assert series["minStock"] == 0

    def test_pagination_window(self, client):
        for name in ("A", "B", "C"):
            current_domain.process(CreateBookSeries(name=name), asynchronous=False)

        body = client.get("/public/book-series", params={"page": 2, "limit": 2}).json()
        assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "totalPages": 2}
        assert len(body["series"]) == 1

    def test_missing_series_is_404(self, client):
        response = client.get("/public/book-series/missing")
        assert response.status_code == 404
        assert response.json() == {"error": "Không tìm thấy bộ sách"}


class TestPublicBook:
    def test_active_book(self, client, make_book):
        book_id = make_book()
        assert client.get(f"/public/books/{book_id}").json()["title"] == "Dế Mèn phiêu lưu ký"

    def test_inactive_book_is_404(self, client, make_book):
        book_id = make_book(status="INACTIVE")
        assert client.get(f"/public/books/{book_id}").status_code == 404


class TestPublicBookList:
    def test_only_active_books_newest_first(self, client, make_book):
        make_book(title="Cũ")
        make_book(title="Ngừng bán", status="INACTIVE")
        make_book(title="Mới")

        body = client.get("/public/books").json()
        assert [b["title"] for b in body["books"]] == ["Mới", "Cũ"]
        assert body["pagination"] == {"page": 1, "limit": 12, "total": 2, "totalPages": 1}

    def test_filter_by_category_slug_and_author(self, client, make_book, category_id, author_id):
        make_book(title="Mắt biếc", category_id=category_id, author_id=author_id)
        make_book(title="Cho tôi xin một vé đi tuổi thơ", author_id=author_id)
        make_book(title="Khác", category_id=category_id)

        by_category = client.get("/public/books", params={"category": "van-hoc"}).json()
        assert {b["title"] for b in by_category["books"]} == {"Mắt biếc", "Khác"}

        by_author = client.get("/public/books", params={"author": author_id}).json()
        assert {b["title"] for b in by_author["books"]} == {"Mắt biếc", "Cho tôi xin một vé đi tuổi thơ"}

    def test_unknown_category_slug_is_empty(self, client, make_book):
        make_book()
        body = client.get("/public/books", params={"category": "khong-ton-tai"}).json()
        assert body["books"] == []
        assert body["pagination"]["total"] == 0

    def test_search_matches_title_and_author_name(self, client, make_book, author_id):
        make_book(title="Kính vạn hoa", author_id=author_id)
        make_book(title="Tắt đèn", isbn="9786041234567")

        by_author = client.get("/public/books", params={"search": "nhật ánh"}).json()
        assert [b["title"] for b in by_author["books"]] == ["Kính vạn hoa"]

        by_isbn = client.get("/public/books", params={"search": "604123"}).json()
        assert [b["title"] for b in by_isbn["books"]] == ["Tắt đèn"]

    def test_pagination_window(self, client, make_book):
        for n in range(5):
            make_book(title=f"Sách {n}")

        body = client.get("/public/books", params={"page": 3, "limit": 2}).json()
        assert body["pagination"] == {"page": 3, "limit": 2, "total": 5, "totalPages": 3}
        assert [b["title"] for b in body["books"]] == ["Sách 0"]


class TestNewAndFeaturedBooks:
    @pytest.mark.parametrize("path", ["/public/new-books", "/public/featured-books"])
    def test_newest_active_books_up_to_limit(self, client, make_book, path):
        for n in range(4):
            make_book(title=f"Sách {n}")
        make_book(title="Ngừng bán", status="INACTIVE")

        body = client.get(path, params={"limit": 3}).json()
        assert [b["title"] for b in body["books"]] == ["Sách 3", "Sách 2", "Sách 1"]

    def test_default_limit_is_six(self, client, make_book):
        for n in range(8):
            make_book(title=f"Sách {n}")
        assert len(client.get("/public/new-books").json()["books"]) == 6


class TestPublicCategories:
    def test_count_only_active_live_books(self, client, make_book, category_id):
        make_book(category_id=category_id)
        make_book(title="Ngừng bán", category_id=category_id, status="INACTIVE")
        deleted = make_book(title="Đã xóa", category_id=category_id)
        current_domain.process(DeleteBook(book_id=deleted), asynchronous=False)

        [category] = client.get("/public/categories").json()
        assert category["slug"] == "van-hoc"
        assert category["bookCount"] == 1

    def test_category_books_by_slug(self, client, make_book, category_id):
        make_book(title="Trong danh mục", category_id=category_id)
        make_book(title="Ngoài danh mục")

        body = client.get("/public/categories/van-hoc/books").json()
        assert body["category"]["id"] == category_id
        assert [b["title"] for b in body["books"]] == ["Trong danh mục"]
        assert body["pagination"]["total"] == 1

    def test_deleted_category_is_404(self, client, category_id):
        current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)

        response = client.get("/public/categories/van-hoc/books")
        assert response.status_code == 404
        assert response.json() == {"error": "Không tìm thấy danh mục"}
