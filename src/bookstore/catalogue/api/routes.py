"""FastAPI routes for the catalogue.

Admin routers manage books and their taxonomy and require the STAFF role;
the public router serves the storefront without a session.
"""

import json
import math

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from bookstore.api.schemas import MessageResponse
from bookstore.api.session import SessionUser, require_role
from bookstore.catalogue.api.payloads import (
    author_payload,
    book_payload,
    book_summary,
    category_payload,
    media_payload,
    publisher_payload,
    series_payload,
    storefront_book,
)
from bookstore.catalogue.api.schemas import (
    AuthorRequest,
    BookSeriesRequest,
    CategoryRequest,
    CreateBookRequest,
    PublisherRequest,
    RegisterMediaRequest,
    UpdateAuthorRequest,
    UpdateBookRequest,
    UpdateBookSeriesRequest,
    UpdateCategoryRequest,
    UpdatePublisherRequest,
)
from bookstore.catalogue.author.author import Author
from bookstore.catalogue.author.management import AUTHOR_NOT_FOUND, CreateAuthor, DeleteAuthor, UpdateAuthor
from bookstore.catalogue.book.book import Book, BookStatus
from bookstore.catalogue.book.management import BOOK_NOT_FOUND, CreateBook, DeleteBook, UpdateBook
from bookstore.catalogue.category.category import Category
from bookstore.catalogue.category.management import (
    CATEGORY_NOT_FOUND,
    CreateCategory,
    DeleteCategory,
    UpdateCategory,
)
from bookstore.catalogue.deletion import count_live_books
from bookstore.catalogue.media.management import MEDIA_NOT_FOUND, DeleteMedia, RegisterMedia
from bookstore.catalogue.media.media import Media
from bookstore.catalogue.pricing import active_books
from bookstore.catalogue.publisher.management import (
    PUBLISHER_NOT_FOUND,
    CreatePublisher,
    DeletePublisher,
    UpdatePublisher,
)
from bookstore.catalogue.publisher.publisher import Publisher
from bookstore.catalogue.series.management import (
    SERIES_NOT_FOUND,
    CreateBookSeries,
    DeleteBookSeries,
    UpdateBookSeries,
)
from bookstore.catalogue.series.series import BookSeries
from bookstore.identity.permissions import UserRole
from bookstore.shared.errors import not_found
from bookstore.shared.soft_delete import find_live, find_live_or_none, get_live

staff_only = [Depends(require_role(UserRole.STAFF))]

book_router = APIRouter(prefix="/books", tags=["books"], dependencies=staff_only)
author_router = APIRouter(prefix="/authors", tags=["authors"], dependencies=staff_only)
category_router = APIRouter(prefix="/categories", tags=["categories"], dependencies=staff_only)
publisher_router = APIRouter(prefix="/publishers", tags=["publishers"], dependencies=staff_only)
series_router = APIRouter(prefix="/book-series", tags=["book-series"], dependencies=staff_only)
media_router = APIRouter(prefix="/media", tags=["media"], dependencies=staff_only)
public_router = APIRouter(prefix="/public", tags=["storefront"])

admin_routers = [book_router, author_router, category_router, publisher_router, series_router, media_router]


def _newest_first(records):
    return sorted(records, key=lambda r: r.created_at, reverse=True)


def _by_name(records):
    return sorted(records, key=lambda r: (r.name or "").lower())


# --- Books ---


@book_router.get("")
async def list_books(
    status: BookStatus | None = None,
    category_id: str | None = Query(None, alias="categoryId"),
    series_id: str | None = Query(None, alias="seriesId"),
) -> list[dict]:
    criteria = {}
    if status is not None:
        criteria["status"] = status.value
    if category_id:
        criteria["category_id"] = category_id
    if series_id:
        criteria["series_id"] = series_id
    return [book_summary(b) for b in _newest_first(find_live(Book, **criteria))]


@book_router.get("/{book_id}")
async def get_book(book_id: str) -> dict:
    return book_payload(get_live(Book, book_id, BOOK_NOT_FOUND))


@book_router.post("", status_code=201)
async def create_book(body: CreateBookRequest, session: SessionUser = Depends(require_role(UserRole.STAFF))) -> dict:
    command = CreateBook(
        title=body.title,
        description=body.description,
        isbn=body.isbn,
        price=body.price,
        stock=body.stock,
        status=body.status.value,
        author_id=body.author_id,
        publisher_id=body.publisher_id,
        category_id=body.category_id,
        series_id=body.series_id,
        thumbnail_id=body.thumbnail_id,
        gallery=json.dumps(body.gallery_media_ids),
        created_by=session.id,
    )
    book_id = current_domain.process(command, asynchronous=False)
    return book_payload(get_live(Book, book_id, BOOK_NOT_FOUND))


@book_router.put("/{book_id}")
async def update_book(book_id: str, body: UpdateBookRequest) -> dict:
    command = UpdateBook(
        book_id=book_id,
        title=body.title,
        description=body.description,
        isbn=body.isbn,
        price=body.price,
        stock=body.stock,
        status=body.status.value if body.status else None,
        author_id=body.author_id,
        publisher_id=body.publisher_id,
        category_id=body.category_id,
        series_id=body.series_id,
        thumbnail_id=body.thumbnail_id,
        gallery=json.dumps(body.gallery_media_ids) if body.gallery_media_ids is not None else None,
        cleared_fields=body.cleared_fields(),
    )
    current_domain.process(command, asynchronous=False)
    return book_payload(get_live(Book, book_id, BOOK_NOT_FOUND))


@book_router.delete("/{book_id}", response_model=MessageResponse)
async def delete_book(book_id: str) -> MessageResponse:
    current_domain.process(DeleteBook(book_id=book_id), asynchronous=False)
    return MessageResponse(message="Đã xóa sách")


# --- Authors ---


@author_router.get("")
async def list_authors() -> list[dict]:
    return [author_payload(a, count_live_books(author_id=str(a.id))) for a in _by_name(find_live(Author))]


@author_router.get("/{author_id}")
async def get_author(author_id: str) -> dict:
    author = get_live(Author, author_id, AUTHOR_NOT_FOUND)
    return author_payload(author, count_live_books(author_id=str(author.id)))


@author_router.post("", status_code=201)
async def create_author(body: AuthorRequest) -> dict:
    author_id = current_domain.process(
        CreateAuthor(name=body.name, bio=body.bio, image_id=body.image_id), asynchronous=False
    )
    return author_payload(get_live(Author, author_id, AUTHOR_NOT_FOUND))


@author_router.put("/{author_id}")
async def update_author(author_id: str, body: UpdateAuthorRequest) -> dict:
    command = UpdateAuthor(
        author_id=author_id,
        name=body.name,
        bio=body.bio,
        image_id=body.image_id,
        cleared_fields=body.cleared_fields(),
    )
    current_domain.process(command, asynchronous=False)
    return author_payload(get_live(Author, author_id, AUTHOR_NOT_FOUND))


@author_router.delete("/{author_id}", response_model=MessageResponse)
async def delete_author(author_id: str) -> MessageResponse:
    current_domain.process(DeleteAuthor(author_id=author_id), asynchronous=False)
    return MessageResponse(message="Đã xóa tác giả")


# --- Categories ---


@category_router.get("")
async def list_categories() -> list[dict]:
    return [category_payload(c, count_live_books(category_id=str(c.id))) for c in _by_name(find_live(Category))]


@category_router.get("/{category_id}")
async def get_category(category_id: str) -> dict:
    category = get_live(Category, category_id, CATEGORY_NOT_FOUND)
    return category_payload(category, count_live_books(category_id=str(category.id)))


@category_router.post("", status_code=201)
async def create_category(body: CategoryRequest) -> dict:
    command = CreateCategory(name=body.name, slug=body.slug, description=body.description, image_id=body.image_id)
    category_id = current_domain.process(command, asynchronous=False)
    return category_payload(get_live(Category, category_id, CATEGORY_NOT_FOUND))


@category_router.put("/{category_id}")
async def update_category(category_id: str, body: UpdateCategoryRequest) -> dict:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        slug=body.slug,
        description=body.description,
        image_id=body.image_id,
        cleared_fields=body.cleared_fields(),
    )
    current_domain.process(command, asynchronous=False)
    return category_payload(get_live(Category, category_id, CATEGORY_NOT_FOUND))


@category_router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(category_id: str) -> MessageResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return MessageResponse(message="Đã xóa danh mục")


# --- Publishers ---


@publisher_router.get("")
async def list_publishers() -> list[dict]:
    return [publisher_payload(p, count_live_books(publisher_id=str(p.id))) for p in _by_name(find_live(Publisher))]


@publisher_router.get("/{publisher_id}")
async def get_publisher(publisher_id: str) -> dict:
    publisher = get_live(Publisher, publisher_id, PUBLISHER_NOT_FOUND)
    return publisher_payload(publisher, count_live_books(publisher_id=str(publisher.id)))


@publisher_router.post("", status_code=201)
async def create_publisher(body: PublisherRequest) -> dict:
    command = CreatePublisher(
        name=body.name,
        address=body.address,
        phone=body.phone,
        email=body.email,
        website=body.website,
    )
    publisher_id = current_domain.process(command, asynchronous=False)
    return publisher_payload(get_live(Publisher, publisher_id, PUBLISHER_NOT_FOUND))


@publisher_router.put("/{publisher_id}")
async def update_publisher(publisher_id: str, body: UpdatePublisherRequest) -> dict:
    command = UpdatePublisher(
        publisher_id=publisher_id,
        name=body.name,
        address=body.address,
        phone=body.phone,
        email=body.email,
        website=body.website,
        cleared_fields=body.cleared_fields(),
    )
    current_domain.process(command, asynchronous=False)
    return publisher_payload(get_live(Publisher, publisher_id, PUBLISHER_NOT_FOUND))


@publisher_router.delete("/{publisher_id}", response_model=MessageResponse)
async def delete_publisher(publisher_id: str) -> MessageResponse:
    current_domain.process(DeletePublisher(publisher_id=publisher_id), asynchronous=False)
    return MessageResponse(message="Đã xóa nhà xuất bản")


# --- Book series ---


@series_router.get("")
async def list_series() -> list[dict]:
    payloads = []
    for series in _newest_first(find_live(BookSeries)):
        books = find_live(Book, series_id=str(series.id))
        payload = series_payload(series, books, with_stock=True)
        payload["bookCount"] = len(books)
        payloads.append(payload)
    return payloads


@series_router.get("/{series_id}")
async def get_series(series_id: str) -> dict:
    series = get_live(BookSeries, series_id, SERIES_NOT_FOUND)
    books = sorted(find_live(Book, series_id=str(series.id)), key=lambda b: b.created_at)
    payload = series_payload(series, books, with_stock=True)
    payload["bookCount"] = len(books)
    payload["books"] = [book_summary(b) for b in books]
    return payload


@series_router.post("", status_code=201)
async def create_series(body: BookSeriesRequest) -> dict:
    series_id = current_domain.process(
        CreateBookSeries(name=body.name, description=body.description), asynchronous=False
    )
    return series_payload(get_live(BookSeries, series_id, SERIES_NOT_FOUND), [])


@series_router.put("/{series_id}")
async def update_series(series_id: str, body: UpdateBookSeriesRequest) -> dict:
    command = UpdateBookSeries(
        series_id=series_id,
        name=body.name,
        description=body.description,
        cleared_fields=body.cleared_fields(),
    )
    current_domain.process(command, asynchronous=False)
    series = get_live(BookSeries, series_id, SERIES_NOT_FOUND)
    return series_payload(series, find_live(Book, series_id=str(series.id)))


@series_router.delete("/{series_id}", response_model=MessageResponse)
async def delete_series(series_id: str) -> MessageResponse:
    current_domain.process(DeleteBookSeries(series_id=series_id), asynchronous=False)
    return MessageResponse(message="Đã xóa bộ sách")


# --- Media ---


@media_router.get("")
async def list_media() -> list[dict]:
    return [media_payload(m) for m in _newest_first(find_live(Media))]


@media_router.get("/{media_id}")
async def get_media(media_id: str) -> dict:
    return media_payload(get_live(Media, media_id, MEDIA_NOT_FOUND))


@media_router.post("", status_code=201)
async def register_media(
    body: RegisterMediaRequest, session: SessionUser = Depends(require_role(UserRole.STAFF))
) -> dict:
    command = RegisterMedia(
        filename=body.filename,
        original_name=body.original_name,
        mime_type=body.mime_type,
        size=body.size,
        path=body.path,
        url=body.url,
        uploaded_by=session.id,
    )
    media_id = current_domain.process(command, asynchronous=False)
    return media_payload(get_live(Media, media_id, MEDIA_NOT_FOUND))


@media_router.delete("/{media_id}", response_model=MessageResponse)
async def delete_media(media_id: str) -> MessageResponse:
    current_domain.process(DeleteMedia(media_id=media_id), asynchronous=False)
    return MessageResponse(message="Đã xóa media")


# --- Storefront ---


def _paginate(records, page: int, limit: int):
    window = records[(page - 1) * limit : page * limit]
    pagination = {
        "page": page,
        "limit": limit,
        "total": len(records),
        "totalPages": math.ceil(len(records) / limit),
    }
    return window, pagination


def _on_sale(**criteria):
    """Live ACTIVE books matching ``criteria``, newest first."""
    return _newest_first(find_live(Book, status=BookStatus.ACTIVE.value, **criteria))


def _live_category_by_slug(slug):
    return next(iter(find_live(Category, slug=slug)), None)


def _matches(book, term: str) -> bool:
    author = find_live_or_none(Author, book.author_id)
    haystack = (book.title, book.description, book.isbn, author.name if author else None)
    return any(term in value.lower() for value in haystack if value)


@public_router.get("/books")
async def list_public_books(
    category: str | None = None,
    author: str | None = None,
    publisher: str | None = None,
    search: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
) -> dict:
    """Books on sale. ``category`` is a slug; ``search`` matches title, description, ISBN or author name."""
    criteria = {}
    if category:
        found = _live_category_by_slug(category)
        if found is None:
            books, pagination = _paginate([], page, limit)
            return {"books": books, "pagination": pagination}
        criteria["category_id"] = str(found.id)
    if author:
        criteria["author_id"] = author
    if publisher:
        criteria["publisher_id"] = publisher

    books = _on_sale(**criteria)
    if search and search.strip():
        term = search.strip().lower()
        books = [b for b in books if _matches(b, term)]

    window, pagination = _paginate(books, page, limit)
    return {"books": [storefront_book(b, gallery_size=5) for b in window], "pagination": pagination}


@public_router.get("/books/{book_id}")
async def get_public_book(book_id: str) -> dict:
    book = get_live(Book, book_id, BOOK_NOT_FOUND)
    if not book.is_active:
        raise not_found(BOOK_NOT_FOUND)
    return book_payload(book)


@public_router.get("/new-books")
async def list_new_books(limit: int = Query(6, ge=1, le=100)) -> dict:
    return {"books": [storefront_book(b) for b in _on_sale()[:limit]]}


@public_router.get("/featured-books")
async def list_featured_books(limit: int = Query(6, ge=1, le=100)) -> dict:
    # Featured is the newest titles until sales or ratings exist to rank by.
    return {"books": [storefront_book(b) for b in _on_sale()[:limit]]}


@public_router.get("/categories")
async def list_public_categories() -> list[dict]:
    return [
        category_payload(c, count_live_books(category_id=str(c.id), status=BookStatus.ACTIVE.value))
        for c in _by_name(find_live(Category))
    ]


@public_router.get("/categories/{slug}/books")
async def list_category_books(
    slug: str,
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
) -> dict:
    category = _live_category_by_slug(slug)
    if category is None:
        raise not_found(CATEGORY_NOT_FOUND)

    window, pagination = _paginate(_on_sale(category_id=str(category.id)), page, limit)
    return {
        "category": category_payload(category),
        "books": [storefront_book(b) for b in window],
        "pagination": pagination,
    }


@public_router.get("/book-series")
async def list_public_series(page: int = Query(1, ge=1), limit: int = Query(12, ge=1, le=100)) -> dict:
    window, pagination = _paginate(_newest_first(find_live(BookSeries)), page, limit)

    series = []
    for s in window:
        books = active_books(find_live(Book, series_id=str(s.id)))
        payload = series_payload(s, books, with_stock=True)
        payload["bookCount"] = len(books)
        series.append(payload)

    return {"series": series, "pagination": pagination}


@public_router.get("/book-series/{series_id}")
async def get_public_series(series_id: str) -> dict:
    series = get_live(BookSeries, series_id, SERIES_NOT_FOUND)
    books = sorted(active_books(find_live(Book, series_id=str(series.id))), key=lambda b: b.created_at)
    payload = series_payload(series, books)
    payload["books"] = [book_summary(b) for b in books]
    return payload
