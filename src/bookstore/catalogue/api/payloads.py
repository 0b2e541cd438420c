"""Response payloads for catalogue records.

References are resolved against live records only: a missing or
soft-deleted author, category, publisher or media renders as ``None``.
"""

from bookstore.catalogue.author.author import Author
from bookstore.catalogue.category.category import Category
from bookstore.catalogue.media.media import Media
from bookstore.catalogue.pricing import price_series
from bookstore.catalogue.publisher.publisher import Publisher
from bookstore.shared.soft_delete import find_live_or_none


def media_ref(media_id) -> dict | None:
    media = find_live_or_none(Media, media_id)
    if media is None:
        return None
    return {"id": str(media.id), "url": media.url, "path": media.path}


def author_ref(author_id) -> dict | None:
    author = find_live_or_none(Author, author_id)
    if author is None:
        return None
    return {"id": str(author.id), "name": author.name, "image": media_ref(author.image_id)}


def category_ref(category_id) -> dict | None:
    category = find_live_or_none(Category, category_id)
    if category is None:
        return None
    return {"id": str(category.id), "name": category.name, "slug": category.slug}


def publisher_ref(publisher_id) -> dict | None:
    publisher = find_live_or_none(Publisher, publisher_id)
    if publisher is None:
        return None
    return publisher_payload(publisher)


def book_summary(book) -> dict:
    """Book with author, category and thumbnail nested; used in lists and the cart."""
    return {
        "id": str(book.id),
        "title": book.title,
        "price": book.price,
        "stock": book.stock,
        "status": book.status,
        "seriesId": book.series_id,
        "author": author_ref(book.author_id),
        "category": category_ref(book.category_id),
        "thumbnail": media_ref(book.thumbnail_id),
        "createdAt": book.created_at,
    }


def storefront_book(book, gallery_size=3) -> dict:
    """List entry for the storefront: the summary plus publisher and the first gallery images."""
    payload = book_summary(book)
    gallery = (media_ref(mid) for mid in book.gallery_media_ids)
    payload["publisher"] = publisher_ref(book.publisher_id)
    payload["gallery"] = [ref for ref in gallery if ref is not None][:gallery_size]
    return payload


def book_payload(book) -> dict:
    payload = book_summary(book)
    payload.update(
        {
            "description": book.description,
            "isbn": book.isbn,
            "authorId": book.author_id,
            "publisherId": book.publisher_id,
            "categoryId": book.category_id,
            "thumbnailId": book.thumbnail_id,
            "publisher": publisher_ref(book.publisher_id),
            "gallery": [ref for ref in (media_ref(mid) for mid in book.gallery_media_ids) if ref is not None],
            "createdBy": book.created_by,
            "updatedAt": book.updated_at,
        }
    )
    return payload


def author_payload(author, book_count=None) -> dict:
    payload = {
        "id": str(author.id),
        "name": author.name,
        "bio": author.bio,
        "imageId": author.image_id,
        "image": media_ref(author.image_id),
        "createdAt": author.created_at,
    }
    if book_count is not None:
        payload["bookCount"] = book_count
    return payload


def category_payload(category, book_count=None) -> dict:
    payload = {
        "id": str(category.id),
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
        "imageId": category.image_id,
        "image": media_ref(category.image_id),
        "createdAt": category.created_at,
    }
    if book_count is not None:
        payload["bookCount"] = book_count
    return payload


def publisher_payload(publisher, book_count=None) -> dict:
    payload = {
        "id": str(publisher.id),
        "name": publisher.name,
        "address": publisher.address,
        "phone": publisher.phone,
        "email": publisher.email,
        "website": publisher.website,
    }
    if book_count is not None:
        payload["bookCount"] = book_count
    return payload


def media_payload(media) -> dict:
    return {
        "id": str(media.id),
        "filename": media.filename,
        "originalName": media.original_name,
        "mimeType": media.mime_type,
        "size": media.size,
        "path": media.path,
        "url": media.url,
        "uploadedBy": media.uploaded_by,
        "createdAt": media.created_at,
    }


def series_payload(series, books, with_stock=False) -> dict:
    """Series with its bundle price derived from ``books``."""
    price = price_series(books)
    payload = {
        "id": str(series.id),
        "name": series.name,
        "description": series.description,
        "createdAt": series.created_at,
        "totalPrice": price.total_price,
        "discountedPrice": price.discounted_price,
        "discount": price.discount,
    }
    if with_stock:
        payload["allInStock"] = price.all_in_stock
        payload["minStock"] = price.min_stock
    return payload
