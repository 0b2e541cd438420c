"""Pydantic request schemas for the catalogue API."""

from __future__ import annotations

from pydantic import Field

from bookstore.api.schemas import CamelModel
from bookstore.catalogue.book.book import BookStatus

# --- Book ---


class CreateBookRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Dế Mèn phiêu lưu ký",
                    "price": 85000,
                    "stock": 20,
                    "status": "ACTIVE",
                    "isbn": "9786042088820",
                    "authorId": "b9c1e0a2-4f0e-4c1d-9a57-2f6f1f1f0a11",
                    "seriesId": None,
                    "galleryMediaIds": [],
                }
            ]
        }
    }

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    isbn: str | None = Field(None, max_length=20)
    price: float = Field(..., gt=0)
    stock: int = Field(0, ge=0)
    status: BookStatus = BookStatus.ACTIVE
    author_id: str | None = None
    publisher_id: str | None = None
    category_id: str | None = None
    series_id: str | None = None
    thumbnail_id: str | None = None
    gallery_media_ids: list[str] = Field(default_factory=list)


class UpdateBookRequest(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    isbn: str | None = Field(None, max_length=20)
    price: float | None = Field(None, gt=0)
    stock: int | None = Field(None, ge=0)
    status: BookStatus | None = None
    author_id: str | None = None
    publisher_id: str | None = None
    category_id: str | None = None
    series_id: str | None = None
    thumbnail_id: str | None = None
    gallery_media_ids: list[str] | None = None


# --- Taxonomy ---


class AuthorRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    bio: str | None = None
    image_id: str | None = None


class UpdateAuthorRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    bio: str | None = None
    image_id: str | None = None


class CategoryRequest(CamelModel):
    model_config = {
        "json_schema_extra": {"examples": [{"name": "Văn học", "slug": "van-hoc", "description": "Tiểu thuyết, truyện"}]},
    }

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=120)
    description: str | None = None
    image_id: str | None = None


class UpdateCategoryRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    slug: str | None = Field(None, min_length=1, max_length=120)
    description: str | None = None
    image_id: str | None = None


class PublisherRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str | None = Field(None, max_length=500)
    phone: str | None = Field(None, max_length=20)
    email: str | None = Field(None, max_length=254)
    website: str | None = Field(None, max_length=500)


class UpdatePublisherRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, max_length=500)
    phone: str | None = Field(None, max_length=20)
    email: str | None = Field(None, max_length=254)
    website: str | None = Field(None, max_length=500)


class BookSeriesRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class UpdateBookSeriesRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None


# --- Media ---


class RegisterMediaRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "filename": "1718000000-cover.jpg",
                    "originalName": "cover.jpg",
                    "mimeType": "image/jpeg",
                    "size": 48213,
                    "path": "uploads/1718000000-cover.jpg",
                    "url": "/api/media/serve/1718000000-cover.jpg",
                }
            ]
        }
    }

    filename: str = Field(..., min_length=1, max_length=255)
    original_name: str | None = Field(None, max_length=255)
    mime_type: str = Field(..., min_length=1, max_length=100)
    size: int | None = Field(None, ge=0)
    path: str | None = Field(None, max_length=500)
    url: str = Field(..., min_length=1, max_length=500)
