"""Category management: commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from bookstore.catalogue.category.category import Category
from bookstore.catalogue.deletion import ensure_unused
from bookstore.domain import bookstore
from bookstore.shared.soft_delete import find_live, get_live
from bookstore.shared.updates import collect_changes
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)

CATEGORY_NOT_FOUND = "Không tìm thấy danh mục"


@bookstore.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    slug: String(required=True, max_length=120)
    description: Text()
    image_id: Identifier()


@bookstore.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    slug: String(max_length=120)
    description: Text()
    image_id: Identifier()
    cleared_fields: Text()


@bookstore.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


def _ensure_name_and_slug_free(name, slug, exclude_id=None):
    for other in find_live(Category):
        if exclude_id is not None and str(other.id) == str(exclude_id):
            continue
        if other.name == name or other.slug == slug:
            raise ValidationError({"slug": ["Tên danh mục hoặc slug đã tồn tại"]})


@bookstore.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        _ensure_name_and_slug_free(command.name, command.slug)

        category = Category.create(
            name=command.name,
            slug=command.slug,
            description=command.description,
            image_id=command.image_id,
        )
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = get_live(Category, command.category_id, CATEGORY_NOT_FOUND)

        changes = collect_changes(command, ("name", "slug", "description", "image_id"), command.cleared_fields)
        _ensure_name_and_slug_free(
            changes.get("name", category.name),
            changes.get("slug", category.slug),
            exclude_id=category.id,
        )
        category.update_details(**changes)
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = get_live(Category, command.category_id, CATEGORY_NOT_FOUND)
        ensure_unused("category_id", category.id, "danh mục")

        category.delete()
        repo.add(category)
        logger.info("category_deleted", category_id=str(category.id))
