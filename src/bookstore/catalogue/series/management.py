"""Book series management: commands and handlers.

Deleting a series tombstones it and detaches its books inside the same
handler, so both land in one unit of work.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from bookstore.catalogue.deletion import detach_series_members
from bookstore.catalogue.series.series import BookSeries
from bookstore.domain import bookstore
from bookstore.shared.soft_delete import find_live, get_live
from bookstore.shared.updates import collect_changes
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)

SERIES_NOT_FOUND = "Không tìm thấy bộ sách"


@bookstore.command(part_of="BookSeries")
class CreateBookSeries:
    name: String(required=True, max_length=255)
    description: Text()


@bookstore.command(part_of="BookSeries")
class UpdateBookSeries:
    series_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    cleared_fields: Text()


@bookstore.command(part_of="BookSeries")
class DeleteBookSeries:
    series_id: Identifier(required=True)


def _ensure_name_free(name, exclude_id=None):
    for other in find_live(BookSeries, name=name):
        if exclude_id is None or str(other.id) != str(exclude_id):
            raise ValidationError({"name": ["Tên bộ sách đã tồn tại"]})


@bookstore.command_handler(part_of=BookSeries)
class ManageBookSeriesHandler:
    @handle(CreateBookSeries)
    def create_series(self, command):
        _ensure_name_free(command.name)

        series = BookSeries.create(name=command.name, description=command.description)
        current_domain.repository_for(BookSeries).add(series)
        return str(series.id)

    @handle(UpdateBookSeries)
    def update_series(self, command):
        repo = current_domain.repository_for(BookSeries)
        series = get_live(BookSeries, command.series_id, SERIES_NOT_FOUND)

        changes = collect_changes(command, ("name", "description"), command.cleared_fields)
        if "name" in changes:
            _ensure_name_free(changes["name"], exclude_id=series.id)
        series.update_details(**changes)
        repo.add(series)

    @handle(DeleteBookSeries)
    def delete_series(self, command):
        repo = current_domain.repository_for(BookSeries)
        series = get_live(BookSeries, command.series_id, SERIES_NOT_FOUND)

        detached = detach_series_members(series.id)
        series.delete(detached_books=detached)
        repo.add(series)
        logger.info("series_deleted", series_id=str(series.id), detached_books=detached)
