"""Domain initialization and configuration."""

from protean.domain import Domain

from bookstore.utils.logging import configure_logging, get_logger

configure_logging(log_dir="logs", log_file_prefix="bookstore")

logger = get_logger(__name__)

# Domain Composition Root
bookstore = Domain(name="bookstore")
