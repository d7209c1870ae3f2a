"""Storefront domain: composition root.

A single bounded context holds the catalogue, identity, ordering and review
aggregates so that order placement (cart, order and product stock) commits in
one unit of work. PROTEAN_ENV selects the config overlay from domain.toml:
    - default → SQLite through SQLAlchemy
    - "test"  → in-memory provider
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="storefront")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
