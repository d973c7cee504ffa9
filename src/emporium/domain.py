"""Domain initialization and configuration.

A single bounded context holds every aggregate of the storefront. Order
status changes need the caller's Account, so accounts, carts and orders
share one domain and one store.
"""

from protean.domain import Domain

from emporium.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
emporium = Domain(name="emporium")
