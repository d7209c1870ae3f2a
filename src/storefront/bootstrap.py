"""Domain bootstrap shared by the API, the management CLI and the test suite.

``Domain.init()`` only discovers modules directly under the domain root and
its immediate subpackages. Storefront elements live one level deeper
(``catalogue/category/repository.py``), so every element module is imported
here before the domain is initialized.
"""

import importlib

from storefront.domain import logger, storefront

ELEMENT_MODULES = (
    "storefront.catalogue.category.events",
    "storefront.catalogue.category.category",
    "storefront.catalogue.category.repository",
    "storefront.catalogue.category.management",
    "storefront.catalogue.product.events",
    "storefront.catalogue.product.product",
    "storefront.catalogue.product.repository",
    "storefront.catalogue.product.management",
    "storefront.catalogue.product.stock_alerts",
    "storefront.identity.user.events",
    "storefront.identity.user.user",
    "storefront.identity.user.repository",
    "storefront.identity.user.registration",
    "storefront.identity.user.management",
    "storefront.ordering.cart.events",
    "storefront.ordering.cart.cart",
    "storefront.ordering.cart.repository",
    "storefront.ordering.cart.management",
    "storefront.ordering.order.events",
    "storefront.ordering.order.order",
    "storefront.ordering.order.repository",
    "storefront.ordering.order.placement",
    "storefront.ordering.order.status",
    "storefront.reviews.review.events",
    "storefront.reviews.review.review",
    "storefront.reviews.review.repository",
    "storefront.reviews.review.submission",
)


def load_elements() -> None:
    for module in ELEMENT_MODULES:
        importlib.import_module(module)


def init_storefront():
    """Register every storefront element and initialize the domain."""
    load_elements()
    storefront.init()
    logger.info("domain_initialized", domain=storefront.name, repositories=len(storefront.registry.repositories))
    return storefront
