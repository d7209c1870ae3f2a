"""Stock level alerts raised from product stock changes."""

import structlog
from protean import handle

from storefront.catalogue.product.events import StockAdjusted
from storefront.catalogue.product.product import Product
from storefront.domain import storefront

logger = structlog.get_logger(__name__)

LOW_STOCK_THRESHOLD = 5


@storefront.event_handler(part_of=Product)
class StockAlertHandler:
    @handle(StockAdjusted)
    def on_stock_adjusted(self, event: StockAdjusted) -> None:
        if event.new_stock == 0:
            logger.warning("product_out_of_stock", product_id=str(event.product_id), reason=event.reason)
        elif event.new_stock <= LOW_STOCK_THRESHOLD < event.previous_stock:
            logger.info(
                "product_stock_low",
                product_id=str(event.product_id),
                stock=event.new_stock,
                reason=event.reason,
            )
