"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from shop.domain.model.product import Product
from shop.domain.shop import Shop

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self, product_id: str, name: str, producer: str) -> bool:
        """Add a new product; False if the id is already taken."""
        product = Product(id=product_id, name=name, producer=producer)
        if not self._shop.add_new_product(product):
            logger.debug("Rejected product %r: id already stored", product_id)
            return False

        logger.debug("Added product %r (%s)", product_id, name)
        return True
