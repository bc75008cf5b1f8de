"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from shop.domain.shop import Shop

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self, product_id: str) -> bool:
        deleted = self._shop.delete_product(product_id)
        if deleted:
            logger.debug("Deleted product %r", product_id)
        return deleted
