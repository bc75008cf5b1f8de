"""Application services: the two product search use cases (queries)."""

from __future__ import annotations

from shop.domain.shop import Shop


class ListProductsByNameHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self, search_string: str) -> list[str]:
        """Search by product name.

        The domain returns a set; it is sorted here so that callers
        displaying the result get a stable order.
        """
        return sorted(self._shop.list_products_by_name(search_string))


class ListProductsByProducerHandler:

    def __init__(self, shop: Shop) -> None:
        self._shop = shop

    def handle(self, search_string: str) -> list[str]:
        """Search by producer, keeping the order the shop returns."""
        return self._shop.list_products_by_producer(search_string)
