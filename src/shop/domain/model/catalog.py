"""Catalog — the in-memory store behind the Shop interface.

Products are kept in a plain list in insertion order. Every operation is a
linear scan; the collection is expected to stay small.
"""

from __future__ import annotations

from collections.abc import Iterable

from shop.domain.model.product import Product
from shop.domain.shop import SEARCH_RESULT_LIMIT, Shop


class Catalog(Shop):
    """In-memory implementation of :class:`Shop`.

    Invariant: at most one stored product per ``id``.
    """

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self._products: list[Product] = []
        for product in products or []:
            self.add_new_product(product)

    # --- Shop interface -------------------------------------------------------

    def add_new_product(self, product: Product) -> bool:
        for item in self._products:
            if item.id == product.id:
                return False

        self._products.append(product)
        return True

    def delete_product(self, product_id: str) -> bool:
        for index, item in enumerate(self._products):
            if item.id == product_id:
                del self._products[index]
                return True
        return False

    def list_products_by_name(self, search_string: str) -> set[str]:
        matches = [p for p in self._products if search_string in p.name]

        groups: dict[str, list[Product]] = {}
        for product in matches:
            groups.setdefault(product.name, []).append(product)

        # dict keeps discovery order, so truncation drops the latest finds
        found: dict[str, None] = {}
        for product in matches:
            group = groups[product.name]
            if len(group) > 1:
                for member in group:
                    found[member.display_name()] = None
            else:
                found[product.name] = None

        return set(list(found)[:SEARCH_RESULT_LIMIT])

    def list_products_by_producer(self, search_string: str) -> list[str]:
        matches = [p for p in self._products if search_string in p.producer]
        # Sorted by id, plain string ordering ("10" < "2").
        matches.sort(key=lambda p: p.id)
        return [p.name for p in matches[:SEARCH_RESULT_LIMIT]]

    # --- Read helpers ---------------------------------------------------------

    def get_product(self, product_id: str) -> Product | None:
        """Return the stored product with this id, or None."""
        for item in self._products:
            if item.id == product_id:
                return item
        return None

    def list_all(self) -> list[Product]:
        """Return every stored product in insertion order."""
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return any(item.id == product_id for item in self._products)
