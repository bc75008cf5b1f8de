"""Abstract shop interface.

Defined in the domain layer so application handlers depend on the
contract, not on the in-memory catalog that happens to implement it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.product import Product

# Maximum number of entries returned by either search.
SEARCH_RESULT_LIMIT = 10


class Shop(ABC):

    @abstractmethod
    def add_new_product(self, product: Product) -> bool:
        """Add a product.

        Returns False if a product with the same id already exists (the
        stored one is kept), True otherwise.
        """

    @abstractmethod
    def delete_product(self, product_id: str) -> bool:
        """Delete the product with the given id.

        Returns True if such a product existed, False otherwise.
        """

    @abstractmethod
    def list_products_by_name(self, search_string: str) -> set[str]:
        """Return up to 10 product names containing ``search_string``.

        Names shared by several matching products are reported as
        ``"<producer> - <name>"`` for each of them; a name that is unique
        among the matches is reported as is.
        """

    @abstractmethod
    def list_products_by_producer(self, search_string: str) -> list[str]:
        """Return up to 10 names of products whose producer contains
        ``search_string``."""
