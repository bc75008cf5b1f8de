"""Sample products shared by the test suite.

The reference set mixes two producer families: four "Some" products, two
of which share the name "Some Product1", and seven "Other" products.
"""

from __future__ import annotations

from shop.domain.model.catalog import Catalog
from shop.domain.model.product import Product


def reference_products() -> list[Product]:
    return [
        Product(id="3", name="Some Product3", producer="Some Producer2"),
        Product(id="4", name="Some Product1", producer="Some Producer3"),
        Product(id="2", name="Some Product2", producer="Some Producer2"),
        Product(id="1", name="Some Product1", producer="Some Producer1"),
        Product(id="5", name="Other Product5", producer="Other Producer4"),
        Product(id="6", name="Other Product6", producer="Other Producer4"),
        Product(id="7", name="Other Product7", producer="Other Producer4"),
        Product(id="8", name="Other Product8", producer="Other Producer4"),
        Product(id="9", name="Other Product9", producer="Other Producer4"),
        Product(id="10", name="Other Product10", producer="Other Producer4"),
        Product(id="11", name="Other Product11", producer="Other Producer4"),
    ]


def reference_catalog() -> Catalog:
    catalog = Catalog()
    for product in reference_products():
        assert catalog.add_new_product(product)
    return catalog
