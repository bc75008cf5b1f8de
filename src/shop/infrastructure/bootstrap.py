"""Composition root — wires the concrete catalog to its seed data.

This is the only place that knows both the domain and the seed loader.
"""

from __future__ import annotations

import logging
from pathlib import Path

from shop.domain.model.catalog import Catalog
from shop.infrastructure.seed.json_product_loader import JsonProductLoader

logger = logging.getLogger(__name__)


def catalog(seed_file: Path | None = None) -> Catalog:
    shop = Catalog()
    if seed_file is None:
        return shop

    for product in JsonProductLoader(seed_file).load():
        if not shop.add_new_product(product):
            logger.warning(
                "Skipping duplicate product id %r in %s", product.id, seed_file
            )
    return shop
