"""Read-only JSON seed file for pre-populating a catalog.

The file holds a JSON array of ``{"id", "name", "producer"}`` objects.
It is only ever read; the catalog itself stays purely in memory.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from shop.domain.exceptions import ValidationError
from shop.domain.model.product import Product

logger = logging.getLogger(__name__)

_FIELDS = ("id", "name", "producer")


class JsonProductLoader:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> list[Product]:
        raw = self._read()
        if not isinstance(raw, list):
            raise ValidationError(
                f"{self._file_path}: expected a JSON array of products"
            )

        products = [self._to_domain(index, item) for index, item in enumerate(raw)]
        logger.info("Loaded %d products from %s", len(products), self._file_path)
        return products

    # --- Helpers --------------------------------------------------------------

    def _read(self) -> object:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ValidationError(f"Seed file not found: {self._file_path}") from exc
        except UnicodeDecodeError as exc:
            raise ValidationError(f"{self._file_path}: not valid UTF-8 ({exc})") from exc
        except OSError as exc:
            raise ValidationError(f"{self._file_path}: cannot be read ({exc})") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"{self._file_path}: invalid JSON ({exc})") from exc

    def _to_domain(self, index: int, item: object) -> Product:
        if not isinstance(item, dict):
            raise ValidationError(
                f"{self._file_path}: entry {index} is not an object"
            )
        for field in _FIELDS:
            if not isinstance(item.get(field), str):
                raise ValidationError(
                    f"{self._file_path}: entry {index} has no string '{field}'"
                )
        return Product(id=item["id"], name=item["name"], producer=item["producer"])
