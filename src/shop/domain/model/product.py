"""Product value.

A product is created by the caller and handed to the catalog. Once stored
it never changes; the only way out of the catalog is deletion.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A product offered by the shop.

    ``id`` is the unique key. No field is validated: an empty string is a
    perfectly ordinary value.
    """

    id: str
    name: str
    producer: str

    def display_name(self) -> str:
        """Name prefixed with the producer, e.g. ``"Acme - Widget"``."""
        return f"{self.producer} - {self.name}"
