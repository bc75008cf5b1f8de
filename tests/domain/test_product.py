"""Unit tests for the Product value."""

import dataclasses

import pytest

from shop.domain.model.product import Product


class TestProduct:

    def test_fields(self):
        p = Product(id="1", name="Widget", producer="Acme")
        assert p.id == "1"
        assert p.name == "Widget"
        assert p.producer == "Acme"

    def test_immutable(self):
        p = Product(id="1", name="Widget", producer="Acme")
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.name = "Gadget"

    def test_equal_by_value(self):
        assert Product("1", "Widget", "Acme") == Product("1", "Widget", "Acme")

    def test_display_name(self):
        assert Product("1", "Widget", "Acme").display_name() == "Acme - Widget"

    def test_empty_fields_allowed(self):
        p = Product(id="", name="", producer="")
        assert p.display_name() == " - "
