"""Integration tests for the search use cases."""

from shop.application.search_products import (
    ListProductsByNameHandler,
    ListProductsByProducerHandler,
)
from shop.domain.model.catalog import Catalog
from tests.sample_data import reference_catalog


class TestListProductsByNameHandler:

    def test_results_sorted_for_display(self):
        handler = ListProductsByNameHandler(reference_catalog())
        assert handler.handle("Some Product") == [
            "Some Producer1 - Some Product1",
            "Some Producer3 - Some Product1",
            "Some Product2",
            "Some Product3",
        ]

    def test_capped(self):
        handler = ListProductsByNameHandler(reference_catalog())
        assert len(handler.handle("Product")) == 10

    def test_empty_catalog(self):
        assert ListProductsByNameHandler(Catalog()).handle("x") == []


class TestListProductsByProducerHandler:

    def test_order_preserved(self):
        handler = ListProductsByProducerHandler(reference_catalog())
        result = handler.handle("Some Producer")
        assert result[0] == result[3] == "Some Product1"

    def test_empty_catalog(self):
        assert ListProductsByProducerHandler(Catalog()).handle("x") == []
