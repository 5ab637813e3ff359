"""Normalization of raw search backend payloads."""

import dataclasses

import pytest

from product_tools.models import FacetItem, ProductSummary, SearchResponse


def test_missing_docs_yield_no_products():
    assert SearchResponse.from_dict({}).products == ()
    assert SearchResponse.from_dict({"response": {}}).products == ()
    assert SearchResponse.from_dict({"response": {"docs": []}}).products == ()


def test_product_defaults_for_missing_fields():
    product = ProductSummary.from_dict({})

    assert product.price == 0.0
    assert product.title == ""
    assert product.description == ""
    assert product.url == ""
    assert product.thumb_image == ""
    assert product.department == ""


def test_product_keeps_present_fields():
    product = ProductSummary.from_dict(
        {"title": "Cab", "price": 19.99, "thumb_image": "http://x/1.jpg", "department": "Wine"}
    )

    assert product.title == "Cab"
    assert product.price == 19.99
    assert product.thumb_image == "http://x/1.jpg"
    assert product.department == "Wine"


def test_facet_values_keep_only_named_objects():
    facet = FacetItem.from_dict("color", [{"name": "Red"}, {"other": "x"}, {"name": ""}, "not-an-object"])

    assert facet.values == ("Red",)
    assert facet.to_dict() == {"name": "color", "values": ["Red"]}


def test_non_list_facet_fields_are_skipped():
    payload = {"facet_counts": {"facet_fields": {"price": 12, "brand": {"name": "Acme"}, "size": []}}}

    facets = SearchResponse.from_dict(payload).facets

    assert [facet.name for facet in facets] == ["size"]
    assert facets[0].values == ()


def test_order_follows_raw_payload():
    payload = {
        "response": {"docs": [{"title": "b"}, {"title": "a"}, {"title": "c"}]},
        "facet_counts": {
            "facet_fields": {
                "zeta": [{"name": "2"}, {"name": "1"}],
                "alpha": [{"name": "x"}],
                "mid": [],
            }
        },
    }

    response = SearchResponse.from_dict(payload)

    assert [product.title for product in response.products] == ["b", "a", "c"]
    assert [facet.name for facet in response.facets] == ["zeta", "alpha", "mid"]
    assert response.facets[0].values == ("2", "1")


def test_value_objects_are_immutable():
    product = ProductSummary.from_dict({"title": "Cab"})

    with pytest.raises(dataclasses.FrozenInstanceError):
        product.title = "Merlot"
    assert product == ProductSummary.from_dict({"title": "Cab"})


def test_to_dict_shape():
    response = SearchResponse.from_dict({"response": {"docs": [{"title": "Cab"}]}})

    assert response.to_dict() == {
        "products": [
            {
                "title": "Cab",
                "description": "",
                "price": 0.0,
                "url": "",
                "thumb_image": "",
                "department": "",
            }
        ],
        "facets": [],
    }
