"""Normalized search result value objects.

Raw backend payloads are Solr-shaped::

    {"response": {"docs": [...]}, "facet_counts": {"facet_fields": {...}}}

Everything here tolerates missing sections and fields: absent docs or facets
become empty sequences, absent product fields become ``""`` or ``0.0``.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


def _mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class ProductSummary:
    """Essential product details shown to the caller."""

    title: str
    description: str
    price: float
    url: str
    thumb_image: str
    department: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ProductSummary":
        data = _mapping(data)
        return cls(
            title=data.get("title") or "",
            description=data.get("description") or "",
            price=data.get("price") or 0.0,
            url=data.get("url") or "",
            thumb_image=data.get("thumb_image") or "",
            department=data.get("department") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "url": self.url,
            "thumb_image": self.thumb_image,
            "department": self.department,
        }


@dataclass(frozen=True)
class FacetItem:
    """A facet name with the values available for filtering."""

    name: str
    values: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, name: str, data: List[Any]) -> "FacetItem":
        # Only {"name": ...} entries with a non-empty name survive.
        values = tuple(
            value["name"] for value in data if isinstance(value, Mapping) and value.get("name")
        )
        return cls(name=name, values=values)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "values": list(self.values)}


@dataclass(frozen=True)
class SearchResponse:
    products: Tuple[ProductSummary, ...] = ()
    facets: Tuple[FacetItem, ...] = ()

    @classmethod
    def from_dict(cls, response_dict: Any) -> "SearchResponse":
        response_dict = _mapping(response_dict)
        facet_fields = _mapping(_mapping(response_dict.get("facet_counts")).get("facet_fields"))
        data = _mapping(response_dict.get("response"))

        facets = tuple(
            FacetItem.from_dict(key, values)
            for key, values in facet_fields.items()
            if isinstance(values, list)
        )
        products = tuple(ProductSummary.from_dict(doc) for doc in data.get("docs") or [])
        return cls(products=products, facets=facets)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "products": [product.to_dict() for product in self.products],
            "facets": [facet.to_dict() for facet in self.facets],
        }
