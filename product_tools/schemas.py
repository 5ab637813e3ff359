"""Pydantic schemas declaring tool input and output payloads."""
from __future__ import annotations

from typing import Annotated, Any, Dict, Type

from pydantic import AnyUrl, BaseModel, Field, UrlConstraints
from pydantic.json_schema import GenerateJsonSchema, SkipJsonSchema

MAX_URL_LENGTH = 2083

Url = Annotated[AnyUrl, UrlConstraints(max_length=MAX_URL_LENGTH)]


class SearchInput(BaseModel):
    search_query: str = Field(..., min_length=1, description="Search Query to lookup products")
    filter_query: str | SkipJsonSchema[None] = Field(
        default=None, description="Filter Query to refine search results"
    )


class Product(BaseModel):
    title: str = Field(..., description="Product title")
    description: str = Field(..., description="Product description")
    price: float = Field(..., description="Product price")
    url: Url = Field(..., description="Product URL")
    thumb_image: Url = Field(..., description="Product thumbnail image URL")
    department: str = Field(..., description="Product department")


class Facet(BaseModel):
    name: str = Field(..., description="Name of the facet")
    values: list[str] = Field(..., description="List of values for the facet")


class SearchResult(BaseModel):
    products: list[Product] = Field(..., description="List of products matching the search query")
    facets: list[Facet] = Field(
        ..., description="List of facets available for filtering search results"
    )


class PortableJsonSchema(GenerateJsonSchema):
    """JSON Schema generator that stamps the dialect on the root document."""

    def generate(self, schema, mode="validation"):
        json_schema = super().generate(schema, mode=mode)
        return {"$schema": self.schema_dialect, **json_schema}


def portable_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    return model.model_json_schema(schema_generator=PortableJsonSchema)
