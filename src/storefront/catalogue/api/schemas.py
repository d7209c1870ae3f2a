"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Category Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Electronics", "description": "Electronic devices and accessories"}]
        }
    }

    name: str = Field(..., max_length=100)
    description: str | None = None


class UpdateCategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"description": "Gadgets, devices and accessories"}]}}

    name: str | None = Field(None, max_length=100)
    description: str | None = None


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CategoryIdResponse(BaseModel):
    category_id: str


# --- Product Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Smartphone X",
                    "description": "Latest smartphone with advanced features",
                    "price": 799.99,
                    "stock": 50,
                    "image_url": "https://example.com/images/smartphone.jpg",
                    "category_id": "5d3b1b0e-7c2f-4f6e-9d55-7a8b2c4e1f00",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    stock: int = Field(0, ge=0)
    image_url: str | None = Field(None, max_length=500)
    category_id: str


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 749.99, "stock": 40}]}}

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    stock: int | None = Field(None, ge=0)
    image_url: str | None = Field(None, max_length=500)
    category_id: str | None = None


class ProductResponse(BaseModel):
    product_id: str
    name: str
    description: str | None = None
    price: float
    stock: int
    image_url: str | None = None
    category_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductIdResponse(BaseModel):
    product_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
