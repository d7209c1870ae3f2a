"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "janesmith",
                    "email": "jane@example.com",
                    "password": "s3cret-pass!",
                    "name": "Jane Smith",
                }
            ]
        }
    }

    username: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)
    name: str | None = Field(None, max_length=100)


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane@example.com", "password": "s3cret-pass!"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class UpdateUserRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Jane Q. Smith", "role": "admin"}]}}

    name: str | None = Field(None, max_length=100)
    username: str | None = Field(None, min_length=3, max_length=50)
    email: str | None = Field(None, max_length=254)
    password: str | None = Field(None, max_length=128)
    role: str | None = None


# --- Response Schemas ---


class UserResponse(BaseModel):
    user_id: str
    username: str
    email: str
    name: str | None = None
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserIdResponse(BaseModel):
    user_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
