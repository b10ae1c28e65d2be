"""
Pydantic models for user data.

The API speaks camelCase JSON (``firstName``, ``dateOfBirth``) while
Python code uses snake_case attributes; both names are accepted on
input and the camelCase alias is used for responses.

Every field is optional at the schema level.  Required-field and
format rules are enforced by ``services.user_validation`` so that
errors are reported one at a time, in a fixed order, with the same
``{"error": ...}`` shape as the rest of the API.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A user record as submitted, stored and returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[UUID] = Field(None, examples=["01929a5e-8a3c-7cc1-9c7e-2d5c4b0f7a11"])
    first_name: Optional[str] = Field(None, alias="firstName", examples=["Ann"])
    last_name: Optional[str] = Field(None, alias="lastName", examples=["Smith"])
    email: Optional[str] = Field(None, examples=["ann@example.com"])
    date_of_birth: Optional[datetime] = Field(None, alias="dateOfBirth", examples=["1990-05-17T00:00:00"])


class SimpleError(BaseModel):
    """Error body returned for rejected requests."""

    error: str
