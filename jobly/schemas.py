"""Request bodies. Unknown fields are rejected so services only see known keys."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Upper bound for integer columns (32-bit signed, as in the Postgres INTEGER schema)
MAX_INT = 2147483647


class JobNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1)
    salary: int | None = Field(None, ge=0, le=MAX_INT)
    equity: float | None = Field(None, ge=0, le=1)
    companyHandle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """Mutable job fields; title and id cannot be changed."""
    model_config = ConfigDict(extra="forbid")

    salary: int | None = Field(None, ge=0, le=MAX_INT)
    equity: float | None = Field(None, ge=0, le=1)
    companyHandle: str | None = Field(None, min_length=1, max_length=25)


class CompanyNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    handle: str = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: str = Field(..., min_length=1)
    description: str | None = None
    numEmployees: int | None = Field(None, ge=0, le=MAX_INT)
    logoUrl: str | None = None


class CompanyUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1)
    description: str | None = None
    numEmployees: int | None = Field(None, ge=0, le=MAX_INT)
    logoUrl: str | None = None
