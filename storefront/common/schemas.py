"""
Request body schemas for the cart API.

Bodies arrive with camelCase keys; fields are exposed in snake_case through
aliases. Quantities accept any whole JSON number (3 or 3.0); strings, booleans
and fractional values such as 2.5 are rejected rather than coerced.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator


def _whole_number(value: Any) -> Any:
    # bool is an int subclass; leave it (and strings) for StrictInt to reject
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class AddCartItemRequest(BaseModel):
    # clients may still send a sessionId; the cookie always wins
    model_config = ConfigDict(extra="ignore")

    product_id: StrictInt = Field(..., ge=1, alias="productId", description="Referenced product id")
    quantity: StrictInt = Field(1, ge=1, description="Units to add; merged into an existing line")
    size: Optional[str] = Field(None, max_length=64, description="Size label, e.g. 'M'")
    color: Optional[str] = Field(None, max_length=64, description="Color swatch value")

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_whole_number(cls, value: Any) -> Any:
        return _whole_number(value)


class UpdateCartItemRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    quantity: StrictInt = Field(..., ge=0, description="New quantity; 0 removes the line")

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_whole_number(cls, value: Any) -> Any:
        return _whole_number(value)


def format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into one human-readable message."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f'{err["msg"]} at "{loc}"' if loc else err["msg"])
    return "Validation error: " + "; ".join(parts)
