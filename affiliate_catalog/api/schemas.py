"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
Serialized field names follow the persisted JSON document (``createdAt``).
"""

from pydantic import BaseModel, Field

from affiliate_catalog.catalog.models import Product


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Human-readable error message")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(BaseModel):
    """Request to add a product.

    Both fields are optional here so that missing values are reported
    by the catalog with its own message rather than by pydantic.
    """

    link: str | None = Field(default=None, description="Absolute affiliate URL")
    category: str | None = Field(default=None, description="Category label")


class ProductSchema(BaseModel):
    """Product representation."""

    id: str = Field(..., description="Unique product identifier")
    link: str = Field(..., description="Affiliate URL")
    category: str = Field(..., description="Category label")
    created_at: str | None = Field(
        default=None,
        alias="createdAt",
        description="ISO-8601 creation time",
    )

    model_config = {"populate_by_name": True}

    @classmethod
    def from_product(cls, product: Product) -> "ProductSchema":
        """Build the schema from a catalog product."""
        return cls(**product.to_dict())


class ProductMutationResponse(BaseModel):
    """Response for a product add or delete."""

    message: str = Field(..., description="Outcome message")
    product: ProductSchema = Field(..., description="The affected product")


class CategoryListResponse(BaseModel):
    """Category suggestions for filtering and data entry."""

    categories: list[str] = Field(..., description="Sorted category names")


# ============================================================================
# Auth Schemas
# ============================================================================


class LoginRequest(BaseModel):
    """Admin login request."""

    username: str | None = Field(default=None, description="Admin username")
    password: str | None = Field(default=None, description="Admin password")


class LoginResponse(BaseModel):
    """Successful admin login."""

    message: str = Field(..., description="Outcome message")
    token: str = Field(..., description="Session token for the Authorization header")


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
