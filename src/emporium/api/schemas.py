"""Pydantic request/response schemas for the storefront API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Shared ---


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"


class MessageResponse(BaseModel):
    message: str


# --- Accounts ---


class SignUpRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "first_name": "Jane",
                    "last_name": "Doe",
                    "email": "jane.doe@example.com",
                    "password": "s3cret-pass",
                    "phone_number": "+1-555-0123",
                }
            ]
        }
    }

    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)
    phone_number: str = Field(..., max_length=20)


class AccountIdResponse(BaseModel):
    account_id: str


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane.doe@example.com", "password": "s3cret-pass"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class AddressResponse(BaseModel):
    address_id: str
    slot: int
    street: str
    city: str
    state: str | None = None
    country: str
    zip_code: str
    is_default: bool = False


class AccountProfile(BaseModel):
    account_id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str
    role: str
    addresses: list[AddressResponse] = []


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    account: AccountProfile


class AddressRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "street": "123 Elm Street",
                    "city": "Springfield",
                    "state": "IL",
                    "country": "US",
                    "zip_code": "62701",
                    "is_default": True,
                }
            ]
        }
    }

    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    state: str | None = Field(None, max_length=100)
    country: str = Field(..., max_length=100)
    zip_code: str = Field(..., max_length=20)
    is_default: bool = False


class AddressIdResponse(BaseModel):
    address_id: str


# --- Catalogue ---


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Walnut Desk Lamp",
                    "description": "Adjustable lamp with a solid walnut base",
                    "price": 89.0,
                    "stock_quantity": 25,
                    "category": "Lighting",
                    "images": ["https://cdn.example.com/lamp-1.jpg"],
                    "discount": 5.0,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float
    stock_quantity: int
    category: str | None = Field(None, max_length=100)
    images: list[str] = []
    discount: float | None = None


class UpdateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 79.0, "stock_quantity": 40}]}}

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = None
    stock_quantity: int | None = None
    category: str | None = Field(None, max_length=100)
    images: list[str] | None = None
    discount: float | None = None


class ProductIdResponse(BaseModel):
    product_id: str


class ProductResponse(BaseModel):
    product_id: str
    name: str
    description: str | None = None
    price: float
    stock_quantity: int
    category: str | None = None
    images: list[str] = []
    discount: float | None = None
    created_at: str | None = None
    updated_at: str | None = None


# --- Cart ---


class AddToCartRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"product_id": "prod-001", "quantity": 2, "unit_price": 10.0}]}
    }

    product_id: str
    quantity: int
    unit_price: float


class CartItemResponse(BaseModel):
    product_id: str
    quantity: int
    unit_price: float
    added_at: str | None = None


class CartResponse(BaseModel):
    cart_id: str
    owner_id: str
    items: list[CartItemResponse] = []
    total: float
    created_at: str | None = None
    updated_at: str | None = None


# --- Orders ---


class OrderItemRequest(BaseModel):
    product_id: str
    name: str | None = Field(None, max_length=255)
    quantity: int
    unit_price: float


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [
                        {"product_id": "prod-001", "name": "Walnut Desk Lamp", "quantity": 2, "unit_price": 5.0},
                        {"product_id": "prod-002", "name": "Linen Shade", "quantity": 1, "unit_price": 10.0},
                    ],
                    "payment_method": "Credit Card",
                }
            ]
        }
    }

    items: list[OrderItemRequest]
    payment_method: str = Field(..., max_length=50)
    discount: float | None = None
    total_price: float | None = None


class OrderIdResponse(BaseModel):
    order_id: str


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "Shipping"}]}}

    status: str | None = None


class RecordPaymentRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"transaction_id": "txn-8842", "succeeded": True}]}}

    transaction_id: str = Field(..., max_length=255)
    succeeded: bool


class OrderItemResponse(BaseModel):
    product_id: str
    name: str | None = None
    quantity: int
    unit_price: float


class OrderResponse(BaseModel):
    order_id: str
    owner_id: str
    items: list[OrderItemResponse] = []
    total_price: float
    discount: float | None = None
    ordered_at: str | None = None
    payment_method: str
    status: str
    transaction_id: str | None = None
    payment_status: str


# --- Wishlists ---


class WishlistRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "prod-001"}]}}

    product_id: str


class WishlistIdResponse(BaseModel):
    wishlist_id: str


class WishlistResponse(BaseModel):
    wishlist_id: str
    owner_id: str
    products: list[str] = []
    created_at: str | None = None


# --- Reviews ---


class SubmitReviewRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"product_id": "prod-001", "rating": 5, "comment": "Warm light, sturdy."}]}
    }

    product_id: str
    rating: int
    comment: str | None = None


class ReviewIdResponse(BaseModel):
    review_id: str


class ReviewResponse(BaseModel):
    review_id: str
    owner_id: str
    product_id: str
    rating: int
    comment: str | None = None
    created_at: str | None = None
