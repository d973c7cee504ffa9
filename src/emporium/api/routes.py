"""FastAPI routes for the storefront.

Each route translates between Pydantic schemas (external contract) and Protean
commands or repository reads. The caller's identity comes from the bearer
credential; cart, order and wishlist commands run under that identity's lock.
"""

import json

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from emporium.account.account import Account
from emporium.account.addresses import AddAddress, DeleteAddresses, EditHomeAddress, EditWorkAddress
from emporium.account.authentication import authenticate
from emporium.account.registration import SignUp
from emporium.api.dependencies import current_identity
from emporium.api.schemas import (
    AccountIdResponse,
    AccountProfile,
    AddProductRequest,
    AddressIdResponse,
    AddressRequest,
    AddressResponse,
    AddToCartRequest,
    CartItemResponse,
    CartResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    OrderIdResponse,
    OrderItemResponse,
    OrderResponse,
    PlaceOrderRequest,
    ProductIdResponse,
    ProductResponse,
    RecordPaymentRequest,
    ReviewIdResponse,
    ReviewResponse,
    SignUpRequest,
    StatusResponse,
    SubmitReviewRequest,
    UpdateOrderStatusRequest,
    UpdateProductRequest,
    WishlistIdResponse,
    WishlistRequest,
    WishlistResponse,
)
from emporium.cart.cart import ShoppingCart
from emporium.cart.items import AddToCart, ClearCart, RemoveFromCart
from emporium.catalogue.management import AddProduct, DeleteProduct, UpdateProduct
from emporium.catalogue.product import Product
from emporium.order.cancellation import CancelOrder
from emporium.order.order import Order
from emporium.order.payment import RecordPayment
from emporium.order.placement import PlaceOrder
from emporium.order.status import UpdateOrderStatus
from emporium.review.management import DeleteReview, SubmitReview
from emporium.review.review import Review
from emporium.shared.locks import process_exclusively
from emporium.wishlist.management import AddToWishlist, DeleteWishlist, RemoveFromWishlist
from emporium.wishlist.wishlist import Wishlist

auth_router = APIRouter(prefix="/auth/user", tags=["auth"])
product_router = APIRouter(prefix="/product", tags=["products"])
cart_router = APIRouter(prefix="/cart", tags=["cart"])
order_router = APIRouter(prefix="/order", tags=["orders"])
address_router = APIRouter(prefix="/address", tags=["addresses"])
wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlists"])
review_router = APIRouter(prefix="/review", tags=["reviews"])


def _timestamp(value) -> str | None:
    return value.isoformat() if value else None


# ---------------------------------------------------------------------------
# Response builders
# ---------------------------------------------------------------------------
def _profile(account: Account) -> AccountProfile:
    return AccountProfile(
        account_id=str(account.id),
        first_name=account.first_name,
        last_name=account.last_name,
        email=account.email,
        phone_number=account.phone_number,
        role=account.role,
        addresses=[
            AddressResponse(
                address_id=str(a.id),
                slot=a.slot,
                street=a.street,
                city=a.city,
                state=a.state,
                country=a.country,
                zip_code=a.zip_code,
                is_default=bool(a.is_default),
            )
            for a in sorted(account.addresses, key=lambda a: a.slot)
        ],
    )


def _product(product: Product) -> ProductResponse:
    return ProductResponse(
        product_id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        stock_quantity=product.stock_quantity,
        category=product.category,
        images=product.image_urls,
        discount=product.discount,
        created_at=_timestamp(product.created_at),
        updated_at=_timestamp(product.updated_at),
    )


def _cart(cart: ShoppingCart) -> CartResponse:
    return CartResponse(
        cart_id=str(cart.id),
        owner_id=str(cart.owner_id),
        items=[
            CartItemResponse(
                product_id=str(i.product_id),
                quantity=i.quantity,
                unit_price=i.unit_price,
                added_at=_timestamp(i.added_at),
            )
            for i in cart.items
        ],
        total=cart.total,
        created_at=_timestamp(cart.created_at),
        updated_at=_timestamp(cart.updated_at),
    )


def _order(order: Order) -> OrderResponse:
    return OrderResponse(
        order_id=str(order.id),
        owner_id=str(order.owner_id),
        items=[
            OrderItemResponse(
                product_id=str(i.product_id),
                name=i.name,
                quantity=i.quantity,
                unit_price=i.unit_price,
            )
            for i in order.items
        ],
        total_price=order.total_price,
        discount=order.discount,
        ordered_at=_timestamp(order.ordered_at),
        payment_method=order.payment_method,
        status=order.status,
        transaction_id=order.transaction_id,
        payment_status=order.payment_status,
    )


def _review(review: Review) -> ReviewResponse:
    return ReviewResponse(
        review_id=str(review.id),
        owner_id=str(review.owner_id),
        product_id=str(review.product_id),
        rating=review.rating,
        comment=review.comment,
        created_at=_timestamp(review.created_at),
    )


def _cart_of(identity: str) -> ShoppingCart:
    cart = current_domain.repository_for(ShoppingCart).for_owner(identity)
    if cart is None:
        raise ObjectNotFoundError({"cart": ["Cart not found"]})
    return cart


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
@auth_router.post("/signup", status_code=201, response_model=AccountIdResponse)
async def sign_up(body: SignUpRequest) -> AccountIdResponse:
    command = SignUp(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
        phone_number=body.phone_number,
    )
    account_id = current_domain.process(command, asynchronous=False)
    return AccountIdResponse(account_id=account_id)


@auth_router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest) -> LoginResponse:
    account, token = authenticate(body.email, body.password)
    return LoginResponse(token=token, account=_profile(account))


@address_router.post("/add", status_code=201, response_model=AddressIdResponse)
async def add_address(body: AddressRequest, identity: str = Depends(current_identity)) -> AddressIdResponse:
    command = AddAddress(account_id=identity, **body.model_dump())
    address_id = current_domain.process(command, asynchronous=False)
    return AddressIdResponse(address_id=address_id)


@address_router.put("/home", response_model=StatusResponse)
async def edit_home_address(body: AddressRequest, identity: str = Depends(current_identity)) -> StatusResponse:
    current_domain.process(EditHomeAddress(account_id=identity, **body.model_dump()), asynchronous=False)
    return StatusResponse()


@address_router.put("/work", response_model=StatusResponse)
async def edit_work_address(body: AddressRequest, identity: str = Depends(current_identity)) -> StatusResponse:
    current_domain.process(EditWorkAddress(account_id=identity, **body.model_dump()), asynchronous=False)
    return StatusResponse()


@address_router.delete("/delete", response_model=StatusResponse)
async def delete_addresses(identity: str = Depends(current_identity)) -> StatusResponse:
    current_domain.process(DeleteAddresses(account_id=identity), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    return [_product(p) for p in current_domain.repository_for(Product).list_all()]


@product_router.get("/search", response_model=list[ProductResponse])
async def search_products(category: str | None = None, name: str | None = None) -> list[ProductResponse]:
    if not category and not name:
        raise ValidationError({"search": ["Please provide either category or name to search"]})
    return [_product(p) for p in current_domain.repository_for(Product).search(category=category, name=name)]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product(current_domain.repository_for(Product).get(product_id))


@product_router.post("/add", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest, identity: str = Depends(current_identity)) -> ProductIdResponse:
    command = AddProduct(
        requested_by=identity,
        name=body.name,
        description=body.description,
        price=body.price,
        stock_quantity=body.stock_quantity,
        category=body.category,
        images=json.dumps(body.images),
        discount=body.discount,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=product_id)


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(
    product_id: str, body: UpdateProductRequest, identity: str = Depends(current_identity)
) -> StatusResponse:
    command = UpdateProduct(
        requested_by=identity,
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        stock_quantity=body.stock_quantity,
        category=body.category,
        images=json.dumps(body.images) if body.images is not None else None,
        discount=body.discount,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str, identity: str = Depends(current_identity)) -> StatusResponse:
    current_domain.process(DeleteProduct(requested_by=identity, product_id=product_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
@cart_router.post("", response_model=CartResponse)
async def add_to_cart(body: AddToCartRequest, identity: str = Depends(current_identity)) -> CartResponse:
    command = AddToCart(
        owner_id=identity,
        product_id=body.product_id,
        quantity=body.quantity,
        unit_price=body.unit_price,
    )
    process_exclusively(identity, command)
    return _cart(_cart_of(identity))


@cart_router.get("", response_model=CartResponse)
async def view_cart(identity: str = Depends(current_identity)) -> CartResponse:
    return _cart(_cart_of(identity))


@cart_router.delete("/clear", response_model=CartResponse)
async def clear_cart(identity: str = Depends(current_identity)) -> CartResponse:
    process_exclusively(identity, ClearCart(owner_id=identity))
    return _cart(_cart_of(identity))


@cart_router.delete("/{product_id}", response_model=CartResponse)
async def remove_from_cart(product_id: str, identity: str = Depends(current_identity)) -> CartResponse:
    process_exclusively(identity, RemoveFromCart(owner_id=identity, product_id=product_id))
    return _cart(_cart_of(identity))


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest, identity: str = Depends(current_identity)) -> OrderIdResponse:
    command = PlaceOrder(
        owner_id=identity,
        items=json.dumps([item.model_dump() for item in body.items]),
        payment_method=body.payment_method,
        discount=body.discount,
        total_price=body.total_price,
    )
    order_id = process_exclusively(identity, command)
    return OrderIdResponse(order_id=order_id)


@order_router.get("", response_model=list[OrderResponse], responses={404: {"model": MessageResponse}})
async def list_orders(identity: str = Depends(current_identity)):
    orders = current_domain.repository_for(Order).for_owner(identity)
    if not orders:
        return JSONResponse(status_code=404, content={"message": "No orders found for this user"})
    return [_order(o) for o in orders]


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, identity: str = Depends(current_identity)
) -> StatusResponse:
    command = UpdateOrderStatus(requested_by=identity, order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.put("/{order_id}/payment", response_model=StatusResponse)
async def record_payment(
    order_id: str, body: RecordPaymentRequest, identity: str = Depends(current_identity)
) -> StatusResponse:
    command = RecordPayment(
        requested_by=identity,
        order_id=order_id,
        transaction_id=body.transaction_id,
        succeeded=body.succeeded,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def cancel_order(order_id: str, identity: str = Depends(current_identity)) -> StatusResponse:
    process_exclusively(identity, CancelOrder(owner_id=identity, order_id=order_id))
    return StatusResponse()


# ---------------------------------------------------------------------------
# Wishlists
# ---------------------------------------------------------------------------
@wishlist_router.post("", status_code=201, response_model=WishlistIdResponse)
async def add_to_wishlist(body: WishlistRequest, identity: str = Depends(current_identity)) -> WishlistIdResponse:
    wishlist_id = process_exclusively(identity, AddToWishlist(owner_id=identity, product_id=body.product_id))
    return WishlistIdResponse(wishlist_id=wishlist_id)


@wishlist_router.get("", response_model=WishlistResponse)
async def view_wishlist(identity: str = Depends(current_identity)) -> WishlistResponse:
    wishlist = current_domain.repository_for(Wishlist).for_owner(identity)
    if wishlist is None:
        raise ObjectNotFoundError({"wishlist": ["No wishlist found for this user"]})
    return WishlistResponse(
        wishlist_id=str(wishlist.id),
        owner_id=str(wishlist.owner_id),
        products=wishlist.product_ids,
        created_at=_timestamp(wishlist.created_at),
    )


@wishlist_router.delete("/products/{product_id}", response_model=StatusResponse)
async def remove_from_wishlist(product_id: str, identity: str = Depends(current_identity)) -> StatusResponse:
    process_exclusively(identity, RemoveFromWishlist(owner_id=identity, product_id=product_id))
    return StatusResponse()


@wishlist_router.delete("/{wishlist_id}", response_model=StatusResponse)
async def delete_wishlist(wishlist_id: str, identity: str = Depends(current_identity)) -> StatusResponse:
    current_domain.process(DeleteWishlist(requested_by=identity, wishlist_id=wishlist_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------
@review_router.post("", status_code=201, response_model=ReviewIdResponse)
async def submit_review(body: SubmitReviewRequest, identity: str = Depends(current_identity)) -> ReviewIdResponse:
    command = SubmitReview(
        owner_id=identity,
        product_id=body.product_id,
        rating=body.rating,
        comment=body.comment,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return ReviewIdResponse(review_id=review_id)


@review_router.get("/product/{product_id}", response_model=list[ReviewResponse])
async def list_reviews(product_id: str) -> list[ReviewResponse]:
    return [_review(r) for r in current_domain.repository_for(Review).for_product(product_id)]


@review_router.delete("/{review_id}", response_model=StatusResponse)
async def delete_review(review_id: str, identity: str = Depends(current_identity)) -> StatusResponse:
    current_domain.process(DeleteReview(requested_by=identity, review_id=review_id), asynchronous=False)
    return StatusResponse()
