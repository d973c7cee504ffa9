"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the storefront's validation rules
(email and phone formats, non-negative prices, 1-5 ratings) and match the
field names of the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["Lighting", "Furniture", "Textiles", "Kitchen", "Garden"]
PAYMENT_METHODS = ["Credit Card", "PayPal", "Bank Transfer"]

# ---------- Accounts ----------


def valid_email() -> str:
    """Unique emails: one @, no spaces, a dotted domain."""
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}"


def valid_phone() -> str:
    """Phones matching ^\\+?[\\d\\s\\-()]+$, unique enough for a load run."""
    return f"+1-{random.randint(200, 999)}-{random.randint(200, 999)}-{random.randint(1000, 9999)}"


def signup_data(password: str) -> dict:
    return {
        "first_name": fake.first_name()[:100],
        "last_name": fake.last_name()[:100],
        "email": valid_email(),
        "password": password,
        "phone_number": valid_phone(),
    }


def address_data() -> dict:
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "country": "US",
        "zip_code": fake.zipcode()[:20],
        "is_default": random.random() < 0.5,
    }


# ---------- Catalogue ----------


def product_data() -> dict:
    return {
        "name": f"{fake.color_name()} {fake.word().title()} {random.choice(['Lamp', 'Chair', 'Rug', 'Mug'])}"[:255],
        "description": fake.sentence(nb_words=12),
        "price": round(random.uniform(5, 500), 2),
        "stock_quantity": random.randint(0, 200),
        "category": random.choice(CATEGORIES),
        "images": [fake.image_url() for _ in range(random.randint(0, 3))],
    }


# ---------- Cart & Orders ----------


def cart_item_data(product: dict) -> dict:
    return {
        "product_id": product["product_id"],
        "quantity": random.randint(1, 3),
        "unit_price": product["price"],
    }


def order_data(cart: dict) -> dict:
    """PlaceOrderRequest built from a cart body; the total is left to the server."""
    return {
        "items": [
            {"product_id": i["product_id"], "quantity": i["quantity"], "unit_price": i["unit_price"]}
            for i in cart["items"]
        ],
        "payment_method": random.choice(PAYMENT_METHODS),
    }


# ---------- Reviews ----------


def review_data(product_id: str) -> dict:
    return {
        "product_id": product_id,
        "rating": random.choices([1, 2, 3, 4, 5], weights=[1, 1, 2, 4, 4])[0],
        "comment": fake.paragraph(nb_sentences=2),
    }
