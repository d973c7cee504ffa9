"""Per-user state tracking for Locust load test scenarios.

Each Locust user keeps its own state; nothing is shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """A simulated shopper's credential and the ids their journey produced."""

    email: str | None = None
    token: str | None = None
    account_id: str | None = None
    address_count: int = 0
    browsed: list[dict] = field(default_factory=list)
    cart: dict | None = None
    order_ids: list[str] = field(default_factory=list)
    review_ids: list[str] = field(default_factory=list)


@dataclass
class AdminState:
    token: str | None = None
    product_ids: list[str] = field(default_factory=list)
