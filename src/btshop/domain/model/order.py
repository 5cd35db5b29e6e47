"""Order aggregate — a checked-out cart.

The Order is an aggregate root that owns its line items and the
delivery details.  Line prices are locked at checkout.
"""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from btshop.domain.exceptions import ValidationError
from btshop.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class DeliveryType(Enum):
    PICKUP = "pickup"
    COURIER = "courier"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
COURIER_DELIVERY_FEE = Money(Decimal("500"))
MAX_LINE_ITEMS = 50

_ORDER_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits


@dataclass(frozen=True)
class DeliveryInfo:
    type: DeliveryType
    phone: str
    address: str | None = None

    @property
    def fee(self) -> Money:
        if self.type is DeliveryType.COURIER:
            return COURIER_DELIVERY_FEE
        return Money.zero()


@dataclass
class OrderLineItem:
    """Captures the price snapshot of a product at checkout time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


def generate_order_number(now: datetime) -> str:
    """``ORD-<epoch millis>-<4 random chars>``."""
    suffix = "".join(secrets.choice(_ORDER_SUFFIX_ALPHABET) for _ in range(4))
    return f"ORD-{int(now.timestamp() * 1000)}-{suffix}"


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    order_number: str
    customer_name: str
    items: list[OrderLineItem]
    delivery: DeliveryInfo
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        items: list[OrderLineItem],
        delivery: DeliveryInfo,
        now: datetime,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        if not delivery.phone or not delivery.phone.strip():
            raise ValidationError("Contact phone is required")

        if delivery.type is DeliveryType.COURIER and not (
            delivery.address and delivery.address.strip()
        ):
            raise ValidationError("Courier delivery requires an address")

        return Order(
            id=None,
            order_number=generate_order_number(now),
            customer_name=customer_name.strip(),
            items=list(items),
            delivery=delivery,
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus, now: datetime) -> None:
        """Move the order to *new_status*.

        Back-office staff may move an order between any statuses, except
        that a cancelled order stays cancelled.  Returning stock for a
        cancellation must happen *before* calling this (coordinated by the
        application handler).
        """
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        self.status = new_status
        self.updated_at = now

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def delivery_fee(self) -> Money:
        return self.delivery.fee

    @property
    def total(self) -> Money:
        return self.subtotal + self.delivery_fee
