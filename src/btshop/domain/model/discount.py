"""Discount value object — a time-bounded price reduction on a product."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from btshop.domain.exceptions import ValidationError


class DiscountType(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class Discount:
    """A discount attached to a product.

    ``start_date`` and ``end_date`` are optional; a missing bound leaves
    that side of the window open.  Both bounds are inclusive.
    """

    type: DiscountType
    value: Decimal
    is_active: bool = False
    start_date: datetime | None = None
    end_date: datetime | None = None

    @staticmethod
    def create(
        type: DiscountType,
        value: Decimal,
        is_active: bool = True,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> Discount:
        """Create a new discount, enforcing all invariants.

        The plain constructor stays lenient so persisted records load
        without re-validation.
        """
        if value < Decimal("0"):
            raise ValidationError("Discount value cannot be negative")
        if type is DiscountType.PERCENTAGE and value > Decimal("100"):
            raise ValidationError(
                f"Percentage discount cannot exceed 100, got {value}"
            )
        if start_date is not None and end_date is not None and start_date > end_date:
            raise ValidationError("Discount start date must not be after its end date")
        return Discount(
            type=type,
            value=value,
            is_active=is_active,
            start_date=start_date,
            end_date=end_date,
        )

    def is_in_effect(self, now: datetime) -> bool:
        """True when the discount is switched on and *now* falls in its window."""
        if not self.is_active:
            return False
        if self.start_date is not None and now < self.start_date:
            return False
        if self.end_date is not None and now > self.end_date:
            return False
        return True

    @property
    def label(self) -> str:
        """Badge text, e.g. ``-20%`` or ``-1500 ₽``."""
        if self.type is DiscountType.PERCENTAGE:
            return f"-{self.value.normalize():f}%"
        return f"-{self.value.normalize():f} ₽"
