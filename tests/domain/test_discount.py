"""Unit tests for the Discount value object."""

from datetime import timedelta
from decimal import Decimal

import pytest

from btshop.domain.exceptions import ValidationError
from btshop.domain.model.discount import Discount, DiscountType


class TestDiscountCreate:

    def test_defaults_to_active(self):
        d = Discount.create(DiscountType.PERCENTAGE, Decimal("10"))
        assert d.is_active is True

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Discount.create(DiscountType.FIXED, Decimal("-1"))

    def test_percentage_over_hundred_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed 100"):
            Discount.create(DiscountType.PERCENTAGE, Decimal("101"))

    def test_large_fixed_value_allowed(self):
        d = Discount.create(DiscountType.FIXED, Decimal("100000"))
        assert d.value == Decimal("100000")

    def test_start_after_end_rejected(self, now):
        with pytest.raises(ValidationError, match="start date"):
            Discount.create(
                DiscountType.PERCENTAGE, Decimal("10"),
                start_date=now, end_date=now - timedelta(days=1),
            )


class TestDiscountInEffect:

    def test_inactive_never_in_effect(self, now):
        d = Discount(DiscountType.PERCENTAGE, Decimal("10"), is_active=False)
        assert d.is_in_effect(now) is False

    def test_unbounded_active(self, now):
        d = Discount(DiscountType.PERCENTAGE, Decimal("10"), is_active=True)
        assert d.is_in_effect(now) is True

    def test_not_yet_started(self, now):
        d = Discount(
            DiscountType.PERCENTAGE, Decimal("10"), is_active=True,
            start_date=now + timedelta(hours=1),
        )
        assert d.is_in_effect(now) is False


class TestDiscountLabel:

    def test_percentage_label(self):
        assert Discount(DiscountType.PERCENTAGE, Decimal("20")).label == "-20%"

    def test_fixed_label(self):
        assert Discount(DiscountType.FIXED, Decimal("1500.00")).label == "-1500 ₽"
