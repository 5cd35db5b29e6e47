"""Domain-to-DTO mapping shared by the query handlers."""

from __future__ import annotations

from datetime import datetime

from btshop.application.dto import (
    CartDTO,
    CartLineDTO,
    OrderDTO,
    OrderLineItemDTO,
    ProductDTO,
    ReviewDTO,
)
from btshop.domain.model.cart import Cart
from btshop.domain.model.category import ProductCategory
from btshop.domain.model.order import Order
from btshop.domain.model.product import Product
from btshop.domain.model.review import Review
from btshop.domain.service.pricing import (
    calculate_final_price,
    classify_stock,
    has_active_discount,
    stock_status_of,
)


def product_to_dto(
    product: Product,
    now: datetime,
    category: ProductCategory | None = None,
) -> ProductDTO:
    discounted = has_active_discount(product, now)
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        final_price=str(calculate_final_price(product, now).rounded()),
        has_discount=discounted,
        discount_label=product.discount.label if discounted else None,
        stock_status=stock_status_of(product).value,
        stock_quantity=product.stock_quantity,
        category=category.name if category else None,
        brand=product.brand,
        rating=product.rating,
        review_count=product.review_count,
        is_featured=product.is_featured,
        is_active=product.is_active,
    )


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=[
            CartLineDTO(
                product_id=line.product_id,
                name=line.name,
                quantity=line.quantity,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
                stock_quantity=line.stock_quantity,
                stock_status=classify_stock(line.stock_quantity).value,
            )
            for line in cart.lines
        ],
        item_count=cart.item_count,
        subtotal=str(cart.subtotal),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,
        customer_name=order.customer_name,
        status=order.status.value,
        delivery_type=order.delivery.type.value,
        phone=order.delivery.phone,
        address=order.delivery.address,
        items=[
            OrderLineItemDTO(
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        subtotal=str(order.subtotal),
        delivery_fee=str(order.delivery_fee),
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def review_to_dto(review: Review) -> ReviewDTO:
    return ReviewDTO(
        id=review.id,  # type: ignore[arg-type]
        product_id=review.product_id,
        author=review.author,
        rating=review.rating,
        text=review.text,
        order_id=review.order_id,
        created_at=review.created_at.strftime("%Y-%m-%d"),
    )
