"""
Unit tests for the Order entity and OrderItem value object.
"""

from uuid import uuid4

import pytest

from voucher_order.core.domain import ValidationException
from voucher_order.domains.order.domain import Order, OrderItem, OrderStatus
from voucher_order.domains.voucher.domain import FixedAmountVoucher, PercentDiscountVoucher


@pytest.mark.unit
def test_total_of_empty_order_is_zero():
    order = Order(customer_id=uuid4())

    assert order.total_amount() == 0
    assert order.order_status is OrderStatus.ACCEPTED


@pytest.mark.unit
def test_total_without_voucher(sample_order):
    assert sample_order.total_amount() == 100


@pytest.mark.unit
def test_total_with_percent_voucher(sample_order):
    sample_order.apply_voucher(PercentDiscountVoucher(discount_value=10))

    assert sample_order.total_amount() == 90


@pytest.mark.unit
def test_total_sums_price_times_quantity():
    order = Order(
        customer_id=uuid4(),
        order_items=[
            OrderItem(product_id=uuid4(), product_price=250, quantity=2),
            OrderItem(product_id=uuid4(), product_price=100, quantity=3),
        ],
    )

    assert order.total_amount() == 800

    order.apply_voucher(FixedAmountVoucher(discount_value=300))
    assert order.total_amount() == 500


@pytest.mark.unit
def test_fixed_voucher_larger_than_total_goes_negative():
    order = Order(customer_id=uuid4(), order_items=[OrderItem(product_id=uuid4(), product_price=50, quantity=1)])
    order.apply_voucher(FixedAmountVoucher(discount_value=80))

    assert order.total_amount() == -30


@pytest.mark.unit
def test_total_is_recomputed_after_changes(sample_order):
    voucher = PercentDiscountVoucher(discount_value=50)
    sample_order.apply_voucher(voucher)
    assert sample_order.total_amount() == 50

    sample_order.apply_voucher(FixedAmountVoucher(discount_value=30))
    assert sample_order.total_amount() == 70
    assert sample_order.voucher_id == sample_order.voucher.id


@pytest.mark.unit
def test_order_requires_customer():
    with pytest.raises(ValidationException):
        Order()


@pytest.mark.unit
def test_status_from_string():
    assert Order(customer_id=uuid4(), order_status="shipped").order_status is OrderStatus.SHIPPED


@pytest.mark.unit
def test_change_status_allows_any_transition(sample_order):
    sample_order.change_status(OrderStatus.SETTLED)
    sample_order.change_status(OrderStatus.PAYMENT_REQUIRED)

    assert sample_order.order_status is OrderStatus.PAYMENT_REQUIRED


@pytest.mark.unit
@pytest.mark.parametrize(("price", "quantity"), [(-1, 1), (100, 0)])
def test_order_item_validation(price, quantity):
    with pytest.raises(ValidationException):
        OrderItem(product_id=uuid4(), product_price=price, quantity=quantity)


@pytest.mark.unit
def test_order_items_compare_by_value(product_id):
    assert OrderItem(product_id, 100, 2) == OrderItem(product_id, 100, 2)
    assert OrderItem(product_id, 100, 2).subtotal == 200

