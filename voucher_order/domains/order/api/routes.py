"""
Order API Routes

FastAPI router for order endpoints.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from voucher_order.domains.order.api.dependencies import (
    get_change_order_status_use_case,
    get_create_order_use_case,
    get_customer_orders_use_case,
    get_delete_order_use_case,
    get_get_order_use_case,
)
from voucher_order.domains.order.api.schemas import (
    OrderCreateRequest,
    OrderResponse,
    OrderStatusUpdateRequest,
)
from voucher_order.domains.order.application.use_cases import (
    ChangeOrderStatusRequest,
    ChangeOrderStatusUseCase,
    CreateOrderRequest,
    CreateOrderUseCase,
    DeleteOrderUseCase,
    GetCustomerOrdersUseCase,
    GetOrderUseCase,
)
from voucher_order.domains.order.domain.value_objects import OrderItem

router = APIRouter(prefix="/orders", tags=["Orders"])

CreateOrderUseCaseDep = Annotated[CreateOrderUseCase, Depends(get_create_order_use_case)]
GetOrderUseCaseDep = Annotated[GetOrderUseCase, Depends(get_get_order_use_case)]
CustomerOrdersUseCaseDep = Annotated[GetCustomerOrdersUseCase, Depends(get_customer_orders_use_case)]
ChangeOrderStatusUseCaseDep = Annotated[ChangeOrderStatusUseCase, Depends(get_change_order_status_use_case)]
DeleteOrderUseCaseDep = Annotated[DeleteOrderUseCase, Depends(get_delete_order_use_case)]


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(request: OrderCreateRequest, use_case: CreateOrderUseCaseDep):
    """Place an order, optionally applying a voucher."""
    order = await use_case.execute(
        CreateOrderRequest(
            customer_id=request.customer_id,
            order_items=[
                OrderItem(product_id=item.product_id, product_price=item.product_price, quantity=item.quantity)
                for item in request.order_items
            ],
            voucher_id=request.voucher_id,
        )
    )
    return OrderResponse.from_entity(order)


@router.get("", response_model=list[OrderResponse])
async def get_customer_orders(customer_id: UUID, use_case: CustomerOrdersUseCaseDep):
    """Orders of a customer."""
    return [OrderResponse.from_entity(order) for order in await use_case.execute(customer_id)]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: UUID, use_case: GetOrderUseCaseDep):
    """Get order by ID, with its total."""
    return OrderResponse.from_entity(await use_case.execute(order_id))


@router.patch("/{order_id}/status", response_model=OrderResponse)
async def change_order_status(
    order_id: UUID,
    request: OrderStatusUpdateRequest,
    use_case: ChangeOrderStatusUseCaseDep,
):
    """Set the status of an order."""
    order = await use_case.execute(ChangeOrderStatusRequest(order_id=order_id, order_status=request.order_status))
    return OrderResponse.from_entity(order)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: UUID, use_case: DeleteOrderUseCaseDep):
    """Delete an order and its items."""
    await use_case.execute(order_id)


__all__ = ["router"]
