from fastapi import APIRouter

from voucher_order.domains.customer.api.routes import router as customer_router
from voucher_order.domains.order.api.routes import router as order_router
from voucher_order.domains.voucher.api.routes import router as voucher_router

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(customer_router)
api_router.include_router(voucher_router)
api_router.include_router(order_router)
