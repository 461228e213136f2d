"""API v1 router composition."""

from fastapi import APIRouter

from preorder.api.v1.endpoints import calendar, catalog, customer, menu, orders

api_router: APIRouter = APIRouter()
api_router.include_router(catalog.router, tags=["catalog"])
api_router.include_router(menu.router, tags=["menu"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
api_router.include_router(customer.router, prefix="/customer", tags=["customer"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
