"""Order placement and ledger endpoints.

``/orders`` has no access control and the guest id sees every order through
``/getOrders``; both match the storefront's current contract.
"""
from fastapi import APIRouter, Depends

from storefront.interfaces.http.deps import get_order_service
from storefront.modules.orders import MissingUserIdError, OrderService
from storefront.schemas import OrderResponse, PlaceOrderRequest

router = APIRouter()


@router.post("/placeOrder", response_model=OrderResponse, summary="Record an order")
async def place_order(
    payload: PlaceOrderRequest,
    order_service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    order = await order_service.place_order(payload.to_input())
    return OrderResponse.from_domain(order)


@router.get("/orders", response_model=list[OrderResponse], summary="Every order in the ledger")
async def list_orders(order_service: OrderService = Depends(get_order_service)) -> list[OrderResponse]:
    orders = await order_service.list_orders()
    return [OrderResponse.from_domain(order) for order in orders]


@router.get("/getOrders", include_in_schema=False)
@router.get("/getOrders/", include_in_schema=False)
async def list_orders_without_user() -> None:
    raise MissingUserIdError("User id is required")


@router.get("/getOrders/{user_id}", response_model=list[OrderResponse], summary="Orders placed by one user")
async def list_user_orders(
    user_id: str,
    order_service: OrderService = Depends(get_order_service),
) -> list[OrderResponse]:
    orders = await order_service.list_orders_for_user(user_id)
    return [OrderResponse.from_domain(order) for order in orders]
