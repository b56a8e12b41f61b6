"""
Orders service implementation.

Orders are built from the caller's cart. Each line is priced from the
product catalog at the moment of ordering and checked against stock.
"""

import logging
from decimal import Decimal

from modules.carts.exceptions import CartNotFoundError
from modules.carts.repository import CartRepository
from modules.products.exceptions import ProductNotFoundError
from modules.products.models import ProductStatus
from modules.products.repository import ProductRepository
from shared.config import Settings
from shared.database import run_db
from shared.models import PaginatedResponse, Pagination

from .exceptions import (
    EmptyCartError,
    InsufficientStockError,
    OrderAccessDeniedError,
    OrderNotFoundError,
    ProductUnavailableError,
)
from .interfaces import IOrderService
from .models import CreateOrderRequest, Order, OrderItem, OrderStatus
from .repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderService(IOrderService):
    """
    Order service with Supabase backend.

    Implements IOrderService protocol. Reads carts and products through
    their repositories directly rather than through their services.
    """

    def __init__(
        self,
        repository: OrderRepository,
        carts: CartRepository,
        products: ProductRepository,
        settings: Settings,
    ):
        self._repository = repository
        self._carts = carts
        self._products = products
        self._timeout = settings.db_timeout_seconds

    async def create_order(self, user_id: str, request: CreateOrderRequest) -> Order:
        cart = await run_db(self._carts.get_by_user, user_id, timeout=self._timeout)
        if cart is None:
            raise CartNotFoundError(user_id)
        if not cart.items:
            raise EmptyCartError()

        products = await run_db(
            self._products.get_by_ids, list(cart.items), timeout=self._timeout
        )

        items: list[OrderItem] = []
        for product_id, line in cart.items.items():
            product = products.get(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            if product.status != ProductStatus.ACTIVE:
                raise ProductUnavailableError(product_id)
            if product.stock_quantity < line.quantity:
                raise InsufficientStockError(product_id, line.quantity, product.stock_quantity)
            items.append(OrderItem(product_id=product_id, quantity=line.quantity, unit_price=product.price))

        total = sum((item.unit_price * item.quantity for item in items), Decimal("0"))

        order = await run_db(
            self._repository.create_order,
            user_id,
            request.shipping_address,
            total,
            items,
            timeout=self._timeout,
        )

        for item in items:
            product = products[item.product_id]
            updated = await run_db(
                self._products.decrement_stock,
                product.id,
                product.stock_quantity,
                item.quantity,
                timeout=self._timeout,
            )
            if not updated:
                logger.warning(
                    "Stock for product %s changed while placing order %s", product.id, order.id
                )

        cart.items.clear()
        await run_db(self._carts.save_items, cart, timeout=self._timeout)

        logger.info("Created order %s for user %s total=%s", order.id, user_id, order.total_amount)
        return order

    async def get_order(self, order_id: str, user_id: str) -> Order:
        order = await run_db(self._repository.get_by_id, order_id, timeout=self._timeout)
        if order is None:
            raise OrderNotFoundError(order_id)
        if order.customer_id != user_id:
            raise OrderAccessDeniedError(order_id, user_id)
        return order

    async def list_orders(self, user_id: str, pagination: Pagination) -> PaginatedResponse[Order]:
        orders, total = await run_db(
            self._repository.list_by_customer, user_id, pagination, timeout=self._timeout
        )
        return PaginatedResponse[Order](
            items=orders,
            total=total,
            page=pagination.page,
            page_size=pagination.page_size,
        )

    async def update_order_status(self, order_id: str, user_id: str, status: OrderStatus) -> Order:
        await self.get_order(order_id, user_id)

        order = await run_db(self._repository.update_status, order_id, status, timeout=self._timeout)
        if order is None:
            raise OrderNotFoundError(order_id)

        logger.info("Order %s moved to %s", order_id, status.value)
        return order
