"""
Carts service implementation.
"""

import logging

from shared.config import Settings
from shared.database import run_db
from shared.exceptions import DuplicateEntryError

from .exceptions import CartAlreadyExistsError, CartItemNotFoundError, CartNotFoundError
from .interfaces import ICartService
from .models import AddItemRequest, Cart, CartItem, UpdateQuantityRequest
from .repository import CartRepository

logger = logging.getLogger(__name__)


class CartService(ICartService):
    """
    Cart service with Supabase backend.

    Implements ICartService protocol.
    """

    def __init__(self, repository: CartRepository, settings: Settings):
        self._repository = repository
        self._timeout = settings.db_timeout_seconds

    async def create_cart(self, user_id: str) -> Cart:
        try:
            cart = await run_db(self._repository.create_cart, user_id, timeout=self._timeout)
        except DuplicateEntryError as e:
            raise CartAlreadyExistsError(user_id) from e
        logger.info("Created cart %s for user %s", cart.id, user_id)
        return cart

    async def get_cart(self, user_id: str) -> Cart:
        cart = await run_db(self._repository.get_by_user, user_id, timeout=self._timeout)
        if cart is None:
            raise CartNotFoundError(user_id)
        return cart

    async def add_item(self, user_id: str, request: AddItemRequest) -> Cart:
        cart = await run_db(self._repository.get_by_user, user_id, timeout=self._timeout)
        if cart is None:
            cart = await self.create_cart(user_id)

        cart.items[request.product_id] = CartItem(
            product_id=request.product_id,
            quantity=request.quantity,
            unit_price=request.unit_price,
        )
        return await run_db(self._repository.save_items, cart, timeout=self._timeout)

    async def update_quantity(self, user_id: str, request: UpdateQuantityRequest) -> Cart:
        cart = await self.get_cart(user_id)

        item = cart.items.get(request.product_id)
        if item is None:
            raise CartItemNotFoundError(request.product_id)

        if request.quantity == 0:
            del cart.items[request.product_id]
        else:
            cart.items[request.product_id] = item.model_copy(update={"quantity": request.quantity})

        return await run_db(self._repository.save_items, cart, timeout=self._timeout)
