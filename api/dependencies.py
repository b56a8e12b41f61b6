"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container is built once per application by create_app() from an
explicit Settings object and stored on app.state, so tests can build
apps with their own settings and override any service dependency.
"""

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    import redis
    from supabase import Client

    from modules.carts.interfaces import ICartService
    from modules.carts.repository import CartRepository
    from modules.notifications.interfaces import INotificationService
    from modules.orders.interfaces import IOrderService
    from modules.payments.interfaces import IPaymentService
    from modules.products.interfaces import IProductService
    from modules.products.repository import ProductRepository
    from modules.users.interfaces import IUserService
    from providers.email import EmailProvider
    from providers.payments import PaymentProvider


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._db: "Client | None" = None
        self._redis: "redis.Redis | None" = None
        self._payment_provider: "PaymentProvider | None" = None
        self._email_provider: "EmailProvider | None" = None
        self._product_repository: "ProductRepository | None" = None
        self._cart_repository: "CartRepository | None" = None
        self._user_service: "IUserService | None" = None
        self._product_service: "IProductService | None" = None
        self._cart_service: "ICartService | None" = None
        self._order_service: "IOrderService | None" = None
        self._payment_service: "IPaymentService | None" = None
        self._notification_service: "INotificationService | None" = None

    # -------------------------------------------------------------------------
    # Infrastructure
    # -------------------------------------------------------------------------

    @property
    def db(self) -> "Client":
        """Get the Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client(self.settings)
        return self._db

    @property
    def redis(self) -> "redis.Redis":
        """Get the Redis client used for login rate limiting."""
        if self._redis is None:
            import redis
            self._redis = redis.Redis.from_url(self.settings.redis_url, decode_responses=True)
        return self._redis

    @property
    def payment_provider(self) -> "PaymentProvider":
        if self._payment_provider is None:
            from providers.payments import StripePaymentProvider
            self._payment_provider = StripePaymentProvider(
                api_key=self.settings.stripe_secret_key,
                webhook_secret=self.settings.stripe_webhook_secret,
            )
        return self._payment_provider

    @property
    def email_provider(self) -> "EmailProvider":
        if self._email_provider is None:
            from providers.email import ResendEmailProvider
            self._email_provider = ResendEmailProvider(
                api_key=self.settings.resend_api_key,
                from_address=self.settings.email_from_address,
                from_name=self.settings.email_from_name,
            )
        return self._email_provider

    # -------------------------------------------------------------------------
    # Shared repositories
    # -------------------------------------------------------------------------

    @property
    def product_repository(self) -> "ProductRepository":
        if self._product_repository is None:
            from modules.products.repository import ProductRepository
            self._product_repository = ProductRepository(self.db)
        return self._product_repository

    @property
    def cart_repository(self) -> "CartRepository":
        if self._cart_repository is None:
            from modules.carts.repository import CartRepository
            self._cart_repository = CartRepository(self.db)
        return self._cart_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.rate_limiter import LoginRateLimiter
            from modules.users.repository import UserRepository
            from modules.users.service import UserService
            self._user_service = UserService(
                repository=UserRepository(self.db),
                rate_limiter=LoginRateLimiter(
                    self.redis,
                    max_attempts=self.settings.login_max_attempts,
                    window_seconds=self.settings.login_window_seconds,
                ),
                settings=self.settings,
            )
        return self._user_service

    @property
    def products(self) -> "IProductService":
        """Get the product service instance."""
        if self._product_service is None:
            from modules.products.service import ProductService
            self._product_service = ProductService(self.product_repository, self.settings)
        return self._product_service

    @property
    def carts(self) -> "ICartService":
        """Get the cart service instance."""
        if self._cart_service is None:
            from modules.carts.service import CartService
            self._cart_service = CartService(self.cart_repository, self.settings)
        return self._cart_service

    @property
    def orders(self) -> "IOrderService":
        """Get the order service instance."""
        if self._order_service is None:
            from modules.orders.repository import OrderRepository
            from modules.orders.service import OrderService
            self._order_service = OrderService(
                repository=OrderRepository(self.db),
                carts=self.cart_repository,
                products=self.product_repository,
                settings=self.settings,
            )
        return self._order_service

    @property
    def payments(self) -> "IPaymentService":
        """Get the payment service instance."""
        if self._payment_service is None:
            from modules.payments.repository import PaymentRepository
            from modules.payments.service import PaymentService
            self._payment_service = PaymentService(
                repository=PaymentRepository(self.db),
                provider=self.payment_provider,
                settings=self.settings,
            )
        return self._payment_service

    @property
    def notifications(self) -> "INotificationService":
        """Get the notification service instance."""
        if self._notification_service is None:
            from modules.notifications.repository import NotificationRepository
            from modules.notifications.service import NotificationService
            self._notification_service = NotificationService(
                repository=NotificationRepository(self.db),
                provider=self.email_provider,
                settings=self.settings,
            )
        return self._notification_service

    def close(self) -> None:
        """Release network clients held by the container."""
        if self._redis is not None:
            self._redis.close()

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.close()
        self.__init__(self.settings)


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the application's settings."""
    return request.app.state.settings


def get_user_service(container: ServiceContainer = Depends(get_container)) -> "IUserService":
    """FastAPI dependency for user service."""
    return container.users


def get_product_service(container: ServiceContainer = Depends(get_container)) -> "IProductService":
    """FastAPI dependency for product service."""
    return container.products


def get_cart_service(container: ServiceContainer = Depends(get_container)) -> "ICartService":
    """FastAPI dependency for cart service."""
    return container.carts


def get_order_service(container: ServiceContainer = Depends(get_container)) -> "IOrderService":
    """FastAPI dependency for order service."""
    return container.orders


def get_payment_service(container: ServiceContainer = Depends(get_container)) -> "IPaymentService":
    """FastAPI dependency for payment service."""
    return container.payments


def get_notification_service(container: ServiceContainer = Depends(get_container)) -> "INotificationService":
    """FastAPI dependency for notification service."""
    return container.notifications
