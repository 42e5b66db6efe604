"""
Domain errors raised by the order service.

Every failure the service reports on purpose is one of the classes below, so
callers can branch on the kind of failure instead of parsing messages.
Infrastructure errors (database, user service transport) are not wrapped.
"""


class OrderServiceError(Exception):
    """Base class for order domain failures.

    Attributes:
        code: Stable identifier for the failure kind.
    """

    code = "order_service_error"


class UserNotFoundError(OrderServiceError):
    """Raised when an order references a user the user service does not know.

    Attributes:
        user_id: The identifier that was looked up.
    """

    code = "user_not_found"

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


class OrderNotFoundError(OrderServiceError):
    """Raised when an operation targets an order that is not stored.

    Attributes:
        order_id: The identifier that was requested.
    """

    code = "order_not_found"

    def __init__(self, order_id: int) -> None:
        self.order_id = order_id
        super().__init__(f"Order with ID {order_id} not found")
