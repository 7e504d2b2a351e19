from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from storefront.client.adapter import join_cart, resolved_items, unresolved_items
from storefront.client.api import StorefrontAPI, TransportError
from storefront.client.context import CartContext, CheckoutContext, ProductContext, UserContext
from storefront.client.models import DisplayCartItem, UnresolvedCartItem
from storefront.core.logger import get_logger

logger = get_logger(__name__)

CHECKOUT_PATH = "/cart/checkout"
DELETE_SUCCESS_MESSAGE = "Item successfully Deleted"
CONFIRM_DELETE_MESSAGE = "Are you sure you want to Remove the item from Cart"
TRANSPORT_ERROR_NOTICE = "Could not reach the server. Please try again."


class DeleteState(str, Enum):
    IDLE = "idle"
    CONFIRM_PENDING = "confirm_pending"
    DELETING = "deleting"


class DeleteOutcome(str, Enum):
    DELETED = "deleted"
    SERVER_ERROR = "server_error"
    TRANSPORT_ERROR = "transport_error"
    NOTHING_PENDING = "nothing_pending"


class FetchOutcome(str, Enum):
    LOADED = "loaded"
    EMPTY = "empty"
    NOT_READY = "not_ready"
    SERVER_ERROR = "server_error"
    TRANSPORT_ERROR = "transport_error"


@dataclass
class ConfirmationState:
    state: DeleteState = DeleteState.IDLE
    pending_delete_id: Optional[str] = None


class CartController:
    """Drives the cart page: loading, deleting with confirmation, and the running total.

    All state lives on the injected contexts and on this object; the
    presentation layer reads `cart`, `total`, `confirmation`,
    `show_success_modal`, `alert_message` and `error_notice`.
    """

    def __init__(
        self,
        api: StorefrontAPI,
        user: UserContext,
        products: ProductContext,
        cart: CartContext,
        checkout: CheckoutContext,
        navigate: Optional[Callable[[str], None]] = None,
    ):
        self.api = api
        self.user = user
        self.products = products
        self.cart_context = cart
        self.checkout = checkout
        self.navigate = navigate or (lambda path: None)

        self.confirmation = ConfirmationState()
        self.unresolved: List[UnresolvedCartItem] = []
        self.show_success_modal = False
        self.alert_message: Optional[str] = None
        self.error_notice: Optional[str] = None

        self._total_for: Optional[List[DisplayCartItem]] = None
        self._total: float = 0
        self.refresh_total()

    @property
    def cart(self) -> List[DisplayCartItem]:
        return self.cart_context.cart

    def _set_cart(self, items: List[DisplayCartItem]) -> None:
        self.cart_context.cart = items
        self.refresh_total()

    # Total

    @property
    def total(self) -> float:
        return self.refresh_total()

    def refresh_total(self) -> float:
        """Recompute the total when the cart list has been replaced, and publish it to checkout."""
        cart = self.cart_context.cart
        if cart is not self._total_for:
            self._total_for = cart
            self._total = sum(item.price * item.quantity for item in cart) if cart else 0
            self.checkout.total_bill = self._total
        return self._total

    # Fetch

    @property
    def is_ready(self) -> bool:
        return self.user.is_authenticated and self.products.products is not None

    def fetch_cart(self) -> FetchOutcome:
        if not self.is_ready:
            return FetchOutcome.NOT_READY

        try:
            response = self.api.get_cart(self.user.user_id, self.user.token)
        except TransportError:
            self.error_notice = TRANSPORT_ERROR_NOTICE
            return FetchOutcome.TRANSPORT_ERROR

        if not response.ok:
            self.alert_message = response.error or f"Request failed with status {response.status_code}"
            return FetchOutcome.SERVER_ERROR

        data = response.data or {}
        if data.get("message"):
            return FetchOutcome.EMPTY

        joined = join_cart(data, self.products.products)
        self.unresolved = unresolved_items(joined)
        self._set_cart(resolved_items(joined))
        self.error_notice = None
        return FetchOutcome.LOADED

    # Delete with confirmation

    def request_delete(self, item_id: str) -> None:
        self.confirmation = ConfirmationState(DeleteState.CONFIRM_PENDING, item_id)

    def cancel_delete(self) -> None:
        self.confirmation = ConfirmationState()

    def confirm_delete(self) -> DeleteOutcome:
        if self.confirmation.state is not DeleteState.CONFIRM_PENDING:
            return DeleteOutcome.NOTHING_PENDING

        item_id = self.confirmation.pending_delete_id
        self.confirmation = ConfirmationState(DeleteState.DELETING, item_id)
        try:
            return self.delete_item(item_id)
        finally:
            self.confirmation = ConfirmationState()

    def delete_item(self, item_id: str) -> DeleteOutcome:
        try:
            response = self.api.delete_item(self.user.user_id, self.user.token, item_id)
        except TransportError:
            self.error_notice = TRANSPORT_ERROR_NOTICE
            return DeleteOutcome.TRANSPORT_ERROR

        if response.ok:
            self._set_cart([item for item in self.cart if item.id != item_id])
            self.show_success_modal = True
            self.error_notice = None
            logger.info("cart item deleted", item_id=item_id)
            return DeleteOutcome.DELETED

        self.alert_message = response.error or f"Request failed with status {response.status_code}"
        return DeleteOutcome.SERVER_ERROR

    @property
    def confirm_prompt(self) -> Optional[str]:
        if self.confirmation.state is DeleteState.CONFIRM_PENDING:
            return CONFIRM_DELETE_MESSAGE
        return None

    @property
    def success_message(self) -> Optional[str]:
        return DELETE_SUCCESS_MESSAGE if self.show_success_modal else None

    def dismiss_success_modal(self) -> None:
        self.show_success_modal = False

    def dismiss_alert(self) -> None:
        self.alert_message = None

    # Summary and navigation

    def order_summary(self) -> Tuple[List[Tuple[Optional[str], int, float]], float]:
        lines = [(item.title, item.quantity, item.price) for item in self.cart]
        return lines, self.total

    def continue_to_checkout(self) -> bool:
        if not self.cart:
            return False
        self.navigate(CHECKOUT_PATH)
        return True
