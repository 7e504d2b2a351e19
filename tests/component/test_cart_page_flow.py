"""
Component tests for the cart page controller talking to the real API.

The controller's HTTP client is pointed at the FastAPI test client so the
whole path (controller, adapter, router, service, storage) is exercised.
"""
from fastapi.testclient import TestClient

from storefront.client import (
    CartContext,
    CartController,
    CheckoutContext,
    DeleteOutcome,
    FetchOutcome,
    ProductContext,
    StorefrontAPI,
    UserContext,
)


def make_controller(client: TestClient, credentials, navigated=None):
    api = StorefrontAPI(base_url="", session=client)
    products = ProductContext()
    products.load(api)
    return CartController(
        api=api,
        user=UserContext(user_id=credentials["user_id"], token=credentials["token"]),
        products=products,
        cart=CartContext(),
        checkout=CheckoutContext(),
        navigate=navigated.append if navigated is not None else None,
    )


class TestCartPage:
    def test_load_then_delete_with_confirmation(self, test_client: TestClient, shopper, catalog):
        """
        Cart with two lines, delete one through the confirm dialog.

        Validates:
        - catalog loads from the product router
        - fetched lines are joined with product data
        - total and checkout context follow the cart
        - deletion removes the line on the server and locally
        """
        api = StorefrontAPI(base_url="", session=test_client)
        api.add_item(shopper["user_id"], shopper["token"], "p1", quantity=2, size="M")
        api.add_item(shopper["user_id"], shopper["token"], "p2", quantity=1, size="32")
        controller = make_controller(test_client, shopper)

        assert controller.fetch_cart() is FetchOutcome.LOADED
        assert [item.title for item in controller.cart] == ["Linen Shirt", "Chinos"]
        assert controller.total == 45.5
        assert controller.checkout.total_bill == 45.5

        target = controller.cart[0].id
        controller.request_delete(target)
        assert controller.confirm_delete() is DeleteOutcome.DELETED

        assert [item.productID for item in controller.cart] == ["p2"]
        assert controller.total == 25.5
        assert controller.checkout.total_bill == 25.5
        assert controller.show_success_modal

        server_side = api.get_cart(shopper["user_id"], shopper["token"]).data["items"]
        assert [item["_id"] for item in server_side] == [controller.cart[0].id]

    def test_empty_cart_message_leaves_cart_empty(self, test_client: TestClient, shopper, catalog):
        navigated = []
        controller = make_controller(test_client, shopper, navigated)

        assert controller.fetch_cart() is FetchOutcome.EMPTY
        assert controller.cart == []
        assert controller.total == 0
        assert controller.continue_to_checkout() is False
        assert navigated == []

    def test_checkout_navigation_with_items(self, test_client: TestClient, shopper, catalog):
        api = StorefrontAPI(base_url="", session=test_client)
        api.add_item(shopper["user_id"], shopper["token"], "p1")
        navigated = []
        controller = make_controller(test_client, shopper, navigated)
        controller.fetch_cart()

        assert controller.continue_to_checkout() is True
        assert navigated == ["/cart/checkout"]

    def test_expired_session_surfaces_alert(self, test_client: TestClient, shopper, catalog):
        controller = make_controller(test_client, {"user_id": shopper["user_id"], "token": "stale"})

        assert controller.fetch_cart() is FetchOutcome.SERVER_ERROR
        assert controller.alert_message == "Could not validate credentials"
        assert controller.cart == []
