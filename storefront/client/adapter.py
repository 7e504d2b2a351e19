from typing import Any, Dict, Iterable, List, Union

from storefront.client.models import CartItem, DisplayCartItem, Product, UnresolvedCartItem
from storefront.core.logger import get_logger

logger = get_logger(__name__)

JoinedItem = Union[DisplayCartItem, UnresolvedCartItem]


def join_cart(raw_cart: Dict[str, Any], catalog: Iterable[Product]) -> List[JoinedItem]:
    """Join raw cart lines against the catalog, keeping the cart order.

    Every raw line yields exactly one entry: a DisplayCartItem when its
    productID resolves, otherwise an UnresolvedCartItem.
    """
    products = {product.id: product for product in catalog}
    joined: List[JoinedItem] = []
    for raw in raw_cart.get("items", []):
        item = CartItem.model_validate(raw)
        product = products.get(item.productID)
        if product is None:
            logger.warning("cart item references unknown product", item_id=item.id, product_id=item.productID)
            joined.append(UnresolvedCartItem(item=item))
            continue
        joined.append(
            DisplayCartItem(
                id=item.id,
                productID=item.productID,
                category=product.category,
                quantity=item.quantity,
                size=item.size,
                title=product.title,
                price=product.price,
                images=list(product.images),
            )
        )
    return joined


def resolved_items(joined: Iterable[JoinedItem]) -> List[DisplayCartItem]:
    return [entry for entry in joined if isinstance(entry, DisplayCartItem)]


def unresolved_items(joined: Iterable[JoinedItem]) -> List[UnresolvedCartItem]:
    return [entry for entry in joined if isinstance(entry, UnresolvedCartItem)]
