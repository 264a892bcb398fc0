from .schemas import Item


def order_quantity(item: Item) -> int:
    """Units to reorder now to get back to the par level."""
    return max(0, item.target_stock - item.current_stock)


def is_urgent(item: Item) -> bool:
    return order_quantity(item) > 0
