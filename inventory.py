from typing import Any, Iterable, Tuple

from pricing import format_peso, to_number

DEFAULT_MIN_STOCK = 10
MAX_PRODUCT_IMAGES = 3

IN_STOCK = "In Stock"
LOW_STOCK = "Low Stock"
OUT_OF_STOCK = "Out of Stock"


def price_range(variations: Iterable[Any]) -> Tuple[float, float]:
    prices = []
    for variation in variations or []:
        price = variation.get("price") if isinstance(variation, dict) else getattr(variation, "price", None)
        prices.append(to_number(price))
    if not prices:
        return 0.0, 0.0
    return min(prices), max(prices)


def stock_status(stock: int, min_stock: int = DEFAULT_MIN_STOCK) -> str:
    if stock <= 0:
        return OUT_OF_STOCK
    if stock < min_stock:
        return LOW_STOCK
    return IN_STOCK


def format_price_range(min_price: Any, max_price: Any = None) -> str:
    if max_price is None or min_price == max_price:
        return format_peso(min_price)
    return f"{format_peso(min_price)} - {format_peso(max_price)}"
