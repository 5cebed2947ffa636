"""
Shopping cart reducer.

Every operation returns a new ``Cart``; the previous value is left untouched.
Quantities never drop below one: lowering past one is ignored, removing an
item is an explicit operation.
"""

from dataclasses import dataclass, field, replace

from app.stores.schemas.store import Product


@dataclass(frozen=True)
class CartItem:
    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> int:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class Cart:
    items: tuple[CartItem, ...] = field(default_factory=tuple)

    def add(self, product: Product, quantity: int = 1) -> "Cart":
        """Add a product, merging with an existing line for the same product id."""
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")

        for index, item in enumerate(self.items):
            if item.product.id == product.id:
                merged = replace(item, quantity=item.quantity + quantity)
                return Cart(items=self.items[:index] + (merged,) + self.items[index + 1 :])

        return Cart(items=self.items + (CartItem(product=product, quantity=quantity),))

    def remove(self, product_id: str) -> "Cart":
        return Cart(items=tuple(item for item in self.items if item.product.id != product_id))

    def update_quantity(self, product_id: str, delta: int) -> "Cart":
        return Cart(
            items=tuple(
                replace(item, quantity=max(1, item.quantity + delta))
                if item.product.id == product_id
                else item
                for item in self.items
            )
        )

    def clear(self) -> "Cart":
        return Cart()

    @property
    def total(self) -> int:
        return sum(item.line_total for item in self.items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def can_afford(self, budget: int) -> bool:
        return budget >= self.total
