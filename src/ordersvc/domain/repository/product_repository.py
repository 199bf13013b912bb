"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersvc.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_many(self, product_ids: list[str]) -> dict[str, Product]:
        """Return the products that exist among *product_ids*, keyed by ID."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID if needed."""

    @abstractmethod
    def decrement_stock(self, product_id: str, quantity: int) -> None:
        """Subtract *quantity* from the stored stock count in one step.

        Implementations must apply the subtraction inside the store
        (no read-modify-write) so concurrent orders never lose a
        decrement. No lower bound is applied.
        """
