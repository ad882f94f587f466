"""Small order domain used across the test suite."""
from typing import List, Optional

from pydantic import Field

from shared_kernel.domain.base import (
    AggregateRoot,
    DomainEvent,
    Entity,
    EventSourcedEntity,
    SoftDeleteMixin,
    applies,
)


class OrderCreated(DomainEvent):
    customer: str


class ItemAdded(DomainEvent):
    sku: str
    quantity: int = 1


class ItemRemoved(DomainEvent):
    sku: str


class OrderShipped(DomainEvent):
    """Not handled by Order."""


class Order(EventSourcedEntity[int], AggregateRoot):
    event_types = (OrderCreated, ItemAdded, ItemRemoved)

    customer: Optional[str] = None
    items: List[str] = Field(default_factory=list)
    status: str = "draft"

    def create(self, customer: str) -> None:
        self.raise_event(OrderCreated(customer=customer))

    def add_item(self, sku: str, quantity: int = 1) -> None:
        self.raise_event(ItemAdded(sku=sku, quantity=quantity))

    def remove_item(self, sku: str) -> None:
        self.raise_event(ItemRemoved(sku=sku))

    @applies(OrderCreated)
    def _on_created(self, event: OrderCreated) -> None:
        self.customer = event.customer
        self.status = "open"

    @applies(ItemAdded)
    def _on_item_added(self, event: ItemAdded) -> None:
        self.items.extend([event.sku] * event.quantity)

    @applies(ItemRemoved)
    def _on_item_removed(self, event: ItemRemoved) -> None:
        if event.sku not in self.items:
            raise ValueError(f"Item {event.sku} is not in the order")
        self.items.remove(event.sku)


class ArchivableOrder(Order, SoftDeleteMixin):
    """Order that inherits every handler and adds soft delete fields."""


class Customer(Entity[int]):
    name: str = ""


class Supplier(Entity[int]):
    name: str = ""
