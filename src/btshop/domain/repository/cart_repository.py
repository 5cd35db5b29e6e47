"""Abstract repository for the shopper's Cart.

There is a single cart per store key; ``load`` never fails and hands
back an empty cart when nothing has been saved yet.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from btshop.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the persisted cart, or an empty one."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart, replacing the previous snapshot."""
