"""Binary search tree of bookings keyed by booking id."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .models import Booking


@dataclass
class _Node:
    booking: Booking
    left: _Node | None = None
    right: _Node | None = None


class BookingTree:
    """Bookings ordered by id; an id already present is not inserted again."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, booking: Booking) -> bool:
        """Add a booking; return False if its id is already in the tree."""
        key = booking.booking_id
        if self._root is None:
            self._root = _Node(booking)
            self._size += 1
            return True
        node = self._root
        while True:
            current = node.booking.booking_id
            if key == current:
                return False
            if key < current:
                if node.left is None:
                    node.left = _Node(booking)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(booking)
                    break
                node = node.right
        self._size += 1
        return True

    def find(self, booking_id: int) -> Booking | None:
        """Return the booking with this id, or None."""
        node = self._root
        while node is not None:
            current = node.booking.booking_id
            if booking_id == current:
                return node.booking
            node = node.left if booking_id < current else node.right
        return None

    def for_customer(self, customer_id: int) -> Iterator[Booking]:
        """Yield a customer's bookings in id order."""
        return (booking for booking in self if booking.customer_id == customer_id)

    def __iter__(self) -> Iterator[Booking]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.booking
            node = node.right

    def __len__(self) -> int:
        return self._size