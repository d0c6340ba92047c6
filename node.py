from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class Node(Generic[T]):
    """One link of a singly linked chain. Owns exactly one item and the node
    that follows it; the last node of a chain keeps None as its successor.
    """

    def __init__(self, item: T, next: Optional['Node[T]'] = None):
        self.item = item
        self.next = next

    def get(self) -> tuple[T, Optional['Node[T]']]:
        return (self.item, self.next)
