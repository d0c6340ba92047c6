from chain import check_item, check_type, fold_chain, iter_chain, type_name
from errors import ErrorType, error
from node import Node
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar('T')
Acc = TypeVar('Acc')


class LinkedList(Generic[T]):
    def __init__(self, item_type: Any = None):
        if check_type(item_type) == 'type':
            error(ErrorType.TYPE_ERROR,
                  'element type must be a type, a tuple of types or a union, '
                  f'got {item_type!r}')

        # Member variables for the chain
        self.head: Optional[Node[T]] = None

        # Element type accepted by push, None accepts anything
        self.item_type = item_type

    #################################################################
    ######################## List operations ########################
    #################################################################
    def push(self, item: T) -> 'LinkedList[T]':
        """Prepend item, the new node becomes the head and the old head its
        successor. Returns the list itself so pushes can be chained.

        Args:
            item (T): Item to prepend

        Returns:
            LinkedList[T]: This list
        """
        if check_item(item, self.item_type) == 'type':
            error(ErrorType.TYPE_ERROR,
                  f'cannot push {type(item).__name__} onto a list of '
                  f'{type_name(self.item_type)}')

        self.head = Node(item, self.head)
        return self

    def fold(self, f: Callable[[T, Acc], Acc], init: Acc) -> Acc:
        """Left fold from head to tail, acc = f(item, acc) at every node.
        The list is not touched, and an empty list hands back init itself.

        Args:
            f (Callable[[T, Acc], Acc]): Combining function
            init (Acc): Starting accumulator

        Returns:
            Acc: Final accumulator
        """
        if not callable(f):
            error(ErrorType.TYPE_ERROR,
                  f'fold expects a function, got {type(f).__name__}')

        return fold_chain(self.head, f, init)

    def foreach(self, f: Callable[[T], Any]) -> None:
        """Call f once per item, head to tail, for its side effects only."""
        if not callable(f):
            error(ErrorType.TYPE_ERROR,
                  f'foreach expects a function, got {type(f).__name__}')

        def visit(item: T, acc: None) -> None:
            f(item)
            return acc

        # the accumulator is never looked at, it stays None all the way
        self.fold(visit, None)

    #################################################################
    ########################## Conveniences #########################
    #################################################################
    def is_empty(self) -> bool:
        return self.head is None

    def __len__(self) -> int:
        return self.fold(lambda _, count: count + 1, 0)

    def __iter__(self) -> Iterator[T]:
        return iter_chain(self.head)

    def __repr__(self) -> str:
        return f'LinkedList({list(self)!r})'
