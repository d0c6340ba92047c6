from node import Node
from types import UnionType
from typing import Any, Callable, Iterator, Optional, Union, get_args, get_origin

Chain = Optional[Node]
Folder = Callable[[Any, Any], Any]


def fold_chain(head: Chain, f: Folder, init: Any) -> Any:
    """Walk the chain from head to tail, threading the accumulator through
    f. Nothing is caught here, so whatever f raises stops the walk and goes
    straight to the caller.

    Args:
        head (Chain): First node of the chain, None for an empty chain
        f (Folder): Called as f(item, acc) for every node
        init (Any): Starting accumulator

    Returns:
        Any: The last accumulator produced by f, or init itself if the
        chain is empty
    """
    acc = init
    node = head
    while node is not None:
        item, node = node.get()
        acc = f(item, acc)
    return acc


def iter_chain(head: Chain) -> Iterator[Any]:
    """Yield the items of the chain, head first.

    Args:
        head (Chain): First node of the chain, None for an empty chain

    Returns:
        Iterator[Any]: Items in the same order fold_chain visits them
    """
    node = head
    while node is not None:
        item, node = node.get()
        yield item


def type_members(item_type: Any) -> tuple:
    """Flatten an element type into the plain types it is made of, so a
    tuple of types or a union like int | str gives (int, str).
    """
    if isinstance(item_type, tuple):
        return tuple(member for t in item_type for member in type_members(t))
    args = get_args(item_type)
    if get_origin(item_type) in (Union, UnionType):
        return tuple(member for t in args for member in type_members(t))
    return (item_type,)


def type_name(item_type: Any) -> str:
    return ' | '.join(t.__name__ if isinstance(t, type) else repr(t)
                      for t in type_members(item_type))


def check_type(item_type: Any) -> str:
    """Check that item_type can serve as the element type of a list.

    Args:
        item_type (Any): None, a type, a tuple of types or a union

    Returns:
        str: 'none' if isinstance accepts it, 'type' otherwise
    """
    if item_type is None:
        return 'none'
    try:
        isinstance(None, item_type)
    except TypeError:
        return 'type'
    # isinstance stops at the first match, so every member is looked at
    if not all(isinstance(t, type) and get_origin(t) is None
               for t in type_members(item_type)):
        return 'type'
    return 'none'


def check_item(item: Any, item_type: Any) -> str:
    """Check an item against the element type of a list. Mirrors the way
    the error kind is reported back as a string and raised by the caller.

    Args:
        item (Any): Item about to be pushed
        item_type (Any): Element type of the list, already accepted by
        check_type, None accepts anything

    Returns:
        str: 'none' if the item fits, 'type' on a mismatch
    """
    if item_type is None:
        return 'none'
    # bool only fits a list of bool or object, never a list of int
    if isinstance(item, bool) and not any(
            t is bool or t is object for t in type_members(item_type)):
        return 'type'
    if not isinstance(item, item_type):
        return 'type'
    return 'none'
