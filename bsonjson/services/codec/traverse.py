"""Short-circuiting traversal over ordered children."""
from typing import Any, Callable, Dict, Iterable, List, Mapping, TypeVar

T = TypeVar("T")
U = TypeVar("U")

def traverse(items: Iterable[T], convert: Callable[[T], U]) -> List[U]:
    """
    Convert every item in order, stopping at the first failure.

    The first exception raised by ``convert`` propagates unchanged and no
    partial list is returned.
    """
    return [convert(item) for item in items]

def traverse_fields(fields: Mapping[str, Any], convert: Callable[[Any], Any]) -> Dict[str, Any]:
    """Convert the values of a document, keeping keys and their order."""
    return dict(traverse(fields.items(), lambda field: (field[0], convert(field[1]))))
