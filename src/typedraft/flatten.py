"""
Depth-first flattening of parsed JSON trees into leaf entries.
"""

from dataclasses import dataclass
from typing import Any, Generator, Iterable, Tuple

from .values import JsonScalar, to_scalar

NormalizedPath = Tuple[str, ...]


@dataclass(frozen=True)
class Entry:
    """One scalar leaf, addressed by the object keys leading to it."""
    path: Tuple[str, ...]
    value: JsonScalar
    from_collection: bool = False


def flatten_json(
    node: Any,
    path: Tuple[str, ...] = (),
    from_collection: bool = False,
) -> Generator[Entry, None, None]:
    """
    Yields one Entry per scalar leaf of ``node``, in document order.

    Object keys are appended to the path. Array elements keep the path of
    the array itself but mark their whole subtree as coming from a
    collection. Empty objects and arrays yield nothing.
    """
    if isinstance(node, dict):
        for key, child in node.items():
            yield from flatten_json(child, path + (key,), from_collection)
    elif isinstance(node, list):
        for child in node:
            yield from flatten_json(child, path, True)
    else:
        yield Entry(path, to_scalar(node), from_collection)


def is_numeric_segment(segment: str) -> bool:
    # Any Unicode decimal digit counts; superscripts and fractions do not
    return segment.isdecimal()


def normalize_path(path: Iterable[str]) -> NormalizedPath:
    """Drop purely numeric segments so sibling records share one key."""
    return tuple(segment for segment in path if not is_numeric_segment(segment))
