"""
Module to extract asset references from nested record documents
"""

from typing import Any, Set

from ..middleware.exceptions import ReferenceDepthError

DEFAULT_REFERENCE_KEY = "assetId"
DEFAULT_MAX_DEPTH = 100


def extract_references(
    node: Any, key: str = DEFAULT_REFERENCE_KEY, max_depth: int = DEFAULT_MAX_DEPTH
) -> Set[str]:
    """
    Collect the distinct asset identifiers referenced anywhere in a record.

    Any mapping entry named ``key`` with a truthy value contributes ``str(value)``;
    every other mapping value and sequence item is walked recursively.

    Args:
        node: A record or any part of it (mapping, sequence or scalar).
        key: The reserved reference key name.
        max_depth: Maximum nesting depth before the walk is aborted.

    Returns:
        Set[str]: The deduplicated asset identifiers.

    Raises:
        ReferenceDepthError: If the structure is nested deeper than ``max_depth``
            or a container is reached again through its own children.
    """
    references: Set[str] = set()
    _walk(node, key, max_depth, 0, set(), references)
    return references


def _walk(
    node: Any, key: str, max_depth: int, depth: int, path: Set[int], out: Set[str]
) -> None:
    if isinstance(node, dict):
        children = []
        for name, value in node.items():
            if name == key and value:
                out.add(str(value))
            else:
                children.append(value)
    elif isinstance(node, (list, tuple)):
        children = list(node)
    else:
        return

    if depth >= max_depth:
        raise ReferenceDepthError(details={"max_depth": max_depth})
    if id(node) in path:
        raise ReferenceDepthError(
            message="Record structure contains a cycle", details={"depth": depth}
        )

    path.add(id(node))
    try:
        for child in children:
            _walk(child, key, max_depth, depth + 1, path, out)
    finally:
        path.discard(id(node))
