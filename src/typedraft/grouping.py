"""
Grouping of flattened entries by normalized path.
"""

from typing import Dict, Iterable, List

from .flatten import Entry, NormalizedPath, normalize_path


def group_entries(entries: Iterable[Entry]) -> Dict[NormalizedPath, List[Entry]]:
    """
    Partition entries by normalized path.

    Groups and the entries inside them keep the order in which they were
    first encountered. The empty path (bare top-level scalars) is kept here
    so leaf counts stay complete; use ``named_groups`` to drop it.
    """
    groups: Dict[NormalizedPath, List[Entry]] = {}
    for entry in entries:
        groups.setdefault(normalize_path(entry.path), []).append(entry)
    return groups


def named_groups(groups: Dict[NormalizedPath, List[Entry]]) -> Dict[NormalizedPath, List[Entry]]:
    return {path: members for path, members in groups.items() if path}
