"""
Consistency checks between flattening, token streaming and field generation.

None of the checks trust the flattener: leaf counts come from the raw token
stream, and coverage is checked against the entries themselves rather than
the groups built from them.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from .config import DEFAULT_DELIMITER
from .draft import FieldDefinition
from .errors import (
    AggregateLeafCountMismatchError,
    CoverageGapError,
    FieldCountMismatchError,
    LeafCountMismatchError,
)
from .flatten import Entry, NormalizedPath, normalize_path
from .grouping import named_groups
from .inference import has_mixed_kinds, is_collection
from .reader import count_leaves_streaming, entries_from_file


@dataclass(frozen=True)
class VerificationReport:
    files_processed: int
    total_leaves_streaming: int
    total_flattened_entries: int
    unique_normalized_paths: int
    paths_marked_as_set: int
    paths_with_mixed_kinds: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filesProcessed": self.files_processed,
            "totalLeavesStreaming": self.total_leaves_streaming,
            "totalFlattenedEntries": self.total_flattened_entries,
            "uniqueNormalizedPaths": self.unique_normalized_paths,
            "pathsMarkedAsSet": self.paths_marked_as_set,
            "pathsWithMixedKinds": self.paths_with_mixed_kinds,
        }


def verify_file(file_path: str | Path) -> int:
    """
    Check that flattening a file yields exactly one entry per scalar token.

    Returns the leaf count on success.
    """
    file_path = Path(file_path)
    flattened = sum(1 for _ in entries_from_file(file_path))
    streamed = count_leaves_streaming(file_path)
    if flattened != streamed:
        raise LeafCountMismatchError(file_path.name, flattened, streamed)
    return streamed


def verify_aggregate(file_paths: Sequence[Path], entries: Iterable[Entry]) -> int:
    """Check total flattened entries against the summed streamed leaf counts."""
    streamed = sum(count_leaves_streaming(p) for p in file_paths)
    flattened = sum(1 for _ in entries)
    if flattened != streamed:
        raise AggregateLeafCountMismatchError(flattened, streamed)
    return streamed


def verify_coverage(
    field_definitions: List[FieldDefinition],
    groups: Dict[NormalizedPath, List[Entry]],
    entries: Iterable[Entry],
    delimiter: str = DEFAULT_DELIMITER,
):
    """
    Check that every named entry path has exactly one field definition.
    """
    expected = len(named_groups(groups))
    if len(field_definitions) != expected:
        raise FieldCountMismatchError(len(field_definitions), expected)

    field_names = {definition.name for definition in field_definitions}
    for entry in entries:
        path = normalize_path(entry.path)
        if not path:
            continue
        name = delimiter.join(path)
        if name not in field_names:
            raise CoverageGapError(path, name)


def build_report(
    files_processed: int,
    total_leaves_streaming: int,
    total_flattened_entries: int,
    groups: Dict[NormalizedPath, List[Entry]],
) -> VerificationReport:
    named = named_groups(groups)
    return VerificationReport(
        files_processed=files_processed,
        total_leaves_streaming=total_leaves_streaming,
        total_flattened_entries=total_flattened_entries,
        unique_normalized_paths=len(named),
        paths_marked_as_set=sum(1 for members in named.values() if is_collection(members)),
        paths_with_mixed_kinds=sum(1 for members in named.values() if has_mixed_kinds(members)),
    )
