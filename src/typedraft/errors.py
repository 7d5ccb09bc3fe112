"""
Exceptions raised by typedraft.

Every consistency failure aborts the whole run; there is no partial-success
mode, so none of these are caught inside the pipeline itself.
"""

from pathlib import Path
from typing import Tuple


class TypedraftError(Exception):
    """Base class for all typedraft errors."""


class ConfigError(TypedraftError):
    pass


class DocumentParseError(TypedraftError):
    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not parse {self.path}: {reason}")


class ConsistencyError(TypedraftError):
    """An invariant between flattening, streaming and field generation failed."""


class LeafCountMismatchError(ConsistencyError):
    def __init__(self, file_name: str, flattened: int, streamed: int):
        self.file_name = file_name
        self.flattened = flattened
        self.streamed = streamed
        super().__init__(f"Mismatch in {file_name}: flattened={flattened}, jsonLeaves={streamed}")


class AggregateLeafCountMismatchError(ConsistencyError):
    def __init__(self, flattened: int, streamed: int):
        self.flattened = flattened
        self.streamed = streamed
        super().__init__(
            f"Flattened leaf count ({flattened}) != streaming leaf count ({streamed})"
        )


class FieldCountMismatchError(ConsistencyError):
    def __init__(self, fields: int, groups: int):
        self.fields = fields
        self.groups = groups
        super().__init__(f"fieldDefinitions ({fields}) != uniqueNormalizedPaths ({groups})")


class CoverageGapError(ConsistencyError):
    def __init__(self, path: Tuple[str, ...], field_name: str):
        self.path = path
        self.field_name = field_name
        super().__init__(f"Entry path {field_name} missing in fieldDefinitions")
