"""
typedraft - flatten JSON corpora, verify the flattening and draft field types.

Every leaf of every document is flattened to a path/value entry, entries are
grouped by their array-index-free path, a type is inferred per group, and the
result is cross-checked against an independent token-level leaf count before
a verification report and a type draft are written.
"""

from .config import DraftConfig, load_config
from .draft import FieldDefinition, TypeDraft
from .pipeline import PipelineResult, run_pipeline, write_outputs
from .reader import JsonCorpus
from .verify import VerificationReport

__version__ = "0.1.0"

__all__ = [
    "DraftConfig",
    "FieldDefinition",
    "JsonCorpus",
    "PipelineResult",
    "TypeDraft",
    "VerificationReport",
    "load_config",
    "run_pipeline",
    "write_outputs",
    "__version__",
]
