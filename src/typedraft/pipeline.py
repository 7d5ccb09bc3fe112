"""
The end-to-end verification and draft generation run.

discover -> verify each file -> verify totals -> group -> infer -> build
fields -> check coverage. Any failed check raises and nothing is written.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
from rich.console import Console

from .config import DraftConfig
from .draft import TypeDraft, build_field_definitions, build_type_draft, write_json
from .reader import JsonCorpus
from .verify import VerificationReport, build_report, verify_aggregate, verify_coverage, verify_file

console = Console()


@dataclass(frozen=True)
class PipelineResult:
    report: VerificationReport
    draft: TypeDraft


def run_pipeline(corpus: JsonCorpus, config: Optional[DraftConfig] = None) -> PipelineResult:
    if config is None:
        config = DraftConfig()
    for file_path in corpus.progress("Verifying files"):
        verify_file(file_path)
    console.print(f"[bold green]OK: verified {len(corpus)} files[/bold green]")

    total_leaves = verify_aggregate(corpus.file_paths, corpus.entries())

    groups = corpus.groups()
    field_definitions = build_field_definitions(groups, config.delimiter, config.locale)
    verify_coverage(field_definitions, groups, corpus.entries(desc="Checking coverage"), config.delimiter)

    report = build_report(
        files_processed=len(corpus),
        total_leaves_streaming=total_leaves,
        total_flattened_entries=sum(len(members) for members in groups.values()),
        groups=groups,
    )
    return PipelineResult(report=report, draft=build_type_draft(field_definitions, config))


def write_outputs(result: PipelineResult, config: Optional[DraftConfig] = None) -> Tuple[Path, Path]:
    if config is None:
        config = DraftConfig()
    report_path = write_json(result.report.to_dict(), config.report_path)
    draft_path = write_json(result.draft.to_dict(), config.draft_path)
    console.print(
        f"[bold green]Wrote {report_path} and {draft_path} "
        f"({len(result.draft.field_definitions)} fields)[/bold green]"
    )
    return report_path, draft_path
