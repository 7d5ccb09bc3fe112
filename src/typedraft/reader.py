"""
Discovery and reading of JSON document corpora.

Documents are parsed with ijson so numbers come back as ``int`` or
``Decimal`` rather than ``float``, and the same library provides the raw
token stream used for independent leaf counting.
"""

import ijson
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generator, List, Tuple
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from .config import DEFAULT_DELIMITER
from .errors import DocumentParseError
from .flatten import Entry, NormalizedPath, flatten_json
from .grouping import group_entries, named_groups
from .inference import has_mixed_kinds, infer_field_type, is_collection

console = Console()

# Scalar events emitted by ijson.parse
SCALAR_EVENTS = frozenset({"null", "boolean", "number", "string"})

UTF8_BOM = b"\xef\xbb\xbf"


def discover_json_files(root: str | Path) -> List[Path]:
    """
    Recursively find every ``.json`` file (any case) under ``root``.

    Paths are returned sorted so that discovery order, and therefore every
    output built from it, is stable across runs and file systems.
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Resource directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    return sorted(
        (p for p in root.rglob("*") if p.is_file() and p.suffix.lower() == ".json"),
        key=lambda p: p.relative_to(root).as_posix(),
    )


@contextmanager
def open_document(file_path: Path):
    """Open a document for binary reading, positioned after any UTF-8 BOM."""
    with open(file_path, "rb") as f:
        if f.read(len(UTF8_BOM)) != UTF8_BOM:
            f.seek(0)
        yield f


def read_document(file_path: str | Path) -> Any:
    """Parse a file holding exactly one JSON document."""
    file_path = Path(file_path)
    try:
        with open_document(file_path) as f:
            documents = list(ijson.items(f, ""))
    except ijson.JSONError as e:
        raise DocumentParseError(file_path, str(e)) from e
    except UnicodeDecodeError as e:
        raise DocumentParseError(file_path, f"not valid UTF-8 ({e})") from e

    if not documents:
        raise DocumentParseError(file_path, "empty document")
    return documents[0]


def entries_from_file(file_path: str | Path) -> Generator[Entry, None, None]:
    yield from flatten_json(read_document(file_path))


def count_leaves_streaming(file_path: str | Path) -> int:
    """
    Count scalar tokens in a file without building a tree.

    This walks the raw parser events, so it is independent of
    ``flatten_json`` and can be used to cross-check it.
    """
    file_path = Path(file_path)
    try:
        with open_document(file_path) as f:
            return sum(1 for _, event, _ in ijson.parse(f) if event in SCALAR_EVENTS)
    except ijson.JSONError as e:
        raise DocumentParseError(file_path, str(e)) from e
    except UnicodeDecodeError as e:
        raise DocumentParseError(file_path, f"not valid UTF-8 ({e})") from e


class JsonCorpus:
    """
    A directory tree of JSON documents, processed in discovery order.

    Entries are produced lazily and documents are re-read on every pass;
    nothing parsed is cached between passes.
    """

    def __init__(self, root: str | Path, show_progress: bool = True):
        self.root = Path(root)
        self.file_paths = discover_json_files(self.root)
        self.show_progress = show_progress

    def __len__(self) -> int:
        return len(self.file_paths)

    def progress(self, desc: str):
        return tqdm(self.file_paths, desc=desc, unit=" files", disable=not self.show_progress)

    def entries_for(self, file_path: str | Path) -> Generator[Entry, None, None]:
        return entries_from_file(file_path)

    def entries(self, desc: str = "Flattening") -> Generator[Entry, None, None]:
        """Yields the entries of every document, file by file."""
        for file_path in self.progress(desc):
            yield from entries_from_file(file_path)

    def groups(self) -> Dict[NormalizedPath, List[Entry]]:
        return group_entries(self.entries(desc="Grouping"))

    def leaf_counts(self) -> List[Tuple[Path, int, int]]:
        """
        Returns ``(file, flattened, streamed)`` for every document.
        """
        counts = []
        for file_path in self.progress("Counting leaves"):
            flattened = sum(1 for _ in self.entries_for(file_path))
            counts.append((file_path, flattened, count_leaves_streaming(file_path)))
        return counts

    def print_leaf_counts(self):
        table = Table(title=f"Leaf counts ({len(self)} files)")
        table.add_column("File", style="cyan")
        table.add_column("Flattened", justify="right")
        table.add_column("Streamed", justify="right")
        table.add_column("Status")

        for file_path, flattened, streamed in self.leaf_counts():
            status = "[green]ok[/green]" if flattened == streamed else "[bold red]mismatch[/bold red]"
            table.add_row(str(file_path.relative_to(self.root)), str(flattened), str(streamed), status)

        console.print(table)

    def print_schema(self, delimiter: str = DEFAULT_DELIMITER):
        """Print the inferred type of every named field as a table."""
        console.print(f"[bold blue]Scanning schema for {len(self)} files...[/bold blue]")
        groups = named_groups(self.groups())

        table = Table(title="Inferred Fields")
        table.add_column("Field", style="cyan")
        table.add_column("Type", style="magenta")
        table.add_column("Entries", justify="right")
        table.add_column("Set")
        table.add_column("Mixed")

        for path in sorted(groups, key=delimiter.join):
            members = groups[path]
            field_type = infer_field_type(members)
            type_name = field_type.name
            if is_collection(members):
                type_name = f"Set<{field_type.element_type.name}>"
            table.add_row(
                delimiter.join(path),
                type_name,
                str(len(members)),
                "yes" if is_collection(members) else "",
                "[yellow]yes[/yellow]" if has_mixed_kinds(members) else "",
            )

        console.print(table)
