#!/usr/bin/env python3
"""
Example script demonstrating basic usage of the typedraft library.

Run from the project root after installing the package:
    python examples/main.py data/web examples/draft.yaml
"""

from typedraft import JsonCorpus, load_config, run_pipeline
from typedraft.verify import verify_file
import sys

def main():
    directory = "data/web"
    if len(sys.argv) > 1:
        directory = sys.argv[1]
    config = load_config(sys.argv[2] if len(sys.argv) > 2 else None)

    corpus = JsonCorpus(directory, show_progress=False)
    print(f"Found {len(corpus)} documents under {directory}")

    # Per-file leaf counts, streamed and flattened
    for file_path in corpus.file_paths:
        print(f"  {file_path.name}: {verify_file(file_path)} leaves")

    result = run_pipeline(corpus, config)
    for definition in result.draft.field_definitions:
        print(f"  {definition.name}: {definition.type.to_dict()}")

    print(result.report.to_dict())


if __name__ == '__main__':
    main()
