"""Shared fixtures for typedraft tests."""
import json

import pytest


@pytest.fixture
def make_corpus(tmp_path):
    """Write ``{relative_name: document_or_raw_text}`` under a fresh directory."""
    def _make(documents, name="corpus"):
        root = tmp_path / name
        root.mkdir()
        for rel, doc in documents.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            text = doc if isinstance(doc, str) else json.dumps(doc)
            path.write_text(text, encoding="utf-8")
        return root
    return _make
