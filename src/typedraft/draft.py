"""
Field definitions, the type draft document and JSON output.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .config import DraftConfig, DEFAULT_DELIMITER
from .flatten import Entry, NormalizedPath
from .grouping import named_groups
from .inference import FieldType, infer_field_type


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    label: Dict[str, str]
    type: FieldType
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "label": dict(self.label),
            "required": self.required,
            "type": self.type.to_dict(),
        }


@dataclass(frozen=True)
class TypeDraft:
    key: str
    name: Dict[str, str]
    description: Dict[str, str]
    resource_type_ids: List[str]
    field_definitions: List[FieldDefinition] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "name": dict(self.name),
            "description": dict(self.description),
            "resourceTypeIds": list(self.resource_type_ids),
            "fieldDefinitions": [d.to_dict() for d in self.field_definitions],
        }


def build_field_definitions(
    groups: Dict[NormalizedPath, List[Entry]],
    delimiter: str = DEFAULT_DELIMITER,
    locale: str = "en",
) -> List[FieldDefinition]:
    """
    One definition per named group, sorted by field name.

    The empty path is skipped; it has no name a field could carry.
    """
    definitions = [
        FieldDefinition(
            name=delimiter.join(path),
            label={locale: ".".join(path)},
            type=infer_field_type(members),
        )
        for path, members in named_groups(groups).items()
    ]
    return sorted(definitions, key=lambda d: d.name)


def build_type_draft(field_definitions: List[FieldDefinition], config: DraftConfig) -> TypeDraft:
    return TypeDraft(
        key=config.key,
        name={config.locale: config.name},
        description={config.locale: config.description},
        resource_type_ids=list(config.resource_type_ids),
        field_definitions=list(field_definitions),
    )


def write_json(document: Dict[str, Any], output_path: str | Path) -> Path:
    """Pretty-print ``document`` to ``output_path``, replacing any existing file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
        f.write("\n")
    return output_path
