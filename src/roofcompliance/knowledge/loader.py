"""
roofcompliance Knowledge Pack Loader

Loads and validates knowledge packs from YAML or JSON files.

Converts Pydantic schema models to frozen domain records held in
read-only mappings.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..exceptions import (
    KnowledgePackLoadError,
    KnowledgePackValidationError,
    KnowledgePackVersionMismatch,
)
from ..models import (
    AlertType,
    CaseStudy,
    Determination,
    ExplanationOption,
    FIELD_ENUMS,
    LegislationExplanation,
    allowed_values,
)
from .base import KnowledgeBase
from .schema import (
    SCHEMA_VERSION,
    KnowledgePackSchema,
    check_schema_version,
    validate_knowledge_pack,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Reference Integrity Validation
# =============================================================================

def validate_reference_integrity(schema: KnowledgePackSchema) -> list[str]:
    """
    Check internal consistency the schema alone cannot express.

    Catches:
    - Case studies not classified as case-study-box
    - Explanations for fields that are not wizard fields
    - Explanation options that are not valid answers for their field

    Returns:
        List of error strings (empty if the pack is consistent)
    """
    errors: list[str] = []

    for key, case in schema.case_studies.items():
        if case.type != AlertType.CASE_STUDY.value:
            errors.append(
                f"Case study '{key}' must have type 'case-study-box', got '{case.type}'"
            )

    for field_name, explanation in schema.explanations.items():
        if field_name not in FIELD_ENUMS:
            errors.append(f"Explanation for unknown wizard field '{field_name}'")
            continue
        valid = set(allowed_values(field_name))
        for option in explanation.options:
            if option not in valid:
                errors.append(
                    f"Explanation '{field_name}' has option '{option}' "
                    f"which is not a valid answer"
                )

    return errors


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_knowledge_pack(schema: KnowledgePackSchema) -> KnowledgeBase:
    determinations = {
        key: Determination(
            key=key,
            id=d.id,
            file=d.file,
            title=d.title,
            summary=d.summary,
            type=AlertType(d.type),
        )
        for key, d in schema.determinations.items()
    }
    case_studies = {
        key: CaseStudy(
            key=key,
            id=c.id,
            file=c.file,
            title=c.title,
            summary=c.summary,
            type=AlertType(c.type),
        )
        for key, c in schema.case_studies.items()
    }
    explanations = {
        field_name: LegislationExplanation(
            field=field_name,
            question=e.question,
            options=MappingProxyType({
                value: ExplanationOption(ref=o.ref, text=o.text)
                for value, o in e.options.items()
            }),
        )
        for field_name, e in schema.explanations.items()
    }
    return KnowledgeBase(
        pack_id=schema.pack_id,
        name=schema.name,
        jurisdiction=schema.jurisdiction,
        version=schema.version,
        description=schema.description,
        determinations=MappingProxyType(determinations),
        case_studies=MappingProxyType(case_studies),
        explanations=MappingProxyType(explanations),
    )


def _build(data: Any, source: str, strict_version: bool) -> KnowledgeBase:
    if not isinstance(data, dict):
        raise KnowledgePackLoadError(
            message="Knowledge pack must be a mapping at the top level",
            details={"path": source, "type": type(data).__name__},
        )

    if strict_version and not check_schema_version(data):
        pack_version = data.get("schema_version", "unknown")
        raise KnowledgePackVersionMismatch(
            message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
            details={
                "pack_version": pack_version,
                "expected_version": SCHEMA_VERSION,
            },
        )

    try:
        schema = validate_knowledge_pack(data)
    except ValidationError as e:
        raise KnowledgePackValidationError(
            message=f"Knowledge pack validation failed: {e.error_count()} errors",
            details={
                "errors": e.errors(include_url=False, include_context=False),
                "path": source,
            },
        )

    errors = validate_reference_integrity(schema)
    if errors:
        raise KnowledgePackValidationError(
            message="Reference integrity validation failed",
            details={"errors": errors, "path": source},
        )

    return _convert_knowledge_pack(schema)


# =============================================================================
# Knowledge Pack Loader
# =============================================================================

class KnowledgePackLoader:
    """
    Loads knowledge packs from YAML or JSON files.

    Usage:
        loader = KnowledgePackLoader()
        knowledge = loader.load("packs/nz_roofing.yaml")
        knowledge.get_determination("zero_pitch")
    """

    def __init__(self, strict_version: bool = True) -> None:
        self.strict_version = strict_version
        self._packs: dict[str, KnowledgeBase] = {}

    def load(self, path: Union[str, Path]) -> KnowledgeBase:
        """
        Load and validate a knowledge pack.

        Raises:
            KnowledgePackLoadError: file missing or unparseable
            KnowledgePackVersionMismatch: incompatible schema_version
            KnowledgePackValidationError: schema or reference errors
        """
        path = Path(path)
        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise KnowledgePackLoadError(
                message=f"Failed to load knowledge pack: {e}",
                details={"path": str(path), "error": str(e)},
            )

        knowledge = _build(data, str(path), self.strict_version)
        self._packs[knowledge.pack_id] = knowledge

        logger.info(
            "Loaded knowledge pack %s v%s (%d determinations, %d case studies, %d explanations)",
            knowledge.pack_id,
            knowledge.version,
            len(knowledge.determinations),
            len(knowledge.case_studies),
            len(knowledge.explanations),
        )
        return knowledge

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_pack(self, pack_id: str) -> KnowledgeBase | None:
        """Get a previously loaded pack by id."""
        return self._packs.get(pack_id)

    def list_packs(self) -> list[str]:
        """Ids of all loaded packs."""
        return list(self._packs.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_knowledge_pack(path: Union[str, Path]) -> KnowledgeBase:
    """Load a knowledge pack from a file with a temporary loader."""
    return KnowledgePackLoader().load(path)


def load_knowledge_pack_from_string(
    content: str,
    format: str = "yaml",
    strict_version: bool = True,
) -> KnowledgeBase:
    """
    Load a knowledge pack from a YAML or JSON string.

    Raises:
        KnowledgePackLoadError: content cannot be parsed
        KnowledgePackVersionMismatch: incompatible schema_version
        KnowledgePackValidationError: schema or reference errors
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise KnowledgePackLoadError(
            message=f"Failed to parse knowledge pack: {e}",
            details={"format": format, "error": str(e)},
        )
    return _build(data, "<string>", strict_version)
