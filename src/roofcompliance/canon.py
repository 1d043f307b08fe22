"""
Canonical JSON Serialization

Deterministic JSON serialization for hashing and comparison:
- Sorted keys (lexicographic)
- No whitespace
- UTF-8 encoding

The same object always produces the same JSON string, so hashes of
inputs, results and knowledge packs can be stored alongside an
assessment and compared later.
"""
from __future__ import annotations

import hashlib
import json
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .knowledge import KnowledgeBase
    from .models import ComplianceResult, WizardInputs


def _default_serializer(obj: Any) -> Any:
    """Serialize enums by value."""
    if isinstance(obj, Enum):
        return obj.value
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json(obj: Any) -> str:
    """
    Serialize object to canonical JSON string.

    Example:
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        default=_default_serializer,
        ensure_ascii=False,
    )


def canonical_json_bytes(obj: Any) -> bytes:
    """Canonical JSON as UTF-8 bytes."""
    return canonical_json(obj).encode("utf-8")


def content_hash(obj: Any) -> str:
    """
    Compute SHA-256 hash of canonical JSON representation.

    Returns:
        Hex-encoded SHA-256 hash string (64 characters)
    """
    return hashlib.sha256(canonical_json_bytes(obj)).hexdigest()


def inputs_hash(inputs: WizardInputs) -> str:
    """Hash of the answered questionnaire fields."""
    return content_hash(inputs.to_dict())


def result_hash(result: ComplianceResult) -> str:
    """Hash of a result's JSON shape."""
    return content_hash(result.to_dict())


def knowledge_pack_hash(knowledge: KnowledgeBase) -> str:
    """
    Hash of a knowledge pack's content.

    Changes whenever any determination, case study or explanation text
    changes, so a stored assessment can be checked against the pack in use.
    """
    return content_hash(knowledge.to_dict())
