"""
roofcompliance Result Explanations

Pairs each answer that drove a result with its legislative reference and
plain-language explanation from the knowledge base.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..knowledge import KNOWLEDGE_BASE, KnowledgeBase
from ..models import ComplianceResult, WizardInputs


@dataclass(frozen=True)
class ExplainedAnswer:
    """One answered question with its legislative basis."""
    field: str
    question: str
    value: str
    ref: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "question": self.question,
            "value": self.value,
            "ref": self.ref,
            "text": self.text,
        }


def explain_result(
    inputs: WizardInputs,
    result: ComplianceResult,
    knowledge: Optional[KnowledgeBase] = None,
) -> list[ExplainedAnswer]:
    """
    Explain the answers behind ``result.legislation_keys``.

    Unanswered fields, and answers the knowledge base has no text for, are
    skipped. ``complex`` yields one entry per selected tag.
    """
    knowledge = knowledge if knowledge is not None else KNOWLEDGE_BASE
    explained: list[ExplainedAnswer] = []

    for field_name in result.legislation_keys:
        explanation = knowledge.explanations.get(field_name)
        if explanation is None:
            continue
        value = getattr(inputs, field_name)
        values = value if isinstance(value, list) else [value]
        for v in values:
            if v is None:
                continue
            raw = v.value if isinstance(v, Enum) else str(v)
            option = explanation.option(raw)
            if option is None:
                continue
            explained.append(ExplainedAnswer(
                field=field_name,
                question=explanation.question,
                value=raw,
                ref=option.ref,
                text=option.text,
            ))

    return explained
