"""
Derivation steps — the human-auditable trail behind every result.

A calculation emits an ordered list of steps. Formula statements and
substitutions are narrative only and carry ``result=0`` / ``formatted=''``;
computed steps carry the value they produced.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, List


class StepKind(str, Enum):
    FORMULA = "formula"
    SUBSTITUTION = "substitution"
    COMPUTED = "computed"


@dataclass(frozen=True)
class DerivationStep:
    description: str
    formula: str
    result: float = 0.0
    formatted: str = ''
    kind: StepKind = StepKind.COMPUTED

    @property
    def is_narrative(self) -> bool:
        return self.kind is not StepKind.COMPUTED

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['kind'] = self.kind.value
        return data


def formula_step(description: str, formula: str) -> DerivationStep:
    """State a formula without computing anything."""
    return DerivationStep(description, formula, 0.0, '', StepKind.FORMULA)


def substitution_step(description: str, formula: str) -> DerivationStep:
    """Show a formula with the actual numbers plugged in."""
    return DerivationStep(description, formula, 0.0, '', StepKind.SUBSTITUTION)


def computed_step(description: str, formula: str, result: float, formatted: str) -> DerivationStep:
    return DerivationStep(description, formula, result, formatted, StepKind.COMPUTED)


def steps_to_dicts(steps: List[DerivationStep]) -> List[Dict]:
    return [step.to_dict() for step in steps]
