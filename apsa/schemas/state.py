"""
APSA — Знімок стану движка

EngineSnapshot — незмінна глибока копія стану сесії для зовнішніх
споживачів (транспорт розмови, UI).
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .evidence import SymptomEvidence
from .hypothesis import Hypothesis, QuestionPlan


class EngineSnapshot(BaseModel):
    """Стан сесії на момент запиту"""
    model_config = ConfigDict(frozen=True)

    cycle: int = Field(default=0, ge=0)
    hypotheses: List[Hypothesis] = Field(default_factory=list)
    asked_questions: List[QuestionPlan] = Field(default_factory=list)
    evidence: List[SymptomEvidence] = Field(default_factory=list)
    terminated: bool = False
    termination_reason: Optional[str] = None

    @property
    def top_hypothesis(self) -> Optional[Hypothesis]:
        return self.hypotheses[0] if self.hypotheses else None

    @property
    def evidence_names(self) -> List[str]:
        return [e.name for e in self.evidence]
