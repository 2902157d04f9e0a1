"""
APSA — Стан сесії

EngineState належить рівно одному TriageEngine. Назовні стан
віддається тільки як EngineSnapshot (глибока копія).
"""

from dataclasses import dataclass, field
from typing import List, Optional

from apsa.schemas import EngineSnapshot, Hypothesis, QuestionPlan

from .evidence_store import EvidenceStore


@dataclass
class EngineState:
    """Стан однієї сесії опитування"""

    # Збільшується при кожному перерахунку гіпотез (інформаційно)
    cycle: int = 0

    hypotheses: List[Hypothesis] = field(default_factory=list)
    asked_questions: List[QuestionPlan] = field(default_factory=list)
    evidence: EvidenceStore = field(default_factory=EvidenceStore)

    terminated: bool = False
    termination_reason: Optional[str] = None

    @property
    def n_questions_asked(self) -> int:
        return len(self.asked_questions)

    def snapshot(self) -> EngineSnapshot:
        """Незмінна глибока копія стану"""
        return EngineSnapshot(
            cycle=self.cycle,
            hypotheses=[h.model_copy(deep=True) for h in self.hypotheses],
            asked_questions=[q.model_copy(deep=True) for q in self.asked_questions],
            evidence=self.evidence.copy_records(),
            terminated=self.terminated,
            termination_reason=self.termination_reason,
        )
