"""
APSA — Оцінювання гіпотез

Повний перерахунок гіпотез зі свідчень і бази знань:

score(стан) = Σ по свідченнях Σ по токенах стану:
    +present_weight, якщо токен містить назву присутнього свідчення
    -absent_weight,  якщо токен містить назву відсутнього свідчення

Збіг — підрядок (evidence.name in token), а не точна рівність токенів.
Стани без жодного підтверджуючого збігу відкидаються. Залишаємо top_n,
зсуваємо так, щоб мінімум став probability_floor, і нормалізуємо.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from apsa.config import ScorerConfig
from apsa.knowledge import KnowledgeBase
from apsa.schemas import Hypothesis, SymptomEvidence

logger = logging.getLogger(__name__)


@dataclass
class ConditionScore:
    """Сирий score стану до нормалізації"""
    condition: str
    score: float = 0.0
    supporting: List[str] = field(default_factory=list)
    contradicting: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"ConditionScore('{self.condition}', score={self.score})"


class HypothesisScorer:
    """
    Оцінювач гіпотез.

    Детермінований: однакові свідчення і база знань дають ідентичний
    результат (сортування стабільне, порядок станів — порядок датасету).

    Приклад:
        scorer = HypothesisScorer(kb)
        hypotheses = scorer.score(evidence)

        for h in hypotheses:
            print(h.condition, h.probability, h.supporting)
    """

    def __init__(self, knowledge_base: KnowledgeBase, config: Optional[ScorerConfig] = None):
        self.kb = knowledge_base
        self.config = config or ScorerConfig()

    def score_condition(self, condition: str, evidence: Iterable[SymptomEvidence]) -> ConditionScore:
        """Сирий score одного стану"""
        result = ConditionScore(condition=condition)
        tokens = self.kb.tokens(condition)

        for ev in evidence:
            if not (ev.is_present or ev.is_absent) or not ev.name:
                continue
            for token in tokens:
                if ev.name not in token:
                    continue
                if ev.is_present:
                    result.score += self.config.present_weight
                    if ev.name not in result.supporting:
                        result.supporting.append(ev.name)
                else:
                    result.score -= self.config.absent_weight
                    if ev.name not in result.contradicting:
                        result.contradicting.append(ev.name)

        return result

    def raw_scores(self, evidence: Iterable[SymptomEvidence]) -> Dict[str, ConditionScore]:
        """
        Сирі score всіх станів (включно з тими, що будуть відкинуті).

        Returns:
            {condition: ConditionScore} у порядку бази знань
        """
        evidence = list(evidence)
        return {
            condition: self.score_condition(condition, evidence)
            for condition in self.kb.conditions
        }

    def score(self, evidence: Iterable[SymptomEvidence]) -> List[Hypothesis]:
        """
        Перерахувати гіпотези.

        Args:
            evidence: Поточні свідчення

        Returns:
            До top_n гіпотез за спаданням score; сума ймовірностей = 1.
            Порожній список, якщо жоден стан не має підтверджуючих збігів.
        """
        scored = [s for s in self.raw_scores(evidence).values() if s.supporting]

        if not scored:
            return []

        # sorted стабільний: при рівності лишається порядок бази знань
        top = sorted(scored, key=lambda s: s.score, reverse=True)[:self.config.top_n]

        minimum = min(s.score for s in top)
        shifted = [s.score - minimum + self.config.probability_floor for s in top]
        total = sum(shifted) or 1.0

        hypotheses = [
            Hypothesis(
                condition=s.condition,
                probability=value / total,
                supporting=list(s.supporting),
                contradicting=list(s.contradicting),
            )
            for s, value in zip(top, shifted)
        ]

        logger.debug(
            "Scored %d/%d conditions, kept %d",
            len(scored), len(self.kb), len(hypotheses)
        )
        return hypotheses

