"""
APSA — Question Planner

Вибір наступного питання, що найкраще розрізняє поточні гіпотези.

Алгоритм:
1. Менше ніж min_hypotheses гіпотез → питання немає (None)
2. Збираємо токени всіх гіпотез з частотою (порядок першої появи)
3. Відкидаємо вже відомі свідчення та "неклінічні" токени
4. Для кожного кандидата: gain = H(P(yes), P(no))
5. Перемагає строго найбільший gain; при рівності — перший знайдений
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from apsa.config import QuestionPlannerConfig
from apsa.knowledge import KnowledgeBase
from apsa.nlp import is_symptom_phrase
from apsa.schemas import Hypothesis, QuestionPlan

from .information_gain import GainResult, compute_gain
from .templates import render_question

logger = logging.getLogger(__name__)


class QuestionPlanner:
    """
    Планувальник питань.

    Не зберігає стан: історію питань веде движок.

    Приклад:
        planner = QuestionPlanner(kb)
        plan = planner.plan(hypotheses, known_symptoms={"sore throat"})

        if plan:
            print(plan.question)          # Have you experienced fever?
            print(plan.information_gain)  # 1.0
    """

    def __init__(self, knowledge_base: KnowledgeBase, config: Optional[QuestionPlannerConfig] = None):
        self.kb = knowledge_base
        self.config = config or QuestionPlannerConfig()

    def symptom_frequencies(self, hypotheses: Sequence[Hypothesis]) -> Dict[str, int]:
        """
        Скільки гіпотез містить кожен токен.

        Returns:
            {token: count} у порядку першої появи (гіпотези за рангом,
            токени за порядком бази знань)
        """
        frequencies: Dict[str, int] = {}
        for h in hypotheses:
            for token in self.kb.tokens(h.condition):
                frequencies[token] = frequencies.get(token, 0) + 1
        return frequencies

    def candidate_symptoms(
        self,
        hypotheses: Sequence[Hypothesis],
        known_symptoms: Iterable[str] = (),
    ) -> List[str]:
        """Кандидати для питання: не відомі і "клінічні" токени"""
        known = set(known_symptoms)
        return [
            token for token in self.symptom_frequencies(hypotheses)
            if token not in known and is_symptom_phrase(token)
        ]

    def rank_candidates(
        self,
        hypotheses: Sequence[Hypothesis],
        known_symptoms: Iterable[str] = (),
    ) -> List[GainResult]:
        """
        Всі кандидати з ненульовим розщепленням, відсортовані за gain.

        Корисно для діагностики; сам вибір робить plan().
        """
        results = []
        for token in self.candidate_symptoms(hypotheses, known_symptoms):
            result = compute_gain(token, hypotheses, self.kb)
            if result is not None:
                results.append(result)
        return sorted(results, key=lambda r: r.gain, reverse=True)

    def select_best(
        self,
        hypotheses: Sequence[Hypothesis],
        known_symptoms: Iterable[str] = (),
    ) -> Optional[GainResult]:
        """Кандидат з найбільшим gain або None"""
        if len(hypotheses) < self.config.min_hypotheses:
            return None

        best: Optional[GainResult] = None
        for token in self.candidate_symptoms(hypotheses, known_symptoms):
            result = compute_gain(token, hypotheses, self.kb)
            if result is None:
                continue
            if best is None or result.gain > best.gain:
                best = result
        return best

    def plan(
        self,
        hypotheses: Sequence[Hypothesis],
        known_symptoms: Iterable[str] = (),
    ) -> Optional[QuestionPlan]:
        """
        Запропонувати наступне питання.

        Args:
            hypotheses: Поточні гіпотези
            known_symptoms: Назви вже записаних свідчень

        Returns:
            QuestionPlan або None, якщо розрізняти нічим
        """
        best = self.select_best(hypotheses, known_symptoms)
        if best is None:
            logger.debug("No discriminating question for %d hypotheses", len(hypotheses))
            return None

        return QuestionPlan(
            question=render_question(best.symptom, self.config.question_template),
            target_symptom=best.symptom,
            rationale=self.config.rationale,
            expected_splits={h.condition: h.probability for h in hypotheses},
            information_gain=best.gain,
        )
