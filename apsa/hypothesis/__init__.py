"""
APSA — Модуль гіпотез

Компоненти:
- HypothesisScorer: Перерахунок ранжованих гіпотез зі свідчень
- ConditionScore: Сирий score стану
"""

from .scorer import (
    HypothesisScorer,
    ConditionScore,
)


__all__ = [
    "HypothesisScorer",
    "ConditionScore",
]
