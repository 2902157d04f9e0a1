"""
APSA — Information Gain для вибору питань

Для симптому-кандидата s і поточних гіпотез:

    P(yes) = Σ P(h), де токени h містять s
    P(no)  = 1 - P(yes)
    gain   = H(P(yes), P(no)) = -(p·log2 p + q·log2 q)

Максимум (1 біт) — коли симптом ділить ймовірнісну масу навпіл.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from apsa.knowledge import KnowledgeBase
from apsa.schemas import Hypothesis


@dataclass
class GainResult:
    """Результат обчислення gain для симптому"""
    symptom: str
    gain: float
    p_present: float
    p_absent: float

    def __repr__(self) -> str:
        return (
            f"GainResult(symptom='{self.symptom}', gain={self.gain:.4f}, "
            f"p_present={self.p_present:.2%}, p_absent={self.p_absent:.2%})"
        )


def entropy(probs, base: float = 2.0) -> float:
    """
    Ентропія Шеннона.

    H = -Σ p_i * log(p_i); нульові ймовірності не дають внеску.

    Args:
        probs: Масив ймовірностей
        base: Основа логарифма (2 = біти)
    """
    probs = np.asarray(probs, dtype=np.float64)
    probs = probs[probs > 0]
    return float(-np.sum(probs * np.log(probs)) / np.log(base))


def binary_entropy(p: float) -> float:
    """Ентропія бінарного розподілу (p, 1-p) в бітах"""
    q = 1.0 - p
    return float(-(p * np.log2(p) + q * np.log2(q)))


def split_probability(
    symptom: str,
    hypotheses: Sequence[Hypothesis],
    knowledge_base: KnowledgeBase,
) -> float:
    """P(yes): сума ймовірностей гіпотез, що точно містять токен"""
    p_present = 0.0
    for h in hypotheses:
        if knowledge_base.has_token(h.condition, symptom):
            p_present += h.probability
    return p_present


def compute_gain(
    symptom: str,
    hypotheses: Sequence[Hypothesis],
    knowledge_base: KnowledgeBase,
) -> Optional[GainResult]:
    """
    Обчислити gain симптому.

    Returns:
        GainResult або None, якщо симптом нічого не розрізняє
        (P(yes) або P(no) рівно 0)
    """
    p_present = split_probability(symptom, hypotheses, knowledge_base)
    p_absent = 1.0 - p_present

    # <= а не == : сума float може ледь перевищити 1
    if p_present <= 0 or p_absent <= 0:
        return None

    return GainResult(
        symptom=symptom,
        gain=binary_entropy(p_present),
        p_present=p_present,
        p_absent=p_absent,
    )
