"""
APSA — Модуль Question Engine

Пропонує уточнююче питання, що найкраще розрізняє поточні гіпотези,
за бінарною ентропією розщеплення ймовірнісної маси.

gain(s) = -(P(yes)·log2 P(yes) + P(no)·log2 P(no))

Компоненти:
- QuestionPlanner: Вибір найкращого питання
- information_gain: entropy, binary_entropy, compute_gain
- templates: Текст питання та зворотній розбір

Приклад використання:
    from apsa.question_engine import QuestionPlanner

    planner = QuestionPlanner(kb)
    plan = planner.plan(hypotheses, known_symptoms={"sore throat"})

    if plan:
        print(f"Питання: {plan.question}")
        print(f"Gain: {plan.information_gain:.4f}")
"""

from .information_gain import (
    GainResult,
    entropy,
    binary_entropy,
    split_probability,
    compute_gain,
)

from .templates import (
    DEFAULT_TEMPLATE,
    render_question,
    parse_question_target,
)

from .planner import QuestionPlanner


__all__ = [
    # Information Gain
    "GainResult",
    "entropy",
    "binary_entropy",
    "split_probability",
    "compute_gain",

    # Templates
    "DEFAULT_TEMPLATE",
    "render_question",
    "parse_question_target",

    # Planner
    "QuestionPlanner",
]
