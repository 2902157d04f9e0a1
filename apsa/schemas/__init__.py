"""
APSA — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- evidence.py: Presence, SymptomQualifiers, SymptomEvidence
- hypothesis.py: Hypothesis, QuestionPlan
- state.py: EngineSnapshot

Приклад використання:
    from apsa.schemas import SymptomEvidence, Presence

    ev = SymptomEvidence(name="Sore Throat", presence=Presence.PRESENT, source_turn_index=0)
    print(ev.name)  # "sore throat"

    json_data = ev.model_dump_json()
"""

from .evidence import (
    Presence,
    SymptomQualifiers,
    SymptomEvidence,
)

from .hypothesis import (
    Hypothesis,
    QuestionPlan,
)

from .state import EngineSnapshot


__all__ = [
    # Evidence
    "Presence",
    "SymptomQualifiers",
    "SymptomEvidence",

    # Hypotheses / questions
    "Hypothesis",
    "QuestionPlan",

    # State
    "EngineSnapshot",
]
