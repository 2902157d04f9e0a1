"""
APSA — Модуль движка

Компоненти:
- TriageEngine: Одна сесія опитування
- EngineState: Стан сесії (належить движку)
- EvidenceStore: Свідчення сесії
"""

from .evidence_store import EvidenceStore
from .state import EngineState
from .engine import TriageEngine, MAX_QUESTIONS_REASON


__all__ = [
    "TriageEngine",
    "EngineState",
    "EvidenceStore",
    "MAX_QUESTIONS_REASON",
]
