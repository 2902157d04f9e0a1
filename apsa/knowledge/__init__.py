"""
APSA — Модуль бази знань

Компоненти:
- KnowledgeBase: стан → токени симптомів (лише читання після побудови)
- CooccurrenceLookup: Пошук супутніх симптомів

Приклад використання:
    from apsa.knowledge import KnowledgeBase, CooccurrenceLookup

    kb = KnowledgeBase.from_json_file("data/mayo_all_letters_symptoms.json")
    related = CooccurrenceLookup(kb).get_cooccurring("sore throat")
"""

from .loader import (
    KnowledgeBase,
    load_dataset,
    tokenize_symptoms,
)

from .cooccurrence import CooccurrenceLookup


__all__ = [
    "KnowledgeBase",
    "load_dataset",
    "tokenize_symptoms",
    "CooccurrenceLookup",
]
