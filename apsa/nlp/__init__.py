"""
APSA — NLP модуль

Витягування симптомів з вільного тексту за ключовими словами.

Компоненти:
- keywords: Фіксований словник ключових слів симптомів
- FreeTextExtractor: Сегментатор висловлювань

Приклад використання:
    from apsa.nlp import FreeTextExtractor

    phrases = FreeTextExtractor().extract("I have a sore throat and a mild fever")
    # ['i have a sore throat and a mild fever']
"""

from .keywords import (
    SYMPTOM_KEYWORDS,
    SUGGESTION_KEYWORDS,
    SYMPTOM_PATTERN,
    is_symptom_phrase,
    is_suggestible,
)

from .free_text_extractor import FreeTextExtractor


__all__ = [
    'SYMPTOM_KEYWORDS',
    'SUGGESTION_KEYWORDS',
    'SYMPTOM_PATTERN',
    'is_symptom_phrase',
    'is_suggestible',
    'FreeTextExtractor',
]
