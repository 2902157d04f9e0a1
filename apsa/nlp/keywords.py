"""
APSA — Словник ключових слів симптомів

Фіксований перелік фрагментів, за якими фраза вважається "клінічною".
Перелік є частиною контракту, а не параметром налаштування.
"""

import re
from typing import Pattern, Tuple

# Ключові слова для витягування з тексту та для кандидатів-питань
SYMPTOM_KEYWORDS: Tuple[str, ...] = (
    "pain",
    "ache",
    "fever",
    "cough",
    "dizz",
    "nausea",
    "vomit",
    "headache",
    "fatigue",
    "tired",
    "sore",
    "throat",
    "rash",
    "itch",
    "swelling",
    "cramp",
    "diarrhea",
    "constipation",
    "shortness of breath",
    "chest tight",
    "palpitation",
)

# Ширший перелік для підказок "інші симптоми"
SUGGESTION_KEYWORDS: Tuple[str, ...] = (
    "pain",
    "fever",
    "cough",
    "rash",
    "headache",
    "nausea",
    "vomit",
    "swelling",
    "fatigue",
    "diarrhea",
    "shortness of breath",
    "sore",
    "throat",
    "runny nose",
    "stiff",
    "chills",
)


def compile_keywords(keywords: Tuple[str, ...]) -> Pattern:
    return re.compile("|".join(re.escape(k) for k in keywords))


SYMPTOM_PATTERN = compile_keywords(SYMPTOM_KEYWORDS)
SUGGESTION_PATTERN = compile_keywords(SUGGESTION_KEYWORDS)


def is_symptom_phrase(phrase: str) -> bool:
    """Чи містить фраза (в нижньому регістрі) ключове слово симптому"""
    return bool(SYMPTOM_PATTERN.search(phrase))


def is_suggestible(token: str) -> bool:
    return bool(SUGGESTION_PATTERN.search(token))
