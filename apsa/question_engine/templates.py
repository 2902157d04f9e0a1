"""APSA — Тексти питань"""

import re
from typing import Optional

DEFAULT_TEMPLATE = "Have you experienced {symptom}?"

# "have you experienced X": так транспорт повертає питання планувальника
TARGET_PATTERN = re.compile(r"have you experienced ([a-z0-9 \-]+)")


def render_question(symptom: str, template: str = DEFAULT_TEMPLATE) -> str:
    return template.format(symptom=symptom)


def parse_question_target(text: str) -> Optional[str]:
    """
    Витягнути симптом з питання виду "Have you experienced X?".

    Args:
        text: Текст питання

    Returns:
        Симптом або None
    """
    if not text:
        return None
    match = TARGET_PATTERN.search(text.lower())
    if not match:
        return None
    target = match.group(1).strip()
    return target or None
