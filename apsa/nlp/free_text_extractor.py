"""
APSA — Free-text Extractor

Легкий сегментатор вільного тексту: розбиває висловлювання на фрази
і залишає тільки ті, що містять ключові слова симптомів.

Приклад:
    extractor = FreeTextExtractor()
    extractor.extract("Sore throat, mild; fever since Monday")
    # ['sore throat', 'fever since monday']
"""

import logging
import re
from typing import List

from .keywords import is_symptom_phrase

logger = logging.getLogger(__name__)

PHRASE_SPLIT_PATTERN = re.compile(r"[,;\n]")


class FreeTextExtractor:
    """
    Витягування фраз-кандидатів у свідчення.

    Нічого не знає про стан сесії: лише перетворює текст на
    впорядкований список фраз без дублікатів.
    """

    def split_phrases(self, text: str) -> List[str]:
        """Розбити текст на непорожні фрази (lowercase, strip)"""
        if not text:
            return []
        phrases = (p.strip() for p in PHRASE_SPLIT_PATTERN.split(text.lower()))
        return [p for p in phrases if p]

    def extract(self, text: str) -> List[str]:
        """
        Витягнути фрази з симптомами.

        Args:
            text: Висловлювання користувача

        Returns:
            Фрази, що містять ключові слова, у порядку появи
        """
        if not isinstance(text, str):
            return []

        phrases: List[str] = []
        for phrase in self.split_phrases(text):
            if is_symptom_phrase(phrase) and phrase not in phrases:
                phrases.append(phrase)

        logger.debug("Extracted %d symptom phrases from utterance", len(phrases))
        return phrases
