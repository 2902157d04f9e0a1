"""
APSA — Супутні симптоми

Для фрази симптому знаходить токени, що найчастіше зустрічаються
разом з нею в одних і тих самих станах бази знань.

Операція лише читає базу знань і не впливає на стан сесії.
"""

from collections import Counter
from typing import List

from .loader import KnowledgeBase


class CooccurrenceLookup:
    """
    Пошук супутніх симптомів.

    Приклад:
        lookup = CooccurrenceLookup(kb)
        related = lookup.get_cooccurring("sore throat", limit=5)
        # ['fever', 'swollen glands', 'runny nose', 'cough']
    """

    def __init__(self, knowledge_base: KnowledgeBase, default_limit: int = 6, min_token_length: int = 3):
        self.kb = knowledge_base
        self.default_limit = default_limit
        self.min_token_length = min_token_length

    def get_cooccurring(self, symptom: str, limit: int = None) -> List[str]:
        """
        Отримати супутні симптоми.

        Стан враховується, якщо хоча б один його токен містить фразу
        як підрядок. Кожен інший токен такого стану отримує +1 (один раз
        на стан). Токени, що самі містять фразу, не повертаються.

        Args:
            symptom: Фраза симптому
            limit: Максимальна кількість результатів (default: default_limit)

        Returns:
            Токени за спаданням частоти; при рівності — за порядком появи
        """
        limit = self.default_limit if limit is None else limit
        target = (symptom or "").strip().lower()

        if not target or limit <= 0:
            return []

        counter: Counter = Counter()
        for _, tokens in self.kb.items():
            if not any(target in token for token in tokens):
                continue
            for token in tokens:
                if target in token or len(token) < self.min_token_length:
                    continue
                counter[token] += 1

        # most_common стабільний для рівних значень (порядок вставки)
        return [token for token, _ in counter.most_common(limit)]
