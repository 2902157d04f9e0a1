"""
APSA — База знань

Будує з табличного датасету (стан, опис симптомів) відображення
стан → впорядкована множина нормалізованих токенів симптомів.

Формат датасету (JSON масив):
[
  {"disease_name": "Strep Throat", "symptoms": "sore throat; fever; swollen glands"},
  ...
]

Також приймається словник {"Strep Throat": "sore throat; fever", ...},
де значення може бути рядком або списком рядків.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

# Межі речень у текстовому описі симптомів
TOKEN_SPLIT_PATTERN = re.compile(r"[.;\n]")

# Ключі з назвою стану в рядку датасету (перший знайдений)
LABEL_KEYS = ("disease_name", "condition", "disease")


def tokenize_symptoms(text: Any, min_length: int = 3) -> List[str]:
    """
    Розбити опис симптомів на токени.

    Розбиття за '.', ';' та переносом рядка; strip + lowercase;
    залишаємо токени довжиною >= min_length. Порядок першої появи
    зберігається, дублікати відкидаються.

    Args:
        text: Опис симптомів (не-рядок → порожній список)
        min_length: Мінімальна довжина токена

    Returns:
        Список унікальних токенів
    """
    if not isinstance(text, str) or not text:
        return []

    tokens: Dict[str, None] = {}
    for part in TOKEN_SPLIT_PATTERN.split(text):
        token = part.strip().lower()
        if len(token) >= min_length:
            tokens[token] = None
    return list(tokens)


def _row_label(row: Mapping[str, Any]) -> Optional[str]:
    for key in LABEL_KEYS:
        value = row.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


class KnowledgeBase:
    """
    База знань: стан → токени симптомів.

    Будується один раз і далі лише читається, тому один екземпляр
    можна безпечно ділити між сесіями.

    Приклад:
        kb = KnowledgeBase.from_rows([
            {"disease_name": "Strep Throat", "symptoms": "sore throat; fever"},
            {"disease_name": "Common Cold", "symptoms": "runny nose; sore throat"},
        ])

        print(kb.conditions)               # ['Strep Throat', 'Common Cold']
        print(kb.tokens("Common Cold"))    # ('runny nose', 'sore throat')
        print(kb.has_token("Strep Throat", "fever"))  # True
    """

    def __init__(self, knowledge: Optional[Mapping[str, Iterable[str]]] = None):
        """
        Args:
            knowledge: {condition: tokens}; токени вже нормалізовані
        """
        self._tokens: Dict[str, Tuple[str, ...]] = {}
        self._token_sets: Dict[str, frozenset] = {}

        for condition, tokens in (knowledge or {}).items():
            ordered = tuple(dict.fromkeys(tokens))
            self._tokens[condition] = ordered
            self._token_sets[condition] = frozenset(ordered)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Any],
        min_token_length: int = 3,
        max_conditions: Optional[int] = None,
    ) -> "KnowledgeBase":
        """
        Створити з рядків датасету.

        Дублікат назви стану перезаписує попередній запис (без об'єднання).
        Некоректні рядки не є помилкою: рядок без опису дає порожню
        множину токенів, рядок без назви пропускається.

        Args:
            rows: Послідовність словників {"disease_name", "symptoms"}
            min_token_length: Мінімальна довжина токена
            max_conditions: Скільки перших рядків взяти (None = всі)
        """
        knowledge: Dict[str, List[str]] = {}

        for index, row in enumerate(rows):
            if max_conditions is not None and index >= max_conditions:
                break

            if not isinstance(row, Mapping):
                logger.warning("Skipping dataset row %d: not a mapping", index)
                continue

            label = _row_label(row)
            if label is None:
                logger.warning("Skipping dataset row %d: missing condition label", index)
                continue

            if label in knowledge:
                # Позиція стану лишається від першої появи
                logger.warning("Duplicate condition '%s' at row %d overwrites earlier entry", label, index)

            knowledge[label] = tokenize_symptoms(row.get("symptoms"), min_token_length)

        return cls(knowledge)

    @classmethod
    def from_json_file(
        cls,
        path: str,
        min_token_length: int = 3,
        max_conditions: Optional[int] = None,
    ) -> "KnowledgeBase":
        """
        Створити з JSON файлу.

        Відсутній або пошкоджений файл не зупиняє роботу: повертається
        порожня база (деградований режим), помилка логується.
        """
        try:
            rows = load_dataset(path)
        except (OSError, ValueError) as e:
            logger.error("Failed loading dataset %s: %s", path, e)
            return cls()

        kb = cls.from_rows(rows, min_token_length=min_token_length, max_conditions=max_conditions)
        logger.info("Knowledge base loaded from %s: %d conditions", path, len(kb))
        return kb

    # ------------------------------------------------------------------
    # Доступ
    # ------------------------------------------------------------------

    @property
    def conditions(self) -> List[str]:
        """Всі стани в порядку датасету"""
        return list(self._tokens)

    def tokens(self, condition: str) -> Tuple[str, ...]:
        """Токени стану в порядку першої появи"""
        return self._tokens.get(condition, ())

    def has_token(self, condition: str, token: str) -> bool:
        """Точна перевірка належності токена стану"""
        return token in self._token_sets.get(condition, frozenset())

    def items(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        return iter(self._tokens.items())

    @property
    def is_empty(self) -> bool:
        return not self._tokens

    @property
    def all_tokens(self) -> List[str]:
        """Всі унікальні токени"""
        seen: Dict[str, None] = {}
        for tokens in self._tokens.values():
            seen.update(dict.fromkeys(tokens))
        return list(seen)

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, condition: object) -> bool:
        return condition in self._tokens

    def __repr__(self) -> str:
        return f"KnowledgeBase(conditions={len(self)}, tokens={len(self.all_tokens)})"


def load_dataset(path: str) -> List[Dict[str, Any]]:
    """
    Завантажити датасет з JSON файлу.

    Args:
        path: Шлях до JSON (масив записів або словник {стан: симптоми})

    Returns:
        Список записів {"disease_name": ..., "symptoms": ...}

    Raises:
        FileNotFoundError: Файл не існує
        ValueError: Файл не є коректним JSON датасетом
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        return data

    if isinstance(data, dict):
        rows = []
        for condition, symptoms in data.items():
            if isinstance(symptoms, list):
                symptoms = "; ".join(str(s) for s in symptoms)
            rows.append({"disease_name": condition, "symptoms": symptoms})
        return rows

    raise ValueError(f"Unsupported dataset format in {path}: {type(data).__name__}")
