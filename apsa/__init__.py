"""
APSA — Advanced Predictive Symptom Asking

Адаптивний движок опитування для симптом-тріажу: збирає свідчення про
симптоми, підтримує ранжовані гіпотези щодо станів і пропонує наступне
найінформативніше питання.

Модулі:
- config: Конфігурація системи
- schemas: Моделі даних (свідчення, гіпотези, питання, знімок стану)
- knowledge: База знань (стан → симптоми) та пошук супутніх симптомів
- nlp: Витягування симптомів з вільного тексту
- hypothesis: Оцінювання гіпотез
- question_engine: Вибір наступного питання за Information Gain
- engine: TriageEngine — одна сесія опитування
"""

__version__ = "0.1.0"

from .config import APSAConfig, get_default_config
from .engine import TriageEngine
