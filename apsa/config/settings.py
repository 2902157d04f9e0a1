"""
APSA — Налаштування системи

Всі параметри системи зібрані в dataclass-и для:
- Типізації
- Легкого доступу через config.scorer.top_n
- Серіалізації в YAML
"""

import logging
from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# KNOWLEDGE BASE CONFIGURATION
# =============================================================================

@dataclass
class KnowledgeBaseConfig:
    """Параметри побудови бази знань"""

    # Токени коротші за це значення відкидаються
    min_token_length: int = 3

    # Обмеження кількості рядків датасету (браузерна версія брала 400)
    max_conditions: Optional[int] = None

    # Шлях до JSON датасету
    dataset_path: Optional[str] = None


# =============================================================================
# HYPOTHESIS SCORER CONFIGURATION
# =============================================================================

@dataclass
class ScorerConfig:
    """Параметри оцінювання гіпотез"""

    present_weight: float = 2.0   # + за кожен збіг присутнього симптому
    absent_weight: float = 2.0    # - за кожен збіг відсутнього симптому
    top_n: int = 6                # скільки гіпотез залишаємо
    probability_floor: float = 0.001  # мінімальний score після зсуву


# =============================================================================
# QUESTION PLANNER CONFIGURATION
# =============================================================================

@dataclass
class QuestionPlannerConfig:
    """Параметри вибору питань"""

    min_hypotheses: int = 2
    question_template: str = "Have you experienced {symptom}?"
    rationale: str = "High information gain discriminating among leading hypotheses"

    # None = без обмеження
    max_questions: Optional[int] = None


# =============================================================================
# CO-OCCURRENCE / SUGGESTIONS
# =============================================================================

@dataclass
class CooccurrenceConfig:
    """Параметри пошуку супутніх симптомів"""
    default_limit: int = 6
    min_token_length: int = 3


@dataclass
class SuggestionConfig:
    """Параметри підказок "інші симптоми" """
    limit: int = 8


# =============================================================================
# LOGGING
# =============================================================================

@dataclass
class LoggingConfig:
    """Параметри логування"""
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class APSAConfig:
    """
    Головна конфігурація APSA

    Приклад використання:
        config = APSAConfig()
        print(config.scorer.top_n)  # 6
        print(config.planner.question_template)
    """

    # Метадані
    version: str = "0.1.0"
    project_name: str = "APSA"

    # Компоненти
    knowledge_base: KnowledgeBaseConfig = field(default_factory=KnowledgeBaseConfig)
    scorer: ScorerConfig = field(default_factory=ScorerConfig)
    planner: QuestionPlannerConfig = field(default_factory=QuestionPlannerConfig)
    cooccurrence: CooccurrenceConfig = field(default_factory=CooccurrenceConfig)
    suggestions: SuggestionConfig = field(default_factory=SuggestionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config() -> APSAConfig:
    """Отримати конфігурацію за замовчуванням"""
    return APSAConfig()


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Налаштувати кореневий logger.

    Викликається скриптами, не бібліотекою.
    """
    config = config or LoggingConfig()
    level = getattr(logging, config.level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.format)
