"""APSA — Модуль конфігурації"""
from .settings import (
    APSAConfig,
    get_default_config,
    setup_logging,
    KnowledgeBaseConfig,
    ScorerConfig,
    QuestionPlannerConfig,
    CooccurrenceConfig,
    SuggestionConfig,
    LoggingConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml, config_from_dict

__all__ = [
    "APSAConfig",
    "get_default_config",
    "setup_logging",
    "KnowledgeBaseConfig",
    "ScorerConfig",
    "QuestionPlannerConfig",
    "CooccurrenceConfig",
    "SuggestionConfig",
    "LoggingConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
    "config_from_dict",
]
