"""Спільні fixtures для тестів APSA"""

import json
from pathlib import Path

import pytest

DEMO_DATASET_PATH = Path(__file__).parent.parent / "data" / "demo_conditions.json"


@pytest.fixture
def two_condition_rows():
    """Мінімальний датасет: ангіна vs застуда"""
    return [
        {"disease_name": "Strep Throat", "symptoms": "sore throat; fever; swollen glands"},
        {"disease_name": "Common Cold", "symptoms": "runny nose; sore throat; cough"},
    ]


@pytest.fixture
def demo_rows():
    with open(DEMO_DATASET_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def knowledge_base(two_condition_rows):
    from apsa.knowledge import KnowledgeBase
    return KnowledgeBase.from_rows(two_condition_rows)


@pytest.fixture
def engine(two_condition_rows):
    from apsa.engine import TriageEngine
    return TriageEngine.from_rows(two_condition_rows)


@pytest.fixture
def demo_engine(demo_rows):
    from apsa.engine import TriageEngine
    return TriageEngine.from_rows(demo_rows)
