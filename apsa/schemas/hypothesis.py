"""
APSA — Схеми гіпотез та питань

Pydantic моделі для:
- Hypothesis: кандидат-стан з нормалізованою ймовірністю
- QuestionPlan: запропоноване уточнююче питання
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Hypothesis(BaseModel):
    """Гіпотеза (кандидат-стан)"""
    condition: str = Field(..., description="Назва стану")
    probability: float = Field(..., ge=0.0, le=1.0, description="Нормалізована ймовірність")
    supporting: List[str] = Field(default_factory=list, description="Свідчення за")
    contradicting: List[str] = Field(default_factory=list, description="Свідчення проти")

    def __repr__(self) -> str:
        return f"Hypothesis('{self.condition}', p={self.probability:.3f})"


class QuestionPlan(BaseModel):
    """
    Уточнююче питання, запропоноване планувальником.

    Незмінне після створення.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "question": "Have you experienced fever?",
                "target_symptom": "fever",
                "rationale": "High information gain discriminating among leading hypotheses",
                "expected_splits": {"Strep Throat": 0.5, "Common Cold": 0.5},
                "information_gain": 1.0,
            }
        },
    )

    question: str = Field(..., description="Текст питання для користувача")
    target_symptom: str = Field(..., description="Симптом, за яким розрізняємо")
    rationale: str = Field(default="", description="Внутрішнє пояснення")
    expected_splits: Dict[str, float] = Field(
        default_factory=dict,
        description="Ймовірності гіпотез на момент пропозиції {condition: p}"
    )
    information_gain: float = Field(default=0.0, ge=0.0)
