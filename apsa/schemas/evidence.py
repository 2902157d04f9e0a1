"""
APSA — Схеми свідчень про симптоми

Pydantic моделі для:
- Presence: присутність симптому
- SymptomQualifiers: уточнення симптому за OLDCART
- SymptomEvidence: одне свідчення, прив'язане до ходу розмови
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Presence(str, Enum):
    """Статус симптому"""
    PRESENT = "present"
    ABSENT = "absent"
    UNCERTAIN = "uncertain"

    @classmethod
    def from_answer(cls, answer: str) -> "Presence":
        """
        Перетворити коротку відповідь користувача на статус.

        "yes" → PRESENT, "no" → ABSENT, все інше ("not sure", ...) → UNCERTAIN
        """
        normalized = (answer or "").strip().lower()
        if normalized in ("yes", "y", "true", "present"):
            return cls.PRESENT
        if normalized in ("no", "n", "false", "absent"):
            return cls.ABSENT
        return cls.UNCERTAIN


class SymptomQualifiers(BaseModel):
    """
    Уточнення симптому за схемою OLDCART.

    Onset, Location, Duration, Character, Aggravating, Relieving, Timing
    + Severity.
    """
    model_config = ConfigDict(extra="forbid")

    onset: Optional[str] = Field(default=None, description="Коли почалось")
    location: Optional[str] = Field(default=None, description="Де саме")
    duration: Optional[str] = Field(default=None, description="Як довго триває")
    character: Optional[str] = Field(default=None, description="Характер")
    aggravating: Optional[str] = Field(default=None, description="Що погіршує")
    relieving: Optional[str] = Field(default=None, description="Що полегшує")
    timing: Optional[str] = Field(default=None, description="Постійно / епізодично")
    severity: Optional[str] = Field(default=None, description="Інтенсивність")

    def is_empty(self) -> bool:
        return all(v is None for v in self.model_dump().values())


class SymptomEvidence(BaseModel):
    """
    Свідчення про симптом.

    На одну назву (name) — не більше одного запису; оновлення
    перезаписує presence на місці.
    """
    name: str = Field(..., description="Нормалізована назва / фраза симптому")
    presence: Presence = Field(default=Presence.PRESENT)
    source_turn_index: int = Field(..., ge=0, description="Номер ходу розмови")
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    qualifiers: Optional[SymptomQualifiers] = Field(default=None)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Нормалізація назви: strip + lowercase"""
        return v.strip().lower()

    @property
    def is_present(self) -> bool:
        return self.presence == Presence.PRESENT

    @property
    def is_absent(self) -> bool:
        return self.presence == Presence.ABSENT
