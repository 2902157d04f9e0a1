"""
Тести для модуля schemas

Запуск: pytest tests/test_schemas.py -v
"""

import pytest
from pydantic import ValidationError


def test_symptom_evidence():
    """Тест моделі SymptomEvidence"""
    from apsa.schemas import SymptomEvidence, Presence

    evidence = SymptomEvidence(name="  Sore Throat ", source_turn_index=2)

    assert evidence.name == "sore throat"  # нормалізовано
    assert evidence.presence == Presence.PRESENT
    assert evidence.is_present
    assert evidence.confidence is None
    assert evidence.qualifiers is None

    with pytest.raises(ValidationError):
        SymptomEvidence(name="fever", source_turn_index=-1)
    with pytest.raises(ValidationError):
        SymptomEvidence(name="fever", source_turn_index=0, confidence=1.5)


def test_qualifiers_fixed_schema():
    """Тест OLDCART уточнень"""
    from apsa.schemas import SymptomQualifiers

    qualifiers = SymptomQualifiers(onset="Sudden", location="Back of throat")

    assert qualifiers.onset == "Sudden"
    assert not qualifiers.is_empty()
    assert SymptomQualifiers().is_empty()

    with pytest.raises(ValidationError):
        SymptomQualifiers(mood="bad")


def test_presence_from_answer():
    """Тест перетворення відповіді"""
    from apsa.schemas import Presence

    assert Presence.from_answer("Yes") == Presence.PRESENT
    assert Presence.from_answer(" no ") == Presence.ABSENT
    assert Presence.from_answer("Not sure") == Presence.UNCERTAIN
    assert Presence.from_answer("") == Presence.UNCERTAIN
    assert Presence("absent") == Presence.ABSENT


def test_snapshot_json():
    """Тест серіалізації знімка"""
    from apsa.schemas import EngineSnapshot, Hypothesis, SymptomEvidence

    snapshot = EngineSnapshot(
        cycle=1,
        hypotheses=[Hypothesis(condition="Flu", probability=1.0, supporting=["fever"])],
        evidence=[SymptomEvidence(name="fever", source_turn_index=0)],
    )

    data = snapshot.model_dump(mode="json")
    assert data["evidence"][0]["presence"] == "present"
    assert snapshot.top_hypothesis.condition == "Flu"
    assert snapshot.evidence_names == ["fever"]

    restored = EngineSnapshot.model_validate_json(snapshot.model_dump_json())
    assert restored == snapshot
