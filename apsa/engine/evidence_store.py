"""
APSA — Сховище свідчень

Впорядкована колекція свідчень з інваріантом "одна назва — один
запис". Свідчення не видаляються протягом сесії, лише очищуються
при перезапуску.
"""

from typing import Dict, Iterator, List, Optional

from apsa.schemas import Presence, SymptomEvidence, SymptomQualifiers


def normalize_name(name: str) -> str:
    return (name or "").strip().lower()


class EvidenceStore:
    """
    Сховище свідчень.

    Приклад:
        store = EvidenceStore()
        store.add_if_absent("sore throat", turn_index=0)
        store.upsert("sore throat", Presence.ABSENT, turn_index=3)

        print(store.names)            # ['sore throat']
        print(store.get("sore throat").presence)  # Presence.ABSENT
    """

    def __init__(self):
        self._records: Dict[str, SymptomEvidence] = {}

    def add_if_absent(self, name: str, turn_index: int, presence: Presence = Presence.PRESENT) -> Optional[SymptomEvidence]:
        """
        Додати свідчення, якщо такої назви ще немає.

        Returns:
            Новий запис або None (назва вже є, або порожня)
        """
        key = normalize_name(name)
        if not key or key in self._records:
            return None

        record = SymptomEvidence(name=key, presence=presence, source_turn_index=turn_index)
        self._records[key] = record
        return record

    def upsert(
        self,
        name: str,
        presence: Presence,
        turn_index: int,
        confidence: Optional[float] = None,
        qualifiers: Optional[SymptomQualifiers] = None,
    ) -> Optional[SymptomEvidence]:
        """
        Створити або оновити свідчення.

        Для існуючого запису перезаписується presence (і confidence /
        qualifiers, якщо передані); source_turn_index лишається від
        першого запису.
        """
        key = normalize_name(name)
        if not key:
            return None

        if qualifiers is not None:
            qualifiers = SymptomQualifiers.model_validate(qualifiers)

        record = self._records.get(key)
        if record is None:
            record = SymptomEvidence(
                name=key,
                presence=presence,
                source_turn_index=turn_index,
                confidence=confidence,
                qualifiers=qualifiers,
            )
            self._records[key] = record
            return record

        record.presence = presence
        if confidence is not None:
            record.confidence = confidence
        if qualifiers is not None:
            record.qualifiers = qualifiers
        return record

    def get(self, name: str) -> Optional[SymptomEvidence]:
        return self._records.get(normalize_name(name))

    @property
    def names(self) -> List[str]:
        return list(self._records)

    @property
    def records(self) -> List[SymptomEvidence]:
        return list(self._records.values())

    def copy_records(self) -> List[SymptomEvidence]:
        """Глибокі копії записів для зовнішніх споживачів"""
        return [r.model_copy(deep=True) for r in self._records.values()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._records

    def __iter__(self) -> Iterator[SymptomEvidence]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"EvidenceStore(records={len(self)})"
