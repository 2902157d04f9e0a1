"""
APSA — Головний движок опитування

TriageEngine об'єднує всі компоненти для однієї сесії:
1. FreeTextExtractor — вільний текст → свідчення
2. EvidenceStore — свідчення сесії
3. HypothesisScorer — повний перерахунок гіпотез після кожної зміни
4. QuestionPlanner — наступне питання за Information Gain
5. CooccurrenceLookup — супутні симптоми (лише читання)

Цикл:
    висловлювання → свідчення → гіпотези → питання → відповідь → ...

Один екземпляр = одна сесія. KnowledgeBase можна ділити між
екземплярами, бо вона лише читається.
"""

import logging
from typing import Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from apsa.config import APSAConfig, get_default_config
from apsa.hypothesis import HypothesisScorer
from apsa.knowledge import CooccurrenceLookup, KnowledgeBase
from apsa.nlp import FreeTextExtractor, is_suggestible
from apsa.question_engine import QuestionPlanner, parse_question_target
from apsa.schemas import (
    EngineSnapshot,
    Hypothesis,
    Presence,
    QuestionPlan,
    SymptomEvidence,
    SymptomQualifiers,
)

from .state import EngineState

logger = logging.getLogger(__name__)

MAX_QUESTIONS_REASON = "max_questions_reached"


def _coerce_presence(presence: Union[Presence, str]) -> Presence:
    """Presence або його рядкове значення; невідоме → UNCERTAIN"""
    if isinstance(presence, Presence):
        return presence
    try:
        return Presence(str(presence).strip().lower())
    except ValueError:
        coerced = Presence.from_answer(str(presence))
        if coerced == Presence.UNCERTAIN:
            logger.warning("Unknown presence value %r, recording as uncertain", presence)
        return coerced


def _coerce_turn(turn_index) -> int:
    if isinstance(turn_index, int) and not isinstance(turn_index, bool) and turn_index >= 0:
        return turn_index
    logger.warning("Invalid turn index %r, using 0", turn_index)
    return 0


def _coerce_confidence(confidence) -> Optional[float]:
    """Впевненість у [0, 1] або None"""
    if confidence is None:
        return None
    try:
        value = float(confidence)
    except (TypeError, ValueError):
        logger.warning("Invalid confidence %r, ignoring", confidence)
        return None
    if not 0.0 <= value <= 1.0:
        logger.warning("Confidence %r out of range, ignoring", confidence)
        return None
    return value


def _coerce_qualifiers(qualifiers) -> Optional[SymptomQualifiers]:
    """SymptomQualifiers або mapping з полями OLDCART; некоректне → None"""
    if qualifiers is None or isinstance(qualifiers, SymptomQualifiers):
        return qualifiers
    try:
        return SymptomQualifiers.model_validate(qualifiers)
    except ValidationError as e:
        logger.warning("Invalid qualifiers %r, ignoring: %s", qualifiers, e.errors())
        return None


class TriageEngine:
    """
    Движок симптом-тріажу для однієї сесії.

    Приклад використання:
        engine = TriageEngine.from_rows([
            {"disease_name": "Strep Throat", "symptoms": "sore throat; fever; swollen glands"},
            {"disease_name": "Common Cold", "symptoms": "runny nose; sore throat; cough"},
        ])

        engine.answer_question("sore throat", "present", turn_index=0)

        plan = engine.propose_question()
        if plan:
            print(plan.question)  # Have you experienced fever?
            engine.answer_question(plan.target_symptom, "absent", turn_index=1)

        snapshot = engine.snapshot()
        for h in snapshot.hypotheses:
            print(f"{h.condition}: {h.probability:.2%}")
    """

    def __init__(self, knowledge_base: KnowledgeBase, config: Optional[APSAConfig] = None):
        """
        Args:
            knowledge_base: База знань (не змінюється движком)
            config: Конфігурація (default: get_default_config())
        """
        self.config = config or get_default_config()
        self.kb = knowledge_base

        self.extractor = FreeTextExtractor()
        self.scorer = HypothesisScorer(knowledge_base, self.config.scorer)
        self.planner = QuestionPlanner(knowledge_base, self.config.planner)
        self.cooccurrence = CooccurrenceLookup(
            knowledge_base,
            default_limit=self.config.cooccurrence.default_limit,
            min_token_length=self.config.cooccurrence.min_token_length,
        )

        self._state = EngineState()

        if self.degraded:
            logger.warning("Knowledge base is empty: engine running in degraded mode")

    @classmethod
    def from_rows(cls, rows: Sequence[dict], config: Optional[APSAConfig] = None) -> "TriageEngine":
        """Створити з рядків датасету"""
        config = config or get_default_config()
        kb = KnowledgeBase.from_rows(
            rows,
            min_token_length=config.knowledge_base.min_token_length,
            max_conditions=config.knowledge_base.max_conditions,
        )
        return cls(kb, config)

    @classmethod
    def from_json_file(cls, path: Optional[str] = None, config: Optional[APSAConfig] = None) -> "TriageEngine":
        """
        Створити з JSON датасету.

        Args:
            path: Шлях до датасету (default: config.knowledge_base.dataset_path)
            config: Конфігурація

        Якщо файл не завантажився, движок працює в деградованому режимі.
        """
        config = config or get_default_config()
        path = path or config.knowledge_base.dataset_path
        if not path:
            logger.error("No dataset path configured")
            return cls(KnowledgeBase(), config)

        kb = KnowledgeBase.from_json_file(
            path,
            min_token_length=config.knowledge_base.min_token_length,
            max_conditions=config.knowledge_base.max_conditions,
        )
        return cls(kb, config)

    # ------------------------------------------------------------------
    # Intake
    # ------------------------------------------------------------------

    def add_free_text(self, text: str, turn_index: int) -> List[SymptomEvidence]:
        """
        Прийняти вільний текст користувача.

        Кожна "клінічна" фраза, якої ще немає серед свідчень, стає
        присутнім свідченням. Існуючі назви не змінюються: перезаписати
        presence може лише структурована відповідь.

        Args:
            text: Висловлювання
            turn_index: Номер ходу розмови

        Returns:
            Нові свідчення (копії)
        """
        turn_index = _coerce_turn(turn_index)
        added = []

        for phrase in self.extractor.extract(text):
            record = self._state.evidence.add_if_absent(phrase, turn_index)
            if record is not None:
                added.append(record.model_copy(deep=True))

        logger.debug("Free text at turn %d added %d evidence records", turn_index, len(added))
        self._recompute()
        return added

    def answer_question(
        self,
        symptom: str,
        presence: Union[Presence, str],
        turn_index: int,
        confidence: Optional[float] = None,
        qualifiers: Optional[SymptomQualifiers] = None,
    ) -> Optional[SymptomEvidence]:
        """
        Прийняти структуровану відповідь.

        Існуюче свідчення з такою назвою отримує новий presence,
        інакше створюється новий запис. Гіпотези перераховуються завжди.

        Args:
            symptom: Назва симптому
            presence: present / absent / uncertain
            turn_index: Номер ходу розмови
            confidence: Впевненість [0, 1] (опціонально)
            qualifiers: Уточнення OLDCART (опціонально)

        Returns:
            Копія запису або None для порожньої назви
        """
        presence = _coerce_presence(presence)
        turn_index = _coerce_turn(turn_index)

        confidence = _coerce_confidence(confidence)
        qualifiers = _coerce_qualifiers(qualifiers)

        record = self._state.evidence.upsert(
            symptom,
            presence,
            turn_index,
            confidence=confidence,
            qualifiers=qualifiers,
        )
        if record is None:
            logger.warning("Ignoring answer with empty symptom name at turn %d", turn_index)

        self._recompute()
        return record.model_copy(deep=True) if record is not None else None

    def answer_reply(self, question: str, reply: str, turn_index: int) -> Optional[SymptomEvidence]:
        """
        Прийняти коротку відповідь на питання "Have you experienced X?".

        Args:
            question: Текст питання
            reply: "yes" / "no" / "not sure" / ...
            turn_index: Номер ходу розмови

        Симптом береться з плану, що згенерував це питання; розбір
        тексту лише для питань, яких немає в історії.

        Returns:
            Копія запису або None, якщо з питання не вдалось дістати симптом
        """
        target = self._question_target(question)
        if target is None:
            logger.debug("No target symptom in question %r", question)
            return None
        return self.answer_question(target, Presence.from_answer(reply), turn_index)

    def _question_target(self, question: str) -> Optional[str]:
        text = (question or "").strip()
        for plan in reversed(self._state.asked_questions):
            if plan.question == text:
                return plan.target_symptom
        return parse_question_target(text)

    def _recompute(self) -> None:
        """Повний перерахунок гіпотез"""
        self._state.hypotheses = self.scorer.score(self._state.evidence.records)
        self._state.cycle += 1

        if self._state.hypotheses:
            top = self._state.hypotheses[0]
            logger.debug(
                "Cycle %d: %d hypotheses, top=%s (%.3f)",
                self._state.cycle, len(self._state.hypotheses), top.condition, top.probability
            )

    # ------------------------------------------------------------------
    # Questions
    # ------------------------------------------------------------------

    def propose_question(self) -> Optional[QuestionPlan]:
        """
        Запропонувати наступне питання.

        Returns:
            QuestionPlan (також додається в історію) або None
        """
        if self._state.terminated:
            return None

        max_questions = self.config.planner.max_questions
        if max_questions is not None and self._state.n_questions_asked >= max_questions:
            self.terminate(MAX_QUESTIONS_REASON)
            return None

        plan = self.planner.plan(self._state.hypotheses, self._state.evidence.names)
        if plan is None:
            return None

        self._state.asked_questions.append(plan)
        logger.info("Proposed question on '%s' (gain=%.4f)", plan.target_symptom, plan.information_gain)
        return plan

    # ------------------------------------------------------------------
    # Read-only queries
    # ------------------------------------------------------------------

    def get_cooccurring(self, symptom: str, limit: Optional[int] = None) -> List[str]:
        """Супутні симптоми для фрази (стан не змінюється)"""
        return self.cooccurrence.get_cooccurring(symptom, limit)

    def suggest_symptoms(self, limit: Optional[int] = None) -> List[str]:
        """
        Підказки "інші симптоми" з поточних гіпотез.

        Кожен ще не записаний токен отримує максимальну ймовірність
        гіпотези, що його містить.

        Returns:
            До limit токенів за спаданням оцінки
        """
        limit = self.config.suggestions.limit if limit is None else limit
        known = set(self._state.evidence.names)
        candidates: Dict[str, float] = {}

        for h in self._state.hypotheses:
            for token in self.kb.tokens(h.condition):
                if token in known or not is_suggestible(token):
                    continue
                candidates[token] = max(candidates.get(token, 0.0), h.probability)

        ranked = sorted(candidates.items(), key=lambda x: x[1], reverse=True)
        return [token for token, _ in ranked[:max(limit, 0)]]

    def snapshot(self) -> EngineSnapshot:
        """Незмінна копія стану сесії"""
        return self._state.snapshot()

    @property
    def hypotheses(self) -> List[Hypothesis]:
        return [h.model_copy(deep=True) for h in self._state.hypotheses]

    @property
    def degraded(self) -> bool:
        """True, якщо база знань порожня (датасет не завантажився)"""
        return self.kb.is_empty

    @property
    def terminated(self) -> bool:
        return self._state.terminated

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def terminate(self, reason: str = "") -> None:
        """Завершити фазу опитування"""
        self._state.terminated = True
        self._state.termination_reason = reason or None
        logger.info("Interview terminated: %s", reason or "no reason given")

    def restart(self) -> None:
        """Почати сесію заново: весь стан відкидається"""
        self._state = EngineState()
        logger.info("Session restarted")

    def __repr__(self) -> str:
        return (
            f"TriageEngine(conditions={len(self.kb)}, "
            f"evidence={len(self._state.evidence)}, "
            f"hypotheses={len(self._state.hypotheses)}, "
            f"cycle={self._state.cycle})"
        )
