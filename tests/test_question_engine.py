"""
Тести для модуля question_engine

Запуск: pytest tests/test_question_engine.py -v
"""

import pytest

from apsa.schemas import Hypothesis


def hyp(condition, probability):
    return Hypothesis(condition=condition, probability=probability, supporting=["x"])


def test_entropy():
    """Тест ентропії"""
    from apsa.question_engine import entropy, binary_entropy

    assert entropy([0.5, 0.5]) == pytest.approx(1.0)
    assert entropy([1.0, 0.0]) == pytest.approx(0.0)
    assert entropy([0.25] * 4) == pytest.approx(2.0)
    assert binary_entropy(0.5) == pytest.approx(1.0)
    assert binary_entropy(0.1) == pytest.approx(0.4689955935892812)


def test_compute_gain(knowledge_base):
    """Тест gain для симптому"""
    from apsa.question_engine import compute_gain

    hypotheses = [hyp("Strep Throat", 0.5), hyp("Common Cold", 0.5)]

    fever = compute_gain("fever", hypotheses, knowledge_base)
    assert fever.gain == pytest.approx(1.0)
    assert fever.p_present == pytest.approx(0.5)

    # є в усіх гіпотезах → нічого не розрізняє
    assert compute_gain("sore throat", hypotheses, knowledge_base) is None
    # немає в жодній
    assert compute_gain("rash", hypotheses, knowledge_base) is None


def test_plan_requires_two_hypotheses(knowledge_base):
    """Тест: менше двох гіпотез → None"""
    from apsa.question_engine import QuestionPlanner

    planner = QuestionPlanner(knowledge_base)

    assert planner.plan([]) is None
    assert planner.plan([hyp("Strep Throat", 1.0)]) is None


def test_plan_first_seen_wins_ties(knowledge_base):
    """Тест: при рівному gain перемагає перший знайдений токен"""
    from apsa.question_engine import QuestionPlanner

    planner = QuestionPlanner(knowledge_base)
    hypotheses = [hyp("Strep Throat", 0.5), hyp("Common Cold", 0.5)]

    plan = planner.plan(hypotheses, known_symptoms={"sore throat"})

    assert plan is not None
    assert plan.target_symptom == "fever"
    assert plan.question == "Have you experienced fever?"
    assert plan.expected_splits == {"Strep Throat": 0.5, "Common Cold": 0.5}
    assert plan.information_gain == pytest.approx(1.0)
    assert plan.rationale


def test_candidates_filtered(knowledge_base):
    """Тест: кандидати без відомих і неклінічних токенів"""
    from apsa.question_engine import QuestionPlanner

    planner = QuestionPlanner(knowledge_base)
    hypotheses = [hyp("Strep Throat", 0.5), hyp("Common Cold", 0.5)]

    assert planner.symptom_frequencies(hypotheses) == {
        "sore throat": 2,
        "fever": 1,
        "swollen glands": 1,
        "runny nose": 1,
        "cough": 1,
    }
    # "swollen glands" і "runny nose" не містять ключових слів
    assert planner.candidate_symptoms(hypotheses, {"sore throat"}) == ["fever", "cough"]


def test_plan_never_proposes_known(knowledge_base):
    """Тест: відоме свідчення не пропонується"""
    from apsa.question_engine import QuestionPlanner

    planner = QuestionPlanner(knowledge_base)
    hypotheses = [hyp("Strep Throat", 0.5), hyp("Common Cold", 0.5)]

    plan = planner.plan(hypotheses, known_symptoms={"sore throat", "fever"})
    assert plan.target_symptom == "cough"

    assert planner.plan(hypotheses, known_symptoms={"sore throat", "fever", "cough"}) is None


def test_plan_prefers_balanced_split():
    """Тест: вибирається симптом, що ділить масу найрівніше"""
    from apsa.knowledge import KnowledgeBase
    from apsa.question_engine import QuestionPlanner

    kb = KnowledgeBase.from_rows([
        {"disease_name": "A", "symptoms": "fever; cough"},
        {"disease_name": "B", "symptoms": "fever; rash"},
        {"disease_name": "C", "symptoms": "nausea"},
    ])
    planner = QuestionPlanner(kb)
    hypotheses = [hyp("A", 0.4), hyp("B", 0.4), hyp("C", 0.2)]

    # fever: 0.8/0.2, cough: 0.4/0.6, rash: 0.4/0.6, nausea: 0.2/0.8
    plan = planner.plan(hypotheses)
    assert plan.target_symptom == "cough"

    ranked = planner.rank_candidates(hypotheses)
    assert [r.symptom for r in ranked][:2] == ["cough", "rash"]
    assert ranked[0].gain >= ranked[-1].gain


def test_plan_is_frozen(knowledge_base):
    """Тест: QuestionPlan незмінний"""
    from pydantic import ValidationError
    from apsa.question_engine import QuestionPlanner

    plan = QuestionPlanner(knowledge_base).plan(
        [hyp("Strep Throat", 0.5), hyp("Common Cold", 0.5)], {"sore throat"}
    )

    with pytest.raises(ValidationError):
        plan.target_symptom = "cough"


def test_custom_template(knowledge_base):
    """Тест шаблону питання з конфігурації"""
    from apsa.config import QuestionPlannerConfig
    from apsa.question_engine import QuestionPlanner

    planner = QuestionPlanner(knowledge_base, QuestionPlannerConfig(question_template="Do you have {symptom}?"))
    plan = planner.plan([hyp("Strep Throat", 0.5), hyp("Common Cold", 0.5)], {"sore throat"})

    assert plan.question == "Do you have fever?"


def test_parse_question_target():
    """Тест розбору питання"""
    from apsa.question_engine import parse_question_target, render_question

    assert parse_question_target("Have you experienced fever?") == "fever"
    assert parse_question_target(render_question("chest pain")) == "chest pain"
    assert parse_question_target("HAVE YOU EXPERIENCED Shortness of breath?") == "shortness of breath"
    assert parse_question_target("How long has it lasted?") is None
    assert parse_question_target("") is None
