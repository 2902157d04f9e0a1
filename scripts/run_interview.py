#!/usr/bin/env python
"""
Консольне опитування APSA

Простий транспорт розмови для ручної перевірки движка:
- вільний текст → add_free_text
- "yes" / "no" / "not sure" на запропоноване питання → answer_reply
- "related <симптом>" → супутні симптоми
- "restart" / "quit"

Використання:
    python scripts/run_interview.py
    python scripts/run_interview.py --dataset data/mayo_all_letters_symptoms.json --max-conditions 400
    python scripts/run_interview.py --config configs/default.yaml --log-level DEBUG
"""

import argparse
import sys
from pathlib import Path

# Додаємо шлях до проекту
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from apsa.config import get_default_config, load_config, setup_logging
from apsa.engine import TriageEngine
from apsa.schemas import Presence

DEFAULT_DATASET = project_root / "data" / "demo_conditions.json"

QUICK_REPLIES = {"yes", "y", "no", "n", "not sure", "unknown", "?"}


def print_header(text):
    print("\n" + "=" * 60)
    print(f" {text}")
    print("=" * 60)


def print_state(engine: TriageEngine) -> None:
    snapshot = engine.snapshot()

    if not snapshot.hypotheses:
        print("  (гіпотез поки немає — опишіть симптоми)")
        return

    print("\nГіпотези:")
    for i, h in enumerate(snapshot.hypotheses, 1):
        print(f"  {i}. {h.condition}: {h.probability:.2%}  за: {', '.join(h.supporting)}"
              + (f"  проти: {', '.join(h.contradicting)}" if h.contradicting else ""))

    suggestions = engine.suggest_symptoms()
    if suggestions:
        print(f"\nМожливі інші симптоми: {', '.join(suggestions)}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="APSA console interview")
    parser.add_argument("--dataset", type=str, default=None, help="JSON датасет станів")
    parser.add_argument("--config", type=str, default=None, help="YAML конфігурація")
    parser.add_argument("--max-conditions", type=int, default=None, help="Скільки рядків датасету взяти")
    parser.add_argument("--max-questions", type=int, default=None, help="Ліміт запропонованих питань")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG / INFO / WARNING")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    config = load_config(args.config) if args.config else get_default_config()
    if args.log_level:
        config.logging.level = args.log_level
    if args.max_conditions is not None:
        config.knowledge_base.max_conditions = args.max_conditions
    if args.max_questions is not None:
        config.planner.max_questions = args.max_questions

    setup_logging(config.logging)

    dataset = args.dataset or config.knowledge_base.dataset_path or str(DEFAULT_DATASET)
    engine = TriageEngine.from_json_file(dataset, config)

    print_header("APSA — опитування")
    print(f"База знань: {dataset} ({len(engine.kb)} станів)")
    if engine.degraded:
        print("⚠ База знань порожня: потрібно більше інформації, питання недоступні")

    turn = 0
    last_question = None

    while True:
        try:
            text = input("\nВи: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not text:
            continue

        command = text.lower()
        if command in ("quit", "exit"):
            break
        if command == "restart":
            engine.restart()
            turn = 0
            last_question = None
            print("Сесію розпочато заново")
            continue
        if command.startswith("related "):
            phrase = text[len("related "):]
            print(f"Супутні: {', '.join(engine.get_cooccurring(phrase)) or '—'}")
            continue

        if last_question and command in QUICK_REPLIES:
            presence = Presence.from_answer(command)
            engine.answer_reply(last_question, command, turn)
            print(f"  записано: {presence.value}")
        else:
            added = engine.add_free_text(text, turn)
            if added:
                print(f"  нові свідчення: {', '.join(e.name for e in added)}")

        turn += 1
        print_state(engine)

        plan = engine.propose_question()
        if plan:
            last_question = plan.question
            print(f"\nAPSA: {plan.question}  (gain={plan.information_gain:.3f})")
            related = engine.get_cooccurring(plan.target_symptom, 4)
            if related:
                print(f"      також часто: {', '.join(related)}")
        else:
            last_question = None
            if engine.terminated:
                print(f"\nОпитування завершено: {engine.snapshot().termination_reason}")
                break
            print("\nAPSA: Розкажіть, будь ласка, детальніше про ваші симптоми.")

    snapshot = engine.snapshot()
    print_header("Підсумок")
    print(f"Свідчень: {len(snapshot.evidence)}, питань: {len(snapshot.asked_questions)}, циклів: {snapshot.cycle}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
