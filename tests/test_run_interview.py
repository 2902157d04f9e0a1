"""
Тести для scripts/run_interview.py

Запуск: pytest tests/test_run_interview.py -v
"""

import importlib.util
from pathlib import Path

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "run_interview.py"


def load_script():
    spec = importlib.util.spec_from_file_location("run_interview", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_console_interview(monkeypatch, capsys):
    """Тест консольного опитування на демо-датасеті"""
    script = load_script()
    replies = iter(["sore throat", "no", "related fever", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))

    assert script.main(["--log-level", "WARNING"]) == 0

    output = capsys.readouterr().out
    assert "Have you experienced" in output
    assert "Strep Throat" in output
    assert "Супутні:" in output
    assert "Свідчень: 2" in output


def test_console_degraded(monkeypatch, capsys, tmp_path):
    """Тест: відсутній датасет → попередження, без винятків"""
    script = load_script()
    replies = iter(["fever"])

    def fake_input(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)

    assert script.main(["--dataset", str(tmp_path / "missing.json"), "--log-level", "ERROR"]) == 0

    output = capsys.readouterr().out
    assert "База знань порожня" in output
    assert "детальніше" in output
