import json
from decimal import Decimal

import pytest

import main
from SimpleEvaluator import config_manager


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


@pytest.mark.parametrize("value,expected", [
    (Decimal("8"), ("8", False)),
    (Decimal("4.0"), ("4", False)),
    (Decimal("1E+2"), ("100", False)),
    (Decimal("12.5"), ("12.5", False)),
    (Decimal("-0.25"), ("-0.25", False)),
])
def test_cleanup_exact(value, expected):
    assert main.cleanup(value) == expected


def test_cleanup_rounds():
    assert main.cleanup(Decimal(1) / Decimal(3), decimal_places=4) == ("0.3333", True)


def test_cleanup_large_number_with_fraction():
    text = "1" + "0" * 130 + ".5"
    assert main.cleanup(Decimal(text), decimal_places=2) == (text, False)


def test_cleanup_keeps_long_integers():
    text = "1" + "0" * 40 + "1"
    assert main.cleanup(Decimal(text)) == (text, False)


def test_run_once_prints_result(capsys):
    assert main.run_once("(2+3)*4") == 0
    assert capsys.readouterr().out.strip() == "= 20"


def test_run_once_with_variable(capsys):
    assert main.run_once("x*x", "4") == 0
    assert capsys.readouterr().out.strip() == "= 16"


def test_run_once_rounded(capsys):
    main.run_once("2/3")
    assert capsys.readouterr().out.strip() == "≈ 0.6666666667"


def test_run_once_error(capsys):
    assert main.run_once("1+#2") == 1
    out = capsys.readouterr().out
    assert out.startswith("Calculator Error 3011: Invalid character")
    assert "Equation: 1+#2" in out


def test_run_once_non_finite_value(capsys):
    assert main.run_once("x+1", "Infinity") == 1
    assert capsys.readouterr().out.startswith("Calculator Error 3008")


def test_main_with_arguments(capsys):
    assert main.main(["x+5", "3"]) == 0
    assert capsys.readouterr().out.strip() == "= 8"


def test_main_error_status(capsys):
    assert main.main(["1/0"]) == 1
    assert "Error 3003" in capsys.readouterr().out


def test_main_passes_settings(config_file, capsys):
    config_file.write_text(json.dumps({"precision": 3, "decimal_places": 5}), encoding="utf-8")
    assert main.main(["1/3"]) == 0
    assert capsys.readouterr().out.strip() == "= 0.333"


def test_main_nesting_setting(config_file, capsys):
    config_file.write_text(json.dumps({"max_nesting_depth": 1}), encoding="utf-8")
    assert main.main(["((1))"]) == 1
    assert "Error 3032" in capsys.readouterr().out


@pytest.mark.parametrize("settings", [
    {"precision": 0},
    {"precision": "high"},
    {"precision": True},
    {"max_nesting_depth": -1},
    {"decimal_places": -2},
])
def test_invalid_settings_fall_back_to_defaults(config_file, capsys, settings):
    config_file.write_text(json.dumps(settings), encoding="utf-8")
    assert main.main(["1+1"]) == 0
    assert capsys.readouterr().out.strip() == "= 2"


def test_build_evaluator_defaults():
    evaluator = main.build_evaluator({"precision": 0, "max_nesting_depth": 7})
    assert evaluator.precision == 50
    assert evaluator.max_nesting_depth == 7


def test_prompt_loop(monkeypatch, capsys):
    answers = iter(["1+1", "10-2-3", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main.main([]) == 0
    lines = capsys.readouterr().out.split()
    assert lines == ["=", "2", "=", "5"]


def test_prompt_loop_asks_for_variable(monkeypatch, capsys):
    prompts = []
    answers = iter(["x+5", "3", "y*2", "", ""])

    def fake_input(prompt=""):
        prompts.append(prompt)
        return next(answers)

    monkeypatch.setattr("builtins.input", fake_input)
    assert main.prompt_loop() == 0
    assert capsys.readouterr().out.split() == ["=", "8", "=", "0"]
    assert prompts == ["Enter the problem: ", "Enter the value: ",
                       "Enter the problem: ", "Enter the value: ",
                       "Enter the problem: "]


def test_prompt_loop_stops_on_eof(monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert main.prompt_loop() == 0
