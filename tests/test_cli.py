from __future__ import annotations

import pytest

from contracts import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from intcalc import main


@pytest.fixture(autouse=True)
def _no_trace_env(monkeypatch):
    monkeypatch.delenv("INTCALC_TRACE", raising=False)
    monkeypatch.delenv("STEP_MODE", raising=False)


def _run(capsys, *argv: str) -> tuple[int, str, str]:
    try:
        main(list(argv))
        code = 0
    except SystemExit as exc:
        code = exc.code
    out, err = capsys.readouterr()
    return code, out.strip(), err.strip()


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["6 + 2"], "8"),
        (["+6", "+", "+2"], "8"),
        (["-6", "-", "-2"], "-4"),
        (["--1", "+", "++2"], "3"),
        (["-----1"], "-1"),
        (["-(1)"], "-1"),
        (["-(-0)"], "0"),
        (["6 + 5 - 4 * +3 / -2"], "17"),
        (["-  6  +  +  2"], "-4"),
        ([str(MAX_SAFE_INTEGER), "-", "1", "+", "1"], str(MAX_SAFE_INTEGER)),
        ([str(MIN_SAFE_INTEGER), "+", "1", "-", "1"], str(MIN_SAFE_INTEGER)),
        (["--", "-(1)"], "-1"),
    ],
)
def test_cli_prints_result(capsys, argv, expected):
    code, out, err = _run(capsys, *argv)

    assert code == 0
    assert out == expected
    assert err == ""


@pytest.mark.parametrize(
    "argv, expected_code",
    [
        ([], 1),
        (["   "], 1),
        (["2 ^ 3"], 2),
        (["1\t+2"], 2),
        (["( 1 + 2"], 2),
        (["1 + 2 +"], 2),
        (["1 / 0"], 3),
        ([f"{MAX_SAFE_INTEGER} + 1"], 3),
    ],
)
def test_cli_failure_exit_codes(capsys, argv, expected_code):
    code, out, err = _run(capsys, *argv)

    assert code == expected_code
    assert out == ""
    assert err != ""
    assert len(err.splitlines()) == 1


def test_cli_trace_flag_prints_every_step_then_result(capsys):
    code, out, _ = _run(capsys, "--trace", "6 + 5 * 2")

    assert code == 0
    assert out.splitlines() == [
        "step 1: 6",
        "step 2: 5",
        "step 3: 2",
        "step 4: 10",
        "step 5: 16",
        "16",
    ]


def test_cli_trace_from_legacy_env_switch(capsys, monkeypatch):
    monkeypatch.setenv("STEP_MODE", "1")

    code, out, _ = _run(capsys, "-(0)")

    assert code == 0
    assert out.splitlines() == ["step 1: 0", "step 2: 0", "0"]


def test_cli_trace_failure_has_no_result_line(capsys):
    code, out, err = _run(capsys, "-t", "1 + 2 / 0")

    assert code == 3
    assert out.splitlines()[-1] == "step 3: 0"
    assert "division by zero" in err


def test_cli_version(capsys):
    code, out, _ = _run(capsys, "--version")

    assert code == 0
    assert out.startswith("intcalc ")


def test_cli_long_chain(capsys):
    code, out, err = _run(capsys, " + ".join(["1"] * 3000))

    assert code == 0
    assert out == "3000"
    assert err == ""


def test_cli_long_chain_trace(capsys):
    code, out, _ = _run(capsys, "--trace", "+".join(["1"] * 3000))

    lines = out.splitlines()
    assert code == 0
    assert len(lines) == 5999 + 1
    assert lines[-2] == "step 5999: 3000"
    assert lines[-1] == "3000"


def test_cli_lines_are_not_wrapped_on_narrow_terminals(capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "10")
    monkeypatch.setattr("intcalc._CONSOLE", None)

    code, out, _ = _run(capsys, "-t", f"{MAX_SAFE_INTEGER} - 0")

    assert code == 0
    assert out.splitlines() == [
        f"step 1: {MAX_SAFE_INTEGER}",
        "step 2: 0",
        f"step 3: {MAX_SAFE_INTEGER}",
        str(MAX_SAFE_INTEGER),
    ]
