from config import Settings


def test_trace_defaults_off(monkeypatch):
    monkeypatch.delenv("INTCALC_TRACE", raising=False)
    monkeypatch.delenv("STEP_MODE", raising=False)

    assert Settings().trace is False


def test_trace_from_prefixed_env(monkeypatch):
    monkeypatch.delenv("STEP_MODE", raising=False)
    monkeypatch.setenv("INTCALC_TRACE", "1")

    assert Settings().trace is True


def test_trace_from_legacy_step_mode(monkeypatch):
    monkeypatch.delenv("INTCALC_TRACE", raising=False)
    monkeypatch.setenv("STEP_MODE", "1")

    assert Settings().trace is True


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("INTCALC_LOG_LEVEL", "debug")

    assert Settings().log_level == "debug"
