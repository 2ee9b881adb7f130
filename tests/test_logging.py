import logging

import talenthub.logging_config as lc


def test_setup_logging_string_level():
    lc.setup_logging("debug")
    assert logging.getLogger().level <= logging.DEBUG
    assert logging.getLogger("botocore").level == logging.WARNING


def test_setup_logging_with_none_level_uses_settings(monkeypatch):
    from talenthub.config import settings

    monkeypatch.setattr(settings, "log_level", "warning")
    lc.setup_logging(None)
    assert logging.getLogger().level == logging.WARNING
    lc.setup_logging("info")


def test_setup_logging_import_failure_falls_back(monkeypatch):
    import builtins

    orig_import = builtins.__import__

    def fake_import(name, *args, **kwargs):
        if name == "talenthub.config":
            raise RuntimeError("boom")
        return orig_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    lc.setup_logging(None)
    assert logging.getLogger().level == logging.INFO
