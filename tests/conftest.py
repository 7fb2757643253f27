import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_naega_env(tmp_path, monkeypatch):
    """Brak logów w katalogu projektu; domyślny plik zadań w tmp."""
    monkeypatch.setenv("NAEGA_LOG_TO_FILE", "0")
    monkeypatch.setenv("NAEGA_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("NAEGA_DATA_FILE", str(tmp_path / "default.txt"))
    yield
    # CLI podpina handlery do strumieni CliRunnera, które po teście są zamknięte
    root = logging.getLogger()
    for h in list(root.handlers):
        if not isinstance(h, logging.NullHandler) and type(h).__module__ == "logging":
            root.removeHandler(h)
            h.close()
