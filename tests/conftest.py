import os

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    # Keine EUREKA_*-Variablen aus der Umgebung des Testlaufs übernehmen
    for key in list(os.environ):
        if key.upper().startswith("EUREKA_"):
            monkeypatch.delenv(key, raising=False)
