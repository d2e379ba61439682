from pathlib import Path

import pytest

import appconfig
from appconfig import application
from appconfig import main as demo
from appconfig.store import ConfigStore

SAMPLE_CONFIG = Path(appconfig.__file__).parent / "app-config.json"


@pytest.fixture(autouse=True)
def _fresh_instance():
    application.reset_app_config()
    yield
    application.reset_app_config()


def test_demo_prints_sample_config(capsys):
    application.set_app_config(ConfigStore.from_file(SAMPLE_CONFIG))

    assert demo.main() == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:9] == [
        "Hello from AppSettings",
        "3.14",
        "Server=localhost;Database=demo;Trusted_Connection=True",
        "First value",
        "Second value",
        "5",
        "1",
        "2.5",
        "z",
    ]
    assert lines[9].startswith("MissingObject -> TestObject(some_value=0")


def test_demo_runs_against_empty_config(capsys):
    application.set_app_config(ConfigStore())

    assert demo.main() == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "None"
    assert lines[2] == "None"
