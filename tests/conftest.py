import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import create_app
from tests.helpers import AUTOCOMPLETE_BODY, SAMPLE_LINES, write_dataset

SETTINGS_ENV = (
    "DATASET_PATH",
    "AUTOCOMPLETE_PATH",
    "STATIC_ROOT",
    "MAX_LINE_BYTES",
    "HOST",
    "PORT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch, tmp_path):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def dataset_path(tmp_path):
    return write_dataset(tmp_path / "data.gz", SAMPLE_LINES)


@pytest.fixture()
def settings(tmp_path, dataset_path):
    static_root = tmp_path / "static"
    static_root.mkdir()
    (static_root / "index.html").write_text("<html><body>catalog search</body></html>", encoding="utf-8")
    autocomplete_path = tmp_path / "data.json"
    autocomplete_path.write_bytes(AUTOCOMPLETE_BODY)
    return Settings(
        DATASET_PATH=str(dataset_path),
        AUTOCOMPLETE_PATH=str(autocomplete_path),
        STATIC_ROOT=str(static_root),
    )


@pytest.fixture()
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
