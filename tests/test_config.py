from app.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "DATABRICKS_URL", "DATABRICKS_TOKEN", "DATABRICKS_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.PORT == 8080
    assert settings.DATABRICKS_TIMEOUT_SECONDS == 600
    assert settings.is_configured is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("DATABRICKS_URL", "https://databricks.test/invocations")
    monkeypatch.setenv("DATABRICKS_TOKEN", "dapi-token")
    settings = Settings()
    assert settings.PORT == 9000
    assert settings.is_configured is True


def test_requires_both_values():
    assert Settings(DATABRICKS_URL="https://databricks.test/invocations", DATABRICKS_TOKEN="").is_configured is False
    assert Settings(DATABRICKS_URL="", DATABRICKS_TOKEN="dapi-token").is_configured is False
