from app.core.config import DEFAULT_CLAUDE_FALLBACKS, DEFAULT_CLAUDE_PRIMARY, _csv, _model_options


def test_model_options_keep_primary_first_without_duplicates():
    options = _model_options("claude-haiku-4-5-20251001", ["claude-sonnet-4-5-20250929", "claude-haiku-4-5-20251001"])
    assert options == ["claude-haiku-4-5-20251001", "claude-sonnet-4-5-20250929"]


def test_default_models_are_current_generation():
    defaults = [DEFAULT_CLAUDE_PRIMARY, *DEFAULT_CLAUDE_FALLBACKS.split(",")]
    assert all(model.startswith(("claude-haiku-4-5", "claude-sonnet-4-5")) for model in defaults)
    assert "claude-3-5-haiku-20241022" not in defaults


def test_csv_reads_env(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", " https://a.example , ,https://b.example")
    assert _csv("CORS_ALLOW_ORIGINS", "*") == ["https://a.example", "https://b.example"]
    monkeypatch.delenv("CORS_ALLOW_ORIGINS")
    assert _csv("CORS_ALLOW_ORIGINS", "*") == ["*"]
