from biopics_mcp.core.config import API_BASE, DEFAULT_AGENT_NAME, Settings


def test_defaults() -> None:
    settings = Settings.from_env({})
    assert settings.agent_name == DEFAULT_AGENT_NAME == "mcp-agent"
    assert settings.model_name == ""
    assert settings.user_token == ""
    assert settings.api_base == API_BASE == "https://api.biopics.ai"
    assert settings.timeout is None
    assert not settings.has_token


def test_reads_biopics_variables() -> None:
    settings = Settings.from_env(
        {
            "BIOPICS_AGENT": "researcher-7",
            "BIOPICS_MODEL": "some-model",
            "BIOPICS_USER_TOKEN": "jwt-abc",
        }
    )
    assert settings.agent_name == "researcher-7"
    assert settings.model_name == "some-model"
    assert settings.user_token == "jwt-abc"
    assert settings.has_token


def test_empty_agent_falls_back_to_default() -> None:
    assert Settings.from_env({"BIOPICS_AGENT": ""}).agent_name == DEFAULT_AGENT_NAME


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("BIOPICS_AGENT", "from-env")
    monkeypatch.delenv("BIOPICS_USER_TOKEN", raising=False)
    settings = Settings.from_env()
    assert settings.agent_name == "from-env"
    assert not settings.has_token


def test_token_not_in_repr() -> None:
    settings = Settings(user_token="super-secret")
    assert "super-secret" not in repr(settings)
