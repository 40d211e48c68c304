import pytest
from pydantic import ValidationError

from machinescope.clients import get_machine_types_client
from machinescope.config import ProviderConfig, generate_user_agent
from machinescope.core import PROJECT_ENV_VARS, ZONE_ENV_VARS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the developer's gcloud environment."""
    for name in PROJECT_ENV_VARS + ZONE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_reads_defaults(monkeypatch):
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "env-proj")
    monkeypatch.setenv("CLOUDSDK_COMPUTE_ZONE", "us-west1-b")

    config = ProviderConfig.from_env()

    assert config.project == "env-proj"
    assert config.zone == "us-west1-b"


def test_from_env_precedence(monkeypatch):
    monkeypatch.setenv("GOOGLE_PROJECT", "first")
    monkeypatch.setenv("CLOUDSDK_CORE_PROJECT", "last")
    monkeypatch.setenv("GOOGLE_ZONE", "")
    monkeypatch.setenv("GCLOUD_ZONE", "europe-west4-a")

    config = ProviderConfig.from_env()

    assert config.project == "first"
    assert config.zone == "europe-west4-a"


def test_from_env_none_override_does_not_mask(monkeypatch):
    monkeypatch.setenv("GOOGLE_PROJECT", "env-proj")

    config = ProviderConfig.from_env(project=None, zone="asia-east1-a")

    assert config.project == "env-proj"
    assert config.zone == "asia-east1-a"


def test_from_env_empty():
    config = ProviderConfig.from_env()
    assert config.project is None
    assert config.zone is None
    assert config.user_agent.startswith("machinescope/")
    assert config.client_factory is get_machine_types_client


def test_config_is_frozen():
    config = ProviderConfig(project="p")
    with pytest.raises(ValidationError):
        config.project = "q"


def test_generate_user_agent():
    config = ProviderConfig(user_agent="machinescope/1.0")
    assert generate_user_agent(config) == "machinescope/1.0"
    assert generate_user_agent(config, "my-module") == "machinescope/1.0 my-module"


def test_new_compute_client_uses_factory(mocker):
    mock_get = mocker.patch("machinescope.clients.compute_v1.MachineTypesClient")
    get_machine_types_client.cache_clear()

    config = ProviderConfig()
    client = config.new_compute_client("machinescope/test")

    assert client is mock_get.return_value
    client_info = mock_get.call_args.kwargs["client_info"]
    assert client_info.user_agent == "machinescope/test"
    get_machine_types_client.cache_clear()
