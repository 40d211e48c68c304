from __future__ import annotations

import os
from collections.abc import Callable
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .clients import get_machine_types_client
from .core import PROJECT_ENV_VARS, USER_AGENT_PRODUCT, ZONE_ENV_VARS


def _default_user_agent() -> str:
    try:
        ver = version("machinescope")
    except PackageNotFoundError:
        ver = "unknown"
    return f"{USER_AGENT_PRODUCT}/{ver}"


def _first_env(names: list[str]) -> str | None:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


class ProviderConfig(BaseModel):
    """
    Provider-wide defaults and the Compute client factory.
    Passed explicitly to every read; never modified by one.
    """

    model_config = ConfigDict(frozen=True)

    project: str | None = None
    zone: str | None = None
    user_agent: str = Field(default_factory=_default_user_agent)
    client_factory: Callable[[str], Any] = Field(
        default=get_machine_types_client, exclude=True
    )

    @classmethod
    def from_env(cls, **overrides: Any) -> ProviderConfig:
        """
        Builds a config from the environment. Overrides that are None are
        ignored so an unset CLI flag does not mask the environment.
        """
        values: dict[str, Any] = {
            "project": _first_env(PROJECT_ENV_VARS),
            "zone": _first_env(ZONE_ENV_VARS),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def new_compute_client(self, user_agent: str) -> Any:
        return self.client_factory(user_agent)


def generate_user_agent(config: ProviderConfig, module_name: str | None = None) -> str:
    """Appends the calling module's name to the provider user agent."""
    if module_name:
        return f"{config.user_agent} {module_name}"
    return config.user_agent
