from __future__ import annotations

from functools import lru_cache
from typing import Any

from google.api_core.gapic_v1.client_info import ClientInfo
from google.cloud import compute_v1

# Shared Client Registry (one client per distinct user agent)


@lru_cache(maxsize=8)
def get_machine_types_client(user_agent: str) -> Any:
    return compute_v1.MachineTypesClient(
        client_info=ClientInfo(user_agent=user_agent)
    )
