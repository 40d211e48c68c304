import re
from collections.abc import Iterable
from typing import Any

from google.api_core.exceptions import NotFound
from google.cloud import compute_v1
from pydantic import ValidationError

from ..config import ProviderConfig, generate_user_agent
from ..errors import (
    FieldSetError,
    MachineTypeNotFoundError,
    MissingMachineTypeError,
    MissingZoneError,
    ProjectNotSetError,
)
from ..logger import logger
from ..schemas.machine_type import GCPMachineType

_SELF_LINK_VERSION = re.compile(r"/compute/[a-zA-Z0-9]*/projects/")


def resolve_project(project: str | None, config: ProviderConfig) -> str:
    resolved = project or config.project
    if not resolved:
        raise ProjectNotSetError()
    return resolved


def resolve_zone(zone: str | None, config: ProviderConfig) -> str:
    # An explicit zone may be given as a self link
    resolved = zone.rsplit("/", 1)[-1] if zone else config.zone
    if not resolved:
        raise MissingZoneError()
    return resolved


def resolve_machine_type(machine_type: str | None) -> str:
    if not machine_type:
        raise MissingMachineTypeError()
    return machine_type


def convert_self_link_to_v1(link: str) -> str:
    """
    Rewrites any API version in a Compute self link to v1.
    e.g. .../compute/beta/projects/p/... -> .../compute/v1/projects/p/...
    """
    return _SELF_LINK_VERSION.sub("/compute/v1/projects/", link)


def flatten_scratch_disks(disks: Iterable[Any]) -> list[dict[str, Any]]:
    return [{"disk_gb": disk.disk_gb} for disk in disks]


def flatten_accelerators(accelerators: Iterable[Any]) -> list[dict[str, Any]]:
    return [
        {
            "guest_accelerator_count": acc.guest_accelerator_count,
            "guest_accelerator_type": acc.guest_accelerator_type,
        }
        for acc in accelerators
    ]


def fetch_machine_type(
    client: Any, project: str, zone: str, machine_type: str
) -> compute_v1.MachineType:
    """
    Single GET against the zonal machine type catalog.
    NotFound is translated; every other API error is raised as-is.
    """
    request = compute_v1.GetMachineTypeRequest(
        project=project, zone=zone, machine_type=machine_type
    )
    try:
        return client.get(request=request)
    except NotFound as e:
        logger.warning(
            f"Machine Type {machine_type} not found in {project}/{zone}"
        )
        raise MachineTypeNotFoundError(machine_type, project, zone) from e


def project_machine_type(project: str, zone: str, response: Any) -> GCPMachineType:
    """
    Projects an API MachineType into the result record in one validation pass.
    The first field that fails validation is reported; nothing is returned
    partially.
    """
    fields = {
        "project": project,
        "name": response.name,
        "description": response.description,
        "guest_cpus": response.guest_cpus,
        "memory_mb": response.memory_mb,
        "image_space_gb": response.image_space_gb,
        "scratch_disks": flatten_scratch_disks(response.scratch_disks),
        "maximum_persistent_disks": response.maximum_persistent_disks,
        "maximum_persistent_disks_size_gb": response.maximum_persistent_disks_size_gb,
        "zone": zone,
        "self_link": convert_self_link_to_v1(response.self_link),
        "is_shared_cpu": response.is_shared_cpu,
        "accelerators": flatten_accelerators(response.accelerators),
    }
    try:
        return GCPMachineType.model_validate(fields)
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "record"
        raise FieldSetError(field, error["msg"]) from e


def read_machine_type(
    config: ProviderConfig,
    machine_type: str | None,
    project: str | None = None,
    zone: str | None = None,
    module_name: str | None = None,
) -> GCPMachineType:
    """
    Public API: Reads one machine type.
    All identifiers are resolved before a client is built, so input errors
    never reach the network.
    """
    user_agent = generate_user_agent(config, module_name)
    resolved_project = resolve_project(project, config)
    resolved_zone = resolve_zone(zone, config)
    name = resolve_machine_type(machine_type)

    logger.debug(
        f"Reading machine type {name} in project {resolved_project}, "
        f"zone {resolved_zone}"
    )

    client = config.new_compute_client(user_agent)
    response = fetch_machine_type(client, resolved_project, resolved_zone, name)
    return project_machine_type(resolved_project, resolved_zone, response)
