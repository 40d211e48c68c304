import pytest
from pydantic import ValidationError

from machinescope.schemas.machine_type import GCPMachineType


def _record(**overrides):
    fields = {
        "project": "my-proj",
        "name": "n1-standard-4",
        "description": "4 vCPUs, 15 GB RAM",
        "guest_cpus": 4,
        "memory_mb": 15360,
        "image_space_gb": 10,
        "scratch_disks": [],
        "maximum_persistent_disks": 128,
        "maximum_persistent_disks_size_gb": 263168,
        "zone": "us-central1-a",
        "self_link": "https://www.googleapis.com/compute/v1/projects/my-proj"
        "/zones/us-central1-a/machineTypes/n1-standard-4",
        "is_shared_cpu": False,
        "accelerators": [],
    }
    fields.update(overrides)
    return GCPMachineType.model_validate(fields)


def test_id_is_derived():
    mt = _record()
    assert mt.id == "projects/my-proj/zones/us-central1-a/machineTypes/n1-standard-4"


def test_to_state_is_flat_and_complete():
    mt = _record(
        scratch_disks=[{"disk_gb": 375}],
        accelerators=[
            {"guest_accelerator_count": 1, "guest_accelerator_type": "nvidia-l4"}
        ],
    )
    state = mt.to_state()

    assert state["id"] == mt.id
    assert state["scratch_disks"] == [{"disk_gb": 375}]
    assert state["accelerators"] == [
        {"guest_accelerator_count": 1, "guest_accelerator_type": "nvidia-l4"}
    ]
    assert set(state) == {
        "project",
        "name",
        "description",
        "guest_cpus",
        "memory_mb",
        "image_space_gb",
        "scratch_disks",
        "maximum_persistent_disks",
        "maximum_persistent_disks_size_gb",
        "zone",
        "self_link",
        "is_shared_cpu",
        "accelerators",
        "id",
    }


def test_record_is_immutable():
    mt = _record()
    with pytest.raises(ValidationError):
        mt.guest_cpus = 8
