from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..core import MACHINE_TYPE_ID_TEMPLATE


class GCPScratchDisk(BaseModel):
    model_config = ConfigDict(frozen=True)

    disk_gb: int


class GCPAccelerator(BaseModel):
    model_config = ConfigDict(frozen=True)

    guest_accelerator_count: int
    guest_accelerator_type: str = Field(description="e.g., nvidia-tesla-t4")


class GCPMachineType(BaseModel):
    # Field order is the order fields are validated and errors are reported.
    model_config = ConfigDict(frozen=True)

    project: str
    name: str
    description: str
    guest_cpus: int
    memory_mb: int
    image_space_gb: int
    scratch_disks: list[GCPScratchDisk] = Field(default_factory=list)
    maximum_persistent_disks: int
    maximum_persistent_disks_size_gb: int
    zone: str
    self_link: str = Field(description="Normalized to the compute/v1 API form")
    is_shared_cpu: bool
    accelerators: list[GCPAccelerator] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def id(self) -> str:
        return MACHINE_TYPE_ID_TEMPLATE.format(
            project=self.project, zone=self.zone, name=self.name
        )

    def to_state(self) -> dict[str, Any]:
        """Flat key/value mapping as written into host state."""
        return self.model_dump()
