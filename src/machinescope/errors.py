"""Errors raised by a machine type read.

Every error aborts the read it came from. Transport and auth failures from
the Compute API are not wrapped; they propagate as the
``google.api_core.exceptions`` type the client raised.
"""


class MachineScopeError(Exception):
    """Base class for all machinescope errors."""


class ConfigurationError(MachineScopeError):
    """An identifier could not be resolved from the input or provider config."""


class ProjectNotSetError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("project: required field is not set")


class MissingZoneError(ConfigurationError):
    """Machine type catalogs are zonal, so a lookup needs a zone."""

    def __init__(self) -> None:
        super().__init__(
            "Please specify zone to get appropriate machine types for zone. "
            "Unable to get zone: Cannot determine zone: set in this resource, "
            "or set provider-level zone."
        )


class MissingMachineTypeError(MachineScopeError):
    def __init__(self) -> None:
        super().__init__("Please specify machine_type to get machine type details")


class MachineTypeNotFoundError(MachineScopeError):
    """The machine type does not exist in the requested project and zone."""

    def __init__(self, machine_type: str, project: str, zone: str) -> None:
        self.machine_type = machine_type
        self.project = project
        self.zone = zone
        self.resource = f"Machine Type {machine_type}"
        super().__init__(
            f"{self.resource} not found in project {project}, zone {zone}"
        )


class FieldSetError(MachineScopeError):
    """A response field could not be written into the result record."""

    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        self.detail = detail
        super().__init__(f"Error setting {field}: {detail}")
