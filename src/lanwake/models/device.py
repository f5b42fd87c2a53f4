"""Device models."""

from pydantic import BaseModel, Field


class Device(BaseModel):
    """A host on the local network, either discovered or a wake target.

    ``ip_address`` may hold a hostname for wake targets. MAC and port are not
    checked here: the wake pipeline validates them and reports every problem.
    """

    model_config = {"frozen": True}

    ip_address: str
    host_name: str = ""
    mac_address: str = ""
    wol_port: int | None = None


class TargetRegistry(BaseModel):
    """Saved wake targets keyed by a friendly name."""

    targets: dict[str, Device] = Field(default_factory=dict)
