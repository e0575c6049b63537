"""Hardware component records."""

from __future__ import annotations

from dataclasses import dataclass, field

from .arrays import _Listing
from .model import Model


@dataclass
class Hardware(Model):
    """A hardware component and its health."""

    name: str = ""
    details: str = ""
    identity_enabled: bool = False
    index: int = 0
    model: str = ""
    serial: str = ""
    slot: int = 0
    speed: int = 0
    status: str = ""
    temperature: int = 0
    type: str = ""
    voltage: int = 0


@dataclass
class HardwareList(_Listing):
    """Response of the hardware endpoint."""

    items: list[Hardware] = field(default_factory=list)