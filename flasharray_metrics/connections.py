"""Host-to-volume connection records."""

from __future__ import annotations

from dataclasses import dataclass, field

from .arrays import _Listing, _Reference
from .model import Model


@dataclass
class _Named(Model):
    """A reference to another object by name alone."""

    name: str = ""


@dataclass
class HostShort(_Named):
    """A reference to a host by name."""


@dataclass
class HostGroupShort(_Named):
    """A reference to a host group by name."""


@dataclass
class ProtocolEndpoint(_Reference):
    """A reference to a protocol endpoint."""


@dataclass
class VolumeShort(_Reference):
    """A reference to a volume."""


@dataclass
class Connection(Model):
    """A volume exported to a host or host group."""

    host: HostShort = field(default_factory=HostShort)
    host_group: HostGroupShort = field(default_factory=HostGroupShort)
    lun: int = 0
    protocol_endpoint: ProtocolEndpoint = field(default_factory=ProtocolEndpoint)
    volume: VolumeShort = field(default_factory=VolumeShort)


@dataclass
class ConnectionsList(_Listing):
    """Response of the connections endpoint."""

    items: list[Connection] = field(default_factory=list)