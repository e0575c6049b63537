"""Host records: inventory, path balance and performance."""

from __future__ import annotations

from dataclasses import dataclass, field

from .arrays import ArrayShort, _IoPerformance, _Listing
from .connections import HostGroupShort
from .model import Model, Space


@dataclass
class Chap(Model):
    """CHAP credentials configured for a host."""

    host_password: str = ""
    host_user: str = ""
    target_password: str = ""
    target_user: str = ""


@dataclass
class PortConnectivity(Model):
    """Redundancy of a host's connections to the array ports."""

    details: str = ""
    status: str = ""


@dataclass
class Host(Model):
    """A host as reported by the hosts endpoint."""

    name: str = ""
    chap: Chap = field(default_factory=Chap)
    connection_count: int = 0
    host_group: HostGroupShort = field(default_factory=HostGroupShort)
    iqns: list[str] = field(default_factory=list)
    nqns: list[str] = field(default_factory=list)
    personality: str = ""
    port_connectivity: PortConnectivity = field(default_factory=PortConnectivity)
    space: Space = field(default_factory=Space)
    preferred_arrays: list[ArrayShort] = field(default_factory=list)
    wwns: list[str] = field(default_factory=list)
    is_local: bool = False


@dataclass
class HostsList(_Listing):
    """Response of the hosts endpoint."""

    items: list[Host] = field(default_factory=list)


@dataclass
class _Port(Model):
    """Addresses identifying one end of a path."""

    iqn: str = ""
    nqn: str = ""
    portal: str = ""
    wwn: str = ""


@dataclass
class Initiator(_Port):
    """The host side of a path."""


@dataclass
class Target(_Port):
    """The array side of a path."""

    name: str = ""
    failover: str = ""


@dataclass
class HostBalance(Model):
    """I/O balance of one host path."""

    name: str = ""
    op_count: int = 0
    fraction_relative_to_max: float = 0.0
    initiator: Initiator = field(default_factory=Initiator)
    target: Target = field(default_factory=Target)
    time: int = 0


@dataclass
class HostsBalanceList(_Listing):
    """Response of the host path balance endpoint."""

    items: list[HostBalance] = field(default_factory=list)


@dataclass
class HostPerformance(_IoPerformance):
    """Performance counters of a host."""

    name: str = ""


@dataclass
class HostsPerformanceList(_Listing):
    """Response of the host performance endpoint."""

    items: list[HostPerformance] = field(default_factory=list)
    total: list[HostPerformance] = field(default_factory=list)