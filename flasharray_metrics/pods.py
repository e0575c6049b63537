"""Pod records: inventory, performance, replication and replica links."""

from __future__ import annotations

from dataclasses import dataclass, field

from .arrays import (
    Array,
    ArrayShort,
    ArrayTiny,
    EradicationConfig,
    _IoPerformance,
    _Listing,
    _Reference,
)
from .model import Model, Space
from .volumes import PodShort, Source


@dataclass
class Pod(_Reference):
    """A pod as reported by the pods endpoint."""

    arrays: list[ArrayShort] = field(default_factory=list)
    destroyed: bool = False
    failover_preferences: list[Array] = field(default_factory=list)
    footprint: int = 0
    mediator: str = ""
    mediator_version: str = ""
    source: Source = field(default_factory=Source)
    space: Space = field(default_factory=Space)
    time_remaining: int = 0
    requested_promotion_state: str = ""
    promotion_status: str = ""
    link_source_count: int = 0
    link_target_count: int = 0
    array_count: int = 0
    eradication_config: EradicationConfig = field(default_factory=EradicationConfig)


@dataclass
class PodsList(_Listing):
    """Response of the pods endpoint."""

    items: list[Pod] = field(default_factory=list)
    total: list[Pod] = field(default_factory=list)


@dataclass
class PodPerformance(_IoPerformance):
    """Performance counters of a pod."""

    id: str = ""
    name: str = ""
    others_per_sec: float = 0.0
    usec_per_other_op: float = 0.0


@dataclass
class PodsPerformanceList(_Listing):
    """Response of the pod performance endpoint."""

    items: list[PodPerformance] = field(default_factory=list)
    total: list[PodPerformance] = field(default_factory=list)


@dataclass
class PerformanceReplication(Model):
    """Replication bandwidth in each direction."""

    from_remote_bytes_per_sec: float = 0.0
    to_remote_bytes_per_sec: float = 0.0
    total_bytes_per_sec: float = 0.0


def _replication():
    return field(default_factory=PerformanceReplication)


@dataclass
class PodPerformanceReplication(Model):
    """Replication bandwidth of a pod, by replication kind."""

    pod: PodShort = field(default_factory=PodShort)
    time: int = 0
    continuous_bytes_per_sec: PerformanceReplication = _replication()
    resync_bytes_per_sec: PerformanceReplication = _replication()
    sync_bytes_per_sec: PerformanceReplication = _replication()
    periodic_bytes_per_sec: PerformanceReplication = _replication()
    total_bytes_per_sec: float = 0.0


@dataclass
class PodsPerformanceReplicationList(_Listing):
    """Response of the pod replication performance endpoint."""

    items: list[PodPerformanceReplication] = field(default_factory=list)
    total: list[PodPerformanceReplication] = field(default_factory=list)


@dataclass
class Lag(Model):
    """Average and maximum replication lag."""

    avg: float = 0.0
    max: float = 0.0


@dataclass
class _ReplicaLink(Model):
    """Fields common to every pod replica link report."""

    id: str = ""
    time: int = 0
    remotes: list[ArrayTiny] = field(default_factory=list)
    local_pod: PodShort = field(default_factory=PodShort)
    remote_pod: PodShort = field(default_factory=PodShort)
    direction: str = ""


@dataclass
class PodReplicaLinksLag(_ReplicaLink):
    """Replication lag of a pod replica link."""

    lag: Lag = field(default_factory=Lag)
    status: str = ""
    recovery_point: int = 0


@dataclass
class PodReplicaLinksLagList(_Listing):
    """Response of the pod replica link lag endpoint."""

    items: list[PodReplicaLinksLag] = field(default_factory=list)


@dataclass
class PodReplicaLinksPerformance(_ReplicaLink):
    """Replication bandwidth of a pod replica link."""

    bytes_per_sec_from_remote: float = 0.0
    bytes_per_sec_to_remote: float = 0.0
    bytes_per_sec_total: float = 0.0


@dataclass
class PodReplicaLinksPerformanceList(_Listing):
    """Response of the pod replica link replication performance endpoint."""

    items: list[PodReplicaLinksPerformance] = field(default_factory=list)
    total: list[PodReplicaLinksPerformance] = field(default_factory=list)