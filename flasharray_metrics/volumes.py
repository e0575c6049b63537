"""Volume records: inventory and performance."""

from __future__ import annotations

from dataclasses import dataclass, field

from .arrays import _IoPerformance, _Listing, _Reference
from .model import Model, Space


@dataclass
class Qos(Model):
    """Quality-of-service limits."""

    bandwidth_limit: int = 0
    iops_limit: int = 0


@dataclass
class PriorityAdjustment(Model):
    """Adjustment applied to a volume's I/O priority."""

    priority_adjustment_operator: int = 0
    priority_adjustment_value: int = 0


@dataclass
class Source(_Reference):
    """The object a volume or pod was copied from."""


@dataclass
class VolumeGroupShort(_Reference):
    """A reference to a volume group."""


@dataclass
class PodShort(_Reference):
    """A reference to a pod."""


@dataclass
class Volume(_Reference):
    """A volume as reported by the volumes endpoint."""

    connection_count: int = 0
    created: int = 0
    destroyed: bool = False
    host_encryption_key_status: str = ""
    priority_adjustment: PriorityAdjustment = field(default_factory=PriorityAdjustment)
    provisioned: int = 0
    serial: str = ""
    space: Space = field(default_factory=Space)
    time_remaining: int = 0
    pod: PodShort = field(default_factory=PodShort)
    source: Source = field(default_factory=Source)
    subtype: str = ""
    volume_group: VolumeGroupShort = field(default_factory=VolumeGroupShort)
    requested_promotion_state: str = ""
    promotion_status: str = ""
    priority: int = 0


@dataclass
class VolumesList(_Listing):
    """Response of the volumes endpoint."""

    items: list[Volume] = field(default_factory=list)
    total: list[Volume] = field(default_factory=list)


@dataclass
class VolumePerformance(_IoPerformance):
    """Performance counters of a volume."""

    id: str = ""
    name: str = ""


@dataclass
class VolumesPerformanceList(_Listing):
    """Response of the volume performance endpoint."""

    items: list[VolumePerformance] = field(default_factory=list)
    total: list[VolumePerformance] = field(default_factory=list)