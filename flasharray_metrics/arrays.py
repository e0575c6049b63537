"""Array records: inventory, membership summaries and performance.

Also holds the record shapes that the other endpoint modules build on.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .model import Model, Space


@dataclass
class _Listing(Model):
    """Envelope fields shared by every list response."""

    continuation_token: str = ""
    total_item_count: int = 0
    more_items_remaining: bool = False


@dataclass
class _Reference(Model):
    """A reference to another object by id and name."""

    id: str = ""
    name: str = ""


@dataclass
class _IoPerformance(Model):
    """I/O counters reported for arrays, hosts, volumes and pods."""

    bytes_per_mirrored_write: float = 0.0
    bytes_per_op: float = 0.0
    bytes_per_read: float = 0.0
    bytes_per_write: float = 0.0
    mirrored_write_bytes_per_sec: float = 0.0
    mirrored_writes_per_sec: float = 0.0
    qos_rate_limit_usec_per_mirrored_write_op: float = 0.0
    qos_rate_limit_usec_per_read_op: float = 0.0
    qos_rate_limit_usec_per_write_op: float = 0.0
    queue_usec_per_mirrored_write_op: float = 0.0
    queue_usec_per_read_op: float = 0.0
    queue_usec_per_write_op: float = 0.0
    read_bytes_per_sec: float = 0.0
    reads_per_sec: float = 0.0
    san_usec_per_mirrored_write_op: float = 0.0
    san_usec_per_read_op: float = 0.0
    san_usec_per_write_op: float = 0.0
    service_usec_per_mirrored_write_op: float = 0.0
    service_usec_per_read_op: float = 0.0
    service_usec_per_write_op: float = 0.0
    time: int = 0
    usec_per_mirrored_write_op: float = 0.0
    usec_per_read_op: float = 0.0
    usec_per_write_op: float = 0.0
    write_bytes_per_sec: float = 0.0
    writes_per_sec: float = 0.0
    service_usec_per_read_op_cache_reduction: float = 0.0


@dataclass
class DataAtRest(Model):
    """Data-at-rest encryption settings."""

    algorithm: str = ""
    enabled: bool = False


@dataclass
class Encryption(Model):
    """Array encryption state."""

    data_at_rest: DataAtRest = field(default_factory=DataAtRest)
    module_version: str = ""


@dataclass
class EradicationConfig(Model):
    """Eradication settings for destroyed objects."""

    eradication_delay: int = 0
    manual_eradication: str = ""


@dataclass
class Array(_Reference):
    """A FlashArray as reported by the arrays endpoint."""

    banner: str = ""
    capacity: float = 0.0
    console_lock_enabled: bool = False
    encryption: Encryption = field(default_factory=Encryption)
    eradication_config: EradicationConfig = field(default_factory=EradicationConfig)
    idle_timeout: int = 0
    ntp_servers: list[str] = field(default_factory=list)
    os: str = ""
    parity: float = 0.0
    scsi_timeout: int = 0
    space: Space = field(default_factory=Space)
    version: str = ""


@dataclass
class ArrayShort(_Reference):
    """An array as a member of a pod or a host's preferred arrays."""

    frozen_at: int = 0
    mediator_status: str = ""
    pre_elected: bool = False
    progress: float = 0.0
    status: str = ""


@dataclass
class ArrayTiny(_Reference):
    """A reference to an array by id and name."""


@dataclass
class ArraysList(_Listing):
    """Response of the arrays endpoint."""

    items: list[Array] = field(default_factory=list)


@dataclass
class ArrayPerformance(_IoPerformance):
    """Array-wide performance counters."""

    name: str = ""
    id: str = ""
    queue_depth: float = 0.0
    local_queue_usec_per_op: float = 0.0
    usec_per_other_op: float = 0.0
    others_per_sec: float = 0.0


@dataclass
class ArraysPerformanceList(_Listing):
    """Response of the array performance endpoint."""

    items: list[ArrayPerformance] = field(default_factory=list)