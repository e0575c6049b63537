"""File system directory records: inventory and performance."""

from __future__ import annotations

from dataclasses import dataclass, field

from .arrays import _Listing, _Reference
from .model import Model, Space


@dataclass
class _Resource(_Reference):
    """A reference that also names the kind of object it points at."""

    resource_type: str = ""


@dataclass
class FileSystem(_Reference):
    """A reference to a file system."""


@dataclass
class Member(_Resource):
    """The object a policy limit applies to."""


@dataclass
class Policy(_Resource):
    """A reference to a policy."""


@dataclass
class LimitedBy(Model):
    """The policy and member that limit a directory."""

    member: Member = field(default_factory=Member)
    policy: Policy = field(default_factory=Policy)


@dataclass
class Directory(_Reference):
    """A managed directory."""

    created: int = 0
    destroyed: bool = False
    directory_name: str = ""
    file_system: FileSystem = field(default_factory=FileSystem)
    path: str = ""
    space: Space = field(default_factory=Space)
    time_remaining: int = 0
    limited_by: LimitedBy = field(default_factory=LimitedBy)


@dataclass
class DirectoriesList(_Listing):
    """Response of the directories endpoint."""

    items: list[Directory] = field(default_factory=list)
    total: list[Directory] = field(default_factory=list)


@dataclass
class DirectoryPerformance(_Reference):
    """Performance counters of a directory."""

    bytes_per_op: float = 0.0
    bytes_per_read: float = 0.0
    bytes_per_write: float = 0.0
    others_per_sec: float = 0.0
    read_bytes_per_sec: float = 0.0
    reads_per_sec: float = 0.0
    time: int = 0
    usec_per_other_op: float = 0.0
    usec_per_read_op: float = 0.0
    usec_per_write_op: float = 0.0
    write_bytes_per_sec: float = 0.0
    writes_per_sec: float = 0.0


@dataclass
class DirectoriesPerformanceList(_Listing):
    """Response of the directory performance endpoint."""

    items: list[DirectoryPerformance] = field(default_factory=list)
    total: list[DirectoryPerformance] = field(default_factory=list)