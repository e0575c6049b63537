"""Volume performance gauges."""

from __future__ import annotations

from collections.abc import Iterator

from .metrics import Desc, Sample
from .volumes import VolumesList, VolumesPerformanceList

_NAA_PREFIX = "naa.624a9370"

_LATENCY = (
    "queue_usec_per_mirrored_write_op",
    "queue_usec_per_read_op",
    "queue_usec_per_write_op",
    "san_usec_per_mirrored_write_op",
    "san_usec_per_read_op",
    "san_usec_per_write_op",
    "service_usec_per_mirrored_write_op",
    "service_usec_per_read_op",
    "service_usec_per_write_op",
    "usec_per_mirrored_write_op",
    "usec_per_read_op",
    "usec_per_write_op",
    "service_usec_per_read_op_cache_reduction",
)
_BANDWIDTH = (
    "mirrored_write_bytes_per_sec",
    "read_bytes_per_sec",
    "write_bytes_per_sec",
)
_THROUGHPUT = (
    "mirrored_writes_per_sec",
    "reads_per_sec",
    "writes_per_sec",
)
_AVERAGE_SIZE = (
    "bytes_per_mirrored_write",
    "bytes_per_op",
    "bytes_per_read",
    "bytes_per_write",
)

_LABELS = ("naa_id", "name", "dimension")


def naa_ids(volumes: VolumesList) -> dict[str, str]:
    """Map each volume name to its NAA identifier."""
    return {volume.name: _NAA_PREFIX + volume.serial for volume in volumes.items}


class VolumesPerformanceCollector:
    """Turns volume performance counters into latency, bandwidth, IOPS and size gauges."""

    def __init__(self, performance: VolumesPerformanceList, volumes: VolumesList) -> None:
        self.performance = performance
        self.naa_ids = naa_ids(volumes)
        self.latency_desc = Desc(
            "purefa_volume_performance_latency_usec",
            "FlashArray volume latency",
            _LABELS,
        )
        self.throughput_desc = Desc(
            "purefa_volume_performance_throughput_iops",
            "FlashArray volume throughput",
            _LABELS,
        )
        self.bandwidth_desc = Desc(
            "purefa_volume_performance_bandwidth_bytes",
            "FlashArray volume throughput",
            _LABELS,
        )
        self.average_size_desc = Desc(
            "purefa_volume_performance_average_bytes",
            "FlashArray volume average operations size",
            _LABELS,
        )

    def describe(self) -> Iterator[Desc]:
        """Yield each descriptor the current data produces, once."""
        seen: set[Desc] = set()
        for sample in self.collect():
            if sample.desc not in seen:
                seen.add(sample.desc)
                yield sample.desc

    def collect(self) -> Iterator[Sample]:
        """Yield the gauges for every volume in the performance listing."""
        families = (
            (self.latency_desc, _LATENCY),
            (self.bandwidth_desc, _BANDWIDTH),
            (self.throughput_desc, _THROUGHPUT),
            (self.average_size_desc, _AVERAGE_SIZE),
        )
        for perf in self.performance.items:
            naa = self.naa_ids.get(perf.name, "")
            for desc, dimensions in families:
                for dimension in dimensions:
                    yield desc.sample(getattr(perf, dimension), naa, perf.name, dimension)