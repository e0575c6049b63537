"""Pod space and mediator gauges."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .metrics import Desc, Sample
from .pods import PodsList

# Space fields reported as "space" dimensions, in output order.
_SPACE_DIMENSIONS = (
    "shared",
    "snapshots",
    "system",
    "thin_provisioning",
    "total_physical",
    "total_provisioned",
    "total_reduction",
    "unique",
    "virtual",
    "replication",
    "shared_effective",
    "snapshots_effective",
    "unique_effective",
    "total_effective",
)


def _distinct_descs(samples: Iterable[Sample]) -> Iterator[Desc]:
    """Yield each descriptor found among the samples, once, in order."""
    seen: set[Desc] = set()
    for sample in samples:
        if sample.desc not in seen:
            seen.add(sample.desc)
            yield sample.desc


class PodsSpaceCollector:
    """Turns a pods listing into space, reduction and mediator gauges."""

    def __init__(self, pods: PodsList) -> None:
        self.pods = pods
        self.reduction_desc = Desc(
            "purefa_pod_space_data_reduction_ratio",
            "FlashArray pod space data reduction",
            ("name",),
        )
        self.space_desc = Desc(
            "purefa_pod_space_bytes",
            "FlashArray pod space in bytes",
            ("name", "space"),
        )
        self.mediator_desc = Desc(
            "purefa_pod_mediator_status",
            "FlashArray pod mediator status",
            ("array", "mediator", "pod", "status"),
        )

    def describe(self) -> Iterator[Desc]:
        """Yield each descriptor the current data produces, once."""
        return _distinct_descs(self.collect())

    def collect(self) -> Iterator[Sample]:
        """Yield the gauges for every pod."""
        for pod in self.pods.items:
            yield self.reduction_desc.sample(pod.space.data_reduction, pod.name)
            for dimension in _SPACE_DIMENSIONS:
                yield self.space_desc.sample(
                    getattr(pod.space, dimension), pod.name, dimension
                )
            for array in pod.arrays:
                status = 1.0 if array.mediator_status == "online" else 0.0
                yield self.mediator_desc.sample(
                    status, array.name, pod.mediator, pod.name, array.mediator_status
                )