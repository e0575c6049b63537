"""Volume space gauges."""

from __future__ import annotations

from collections.abc import Iterator

from .metrics import Desc, Sample
from .pods_space import _SPACE_DIMENSIONS, _distinct_descs
from .volumes import VolumesList

_NAA_PREFIX = "naa.624a9370"


class VolumesSpaceCollector:
    """Turns a volumes listing into space and reduction gauges."""

    def __init__(self, volumes: VolumesList) -> None:
        self.volumes = volumes
        self.reduction_desc = Desc(
            "purefa_volume_space_data_reduction_ratio",
            "FlashArray volume space data reduction",
            ("naa_id", "name", "pod", "volume_group"),
        )
        self.space_desc = Desc(
            "purefa_volume_space_bytes",
            "FlashArray volume space in bytes",
            ("naa_id", "name", "pod", "volume_group", "space"),
        )

    def describe(self) -> Iterator[Desc]:
        """Yield each descriptor the current data produces, once."""
        return _distinct_descs(self.collect())

    def collect(self) -> Iterator[Sample]:
        """Yield the gauges for every volume."""
        for volume in self.volumes.items:
            identity = (
                _NAA_PREFIX + volume.serial,
                volume.name,
                volume.pod.name,
                volume.volume_group.name,
            )
            yield self.reduction_desc.sample(volume.space.data_reduction, *identity)
            for dimension in _SPACE_DIMENSIONS:
                yield self.space_desc.sample(
                    getattr(volume.space, dimension), *identity, dimension
                )