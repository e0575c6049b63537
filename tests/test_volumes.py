import json

import pytest

from flasharray_metrics.model import Space
from flasharray_metrics.volumes import (
    PodShort,
    PriorityAdjustment,
    Qos,
    Source,
    Volume,
    VolumeGroupShort,
    VolumePerformance,
    VolumesList,
    VolumesPerformanceList,
)

VOLUMES = {
    "continuation_token": None,
    "total_item_count": 2,
    "more_items_remaining": False,
    "items": [
        {
            "id": "vol-id-1",
            "name": "pod1::vol1",
            "connection_count": 1,
            "created": 1660000000000,
            "destroyed": False,
            "host_encryption_key_status": "none",
            "priority_adjustment": {
                "priority_adjustment_operator": 0,
                "priority_adjustment_value": 10,
            },
            "provisioned": 1099511627776,
            "serial": "FAKESERIAL000000000000A1",
            "space": {
                "data_reduction": 4.5,
                "shared": None,
                "snapshots": 0,
                "system": None,
                "thin_provisioning": 0.75,
                "total_physical": 2048,
                "total_provisioned": 1099511627776,
                "total_reduction": 18.0,
                "unique": 2048,
                "virtual": 8192,
            },
            "time_remaining": None,
            "pod": {"id": "pod-id-1", "name": "pod1"},
            "source": {"id": None, "name": None},
            "subtype": "regular",
            "volume_group": {"id": None, "name": None},
            "requested_promotion_state": "promoted",
            "promotion_status": "promoted",
            "priority": 0,
        },
        {
            "id": "vol-id-2",
            "name": "vg1/vol2",
            "serial": "FAKESERIAL000000000000B2",
            "volume_group": {"id": "vg-id-1", "name": "vg1"},
            "space": {"data_reduction": 1.0, "total_effective": 512},
        },
    ],
    "total": [{"space": {"virtual": 8704}}],
}

VOLUMES_PERFORMANCE = {
    "continuation_token": None,
    "total_item_count": 1,
    "more_items_remaining": False,
    "items": [
        {
            "id": "vol-id-1",
            "name": "pod1::vol1",
            "bytes_per_mirrored_write": 0,
            "bytes_per_op": 4096,
            "bytes_per_read": 8192,
            "bytes_per_write": 2048,
            "mirrored_write_bytes_per_sec": 0,
            "mirrored_writes_per_sec": 0,
            "queue_usec_per_read_op": 12,
            "read_bytes_per_sec": 81920,
            "reads_per_sec": 10,
            "san_usec_per_read_op": 30,
            "service_usec_per_read_op": 150.5,
            "time": 1660000000000,
            "usec_per_read_op": 200,
            "usec_per_write_op": 250,
            "write_bytes_per_sec": 20480,
            "writes_per_sec": 10,
            "service_usec_per_read_op_cache_reduction": 0.25,
        }
    ],
    "total": [],
}


def test_volumes_list_items():
    volumes = VolumesList.decode(VOLUMES)
    assert [v.name for v in volumes.items] == ["pod1::vol1", "vg1/vol2"]
    first = volumes.items[0]
    assert first.serial == "FAKESERIAL000000000000A1"
    assert first.pod == PodShort(id="pod-id-1", name="pod1")
    assert first.volume_group == VolumeGroupShort()
    assert first.source == Source()
    assert first.priority_adjustment == PriorityAdjustment(0, 10)
    assert first.provisioned == 1099511627776
    assert first.subtype == "regular"
    assert first.time_remaining == 0


def test_volume_space_values():
    volume = VolumesList.decode(VOLUMES).items[0]
    assert volume.space.data_reduction == 4.5
    assert volume.space.shared == 0.0
    assert volume.space.total_physical == 2048.0
    assert isinstance(volume.space.total_physical, float)
    assert volume.space.total_effective == 0.0


def test_volumes_list_total_and_header():
    volumes = VolumesList.decode(VOLUMES)
    assert volumes.total_item_count == 2
    assert volumes.continuation_token == ""
    assert volumes.more_items_remaining is False
    assert volumes.total == [Volume(space=Space(virtual=8704.0))]


def test_volume_group_and_defaults():
    second = VolumesList.decode(VOLUMES).items[1]
    assert second.volume_group.name == "vg1"
    assert second.pod == PodShort()
    assert second.connection_count == 0
    assert second.destroyed is False
    assert second.space.total_effective == 512.0


def test_volumes_loads_matches_decode():
    text = json.dumps(VOLUMES)
    assert VolumesList.loads(text) == VolumesList.decode(VOLUMES)


def test_volume_wrong_type_raises():
    with pytest.raises(TypeError):
        Volume.decode({"serial": 42})


def test_volumes_items_not_array_raises():
    with pytest.raises(TypeError):
        VolumesList.decode({"items": {"name": "vol"}})


def test_qos_decode():
    assert Qos.decode({"bandwidth_limit": 1000, "iops_limit": 50}) == Qos(1000, 50)
    assert Qos.decode(None) == Qos(0, 0)


def test_volumes_performance_items():
    perf = VolumesPerformanceList.decode(VOLUMES_PERFORMANCE)
    assert len(perf.items) == 1
    item = perf.items[0]
    assert item.name == "pod1::vol1"
    assert item.bytes_per_op == 4096.0
    assert item.service_usec_per_read_op == 150.5
    assert item.service_usec_per_read_op_cache_reduction == 0.25
    assert item.time == 1660000000000
    assert item.queue_usec_per_write_op == 0.0
    assert perf.total == []


def test_volume_performance_time_must_be_int():
    with pytest.raises(TypeError):
        VolumePerformance.decode({"time": 1.5})