import dataclasses

import pytest

from flasharray_metrics.model import Space

FULL = {
    "data_reduction": 4.25,
    "shared": 1024.0,
    "snapshots": 2048.0,
    "system": 11.0,
    "thin_provisioning": 0.5,
    "total_physical": 8192.0,
    "total_provisioned": 65536.0,
    "total_reduction": 7.75,
    "unique": 3072.0,
    "virtual": 40960.0,
    "replication": 12.0,
    "shared_effective": 13.0,
    "snapshots_effective": 14.0,
    "unique_effective": 15.0,
    "total_effective": 16.0,
}


def test_decode_reads_every_field():
    space = Space.decode(FULL)
    assert dataclasses.asdict(space) == FULL


def test_round_trip_through_asdict():
    space = Space.decode(FULL)
    assert Space.decode(dataclasses.asdict(space)) == space


def test_missing_keys_keep_zero_values():
    assert Space.decode({}) == Space()
    assert Space.decode(None) == Space()


def test_null_leaves_field_at_zero():
    assert Space.decode({"shared": None, "unique": 5.5}) == Space(unique=5.5)


def test_integers_become_floats():
    space = Space.decode({"unique": 5})
    assert space.unique == 5
    assert type(space.unique) is float


def test_unknown_keys_are_ignored():
    assert Space.decode({"bogus": 1, "virtual": 2.5}) == Space(virtual=2.5)


def test_keys_match_case_insensitively():
    assert Space.decode({"Data_Reduction": 3.5}) == Space(data_reduction=3.5)


@pytest.mark.parametrize(
    "payload",
    [{"shared": "big"}, {"shared": True}, {"snapshots": [1.0]}],
)
def test_wrong_value_type_raises(payload):
    with pytest.raises(TypeError):
        Space.decode(payload)


def test_non_object_raises():
    with pytest.raises(TypeError):
        Space.decode([1, 2])


def test_loads_text_and_bytes():
    text = '{"total_physical": 8192, "virtual": 40960.0}'
    expected = Space(total_physical=8192.0, virtual=40960.0)
    assert Space.loads(text) == expected
    assert Space.loads(text.encode()) == expected


def test_loads_rejects_malformed_json():
    with pytest.raises(ValueError):
        Space.loads('{"shared": ')