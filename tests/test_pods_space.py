from flasharray_metrics.metrics import render_text
from flasharray_metrics.pods import PodsList
from flasharray_metrics.pods_space import PodsSpaceCollector

SPACE_KEYS = [
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
]

PODS = {
    "continuation_token": None,
    "total_item_count": 2,
    "more_items_remaining": False,
    "items": [
        {
            "id": "pod-id-0001",
            "name": "pod-a",
            "mediator": "purestorage",
            "arrays": [
                {"id": "array-id-1", "name": "array-one", "mediator_status": "online"},
                {"id": "array-id-2", "name": "array-two", "mediator_status": "unreachable"},
            ],
            "space": {
                "data_reduction": 4.25,
                **{key: float(1024 * (position + 1)) for position, key in enumerate(SPACE_KEYS)},
            },
        },
        {
            "id": "pod-id-0002",
            "name": "pod-b",
            "mediator": "mediator.example.com",
            "arrays": [
                {"id": "array-id-1", "name": "array-one", "mediator_status": "online"},
            ],
            "space": {"data_reduction": 1.5, "shared": 2048, "total_physical": 9999999},
        },
    ],
}


def _observed(collector):
    return {(s.desc.name, s.labels, s.value) for s in collector.collect()}


def _want(pods):
    want = set()
    for p in pods.items:
        want.add(
            ("purefa_pod_space_data_reduction_ratio", (("name", p.name),), p.space.data_reduction)
        )
        for key in SPACE_KEYS:
            want.add(
                (
                    "purefa_pod_space_bytes",
                    (("name", p.name), ("space", key)),
                    getattr(p.space, key),
                )
            )
        for a in p.arrays:
            s = 1.0 if a.mediator_status == "online" else 0.0
            want.add(
                (
                    "purefa_pod_mediator_status",
                    (
                        ("array", a.name),
                        ("mediator", p.mediator),
                        ("pod", p.name),
                        ("status", a.mediator_status),
                    ),
                    s,
                )
            )
    return want


def test_pods_space_collector():
    pods = PodsList.decode(PODS)
    collector = PodsSpaceCollector(pods)
    samples = list(collector.collect())
    want = _want(pods)
    assert _observed(collector) == want
    assert len(samples) == len(want)


def test_mediator_status_values():
    collector = PodsSpaceCollector(PodsList.decode(PODS))
    mediator = {
        dict(s.labels)["array"] + "/" + dict(s.labels)["pod"]: s.value
        for s in collector.collect()
        if s.desc.name == "purefa_pod_mediator_status"
    }
    assert mediator == {"array-one/pod-a": 1.0, "array-two/pod-a": 0.0, "array-one/pod-b": 1.0}


def test_missing_space_fields_are_zero():
    collector = PodsSpaceCollector(PodsList.decode(PODS))
    values = {
        dict(s.labels)["space"]: s.value
        for s in collector.collect()
        if s.desc.name == "purefa_pod_space_bytes" and dict(s.labels)["name"] == "pod-b"
    }
    assert values["shared"] == 2048.0
    assert values["total_physical"] == 9999999.0
    assert values["snapshots"] == 0.0
    assert set(values) == set(SPACE_KEYS)


def test_describe_lists_each_descriptor_once():
    collector = PodsSpaceCollector(PodsList.decode(PODS))
    names = [desc.name for desc in collector.describe()]
    assert names == [
        "purefa_pod_space_data_reduction_ratio",
        "purefa_pod_space_bytes",
        "purefa_pod_mediator_status",
    ]


def test_empty_pods_produce_nothing():
    collector = PodsSpaceCollector(PodsList())
    assert list(collector.collect()) == []
    assert list(collector.describe()) == []


def test_rendered_output_has_families():
    text = render_text(PodsSpaceCollector(PodsList.decode(PODS)).collect())
    assert "# TYPE purefa_pod_space_bytes gauge" in text
    assert 'purefa_pod_space_data_reduction_ratio{name="pod-a"} 4.25' in text