# flasharray-metrics

Typed records for FlashArray REST API responses, and collectors that turn
pod and volume records into gauge samples in the OpenMetrics text format.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Records

Every response shape is a dataclass. The list classes hold the envelope
fields `continuation_token`, `total_item_count` and `more_items_remaining`,
an `items` list, and for some endpoints a `total` list.

| Module | List classes |
| --- | --- |
| `flasharray_metrics.arrays` | `ArraysList`, `ArraysPerformanceList` |
| `flasharray_metrics.alerts` | `AlertsList` |
| `flasharray_metrics.hardware` | `HardwareList` |
| `flasharray_metrics.connections` | `ConnectionsList` |
| `flasharray_metrics.hosts` | `HostsList`, `HostsBalanceList`, `HostsPerformanceList` |
| `flasharray_metrics.directories` | `DirectoriesList`, `DirectoriesPerformanceList` |
| `flasharray_metrics.network` | `NetworkInterfacesList` |
| `flasharray_metrics.volumes` | `VolumesList`, `VolumesPerformanceList` |
| `flasharray_metrics.pods` | `PodsList`, `PodsPerformanceList`, `PodsPerformanceReplicationList`, `PodReplicaLinksLagList`, `PodReplicaLinksPerformanceList` |

The shared space record, `Space`, lives in `flasharray_metrics.model`.

Every record class, list or item, has two class methods: `decode(data)`
builds it from already parsed JSON, and `loads(text)` parses JSON text or
bytes first. Decoding follows these rules:

- a missing key or a JSON `null` leaves the field at its zero value: `""`,
  `0`, `0.0`, `False`, an empty list or an empty nested record;
- keys that match no field are ignored;
- a key matches a field by exact name, or else case-insensitively;
- a JSON integer is accepted for a float field;
- a value of the wrong JSON type, or a document that is not an object,
  raises `TypeError`.

```python
from flasharray_metrics.volumes import VolumesList

volumes = VolumesList.loads(response_text)
for volume in volumes.items:
    print(volume.name, volume.serial, volume.space.total_physical)
```

`AlertsList.filter_state(state)` returns a new list holding only the alerts
in that state, with `total_item_count` set to their number:

```python
from flasharray_metrics.alerts import AlertsList

open_alerts = AlertsList.loads(text).filter_state("open")
```

## Collectors

Three collectors turn records into samples:

- `PodsSpaceCollector(pods)` in `flasharray_metrics.pods_space`, from a
  `PodsList`: `purefa_pod_space_data_reduction_ratio`,
  `purefa_pod_space_bytes` with a `space` label for each space field, and
  `purefa_pod_mediator_status`, which is 1 for each pod array whose mediator
  status is `online` and 0 otherwise.
- `VolumesSpaceCollector(volumes)` in `flasharray_metrics.volumes_space`,
  from a `VolumesList`: `purefa_volume_space_data_reduction_ratio` and
  `purefa_volume_space_bytes`, labelled with `naa_id`, `name`, `pod` and
  `volume_group`.
- `VolumesPerformanceCollector(performance, volumes)` in
  `flasharray_metrics.volumes_performance`, from a `VolumesPerformanceList`
  and a `VolumesList`: `purefa_volume_performance_latency_usec`,
  `..._bandwidth_bytes`, `..._throughput_iops` and `..._average_bytes`, each
  with a `dimension` label naming the counter.

The `naa_id` label is `naa.624a9370` followed by the volume's serial.
`naa_ids(volumes)` gives that mapping from volume name to identifier; a
performance entry for a volume not in the volume list gets an empty
`naa_id`.

Each collector has `collect()`, which yields `Sample` objects, and
`describe()`, which yields each `Desc` that the current data produces,
once. With no items, both yield nothing.

`render_text(samples)` in `flasharray_metrics.metrics` writes samples in the
text exposition format, with `# HELP` and `# TYPE ... gauge` lines for each
metric and label pairs sorted by name:

```python
from flasharray_metrics.metrics import render_text
from flasharray_metrics.pods import PodsList
from flasharray_metrics.pods_space import PodsSpaceCollector

collector = PodsSpaceCollector(PodsList.loads(pods_json))
print(render_text(collector.collect()))
```

`Desc(name, help, labels, const_labels)` can also be used directly.
`Desc.sample(value, *label_values)` checks the names, the number of label
values and their types, raising `ValueError` or `TypeError`.

## What this package does not do

It does not talk to an array. It has no REST client, no login or session
handling, and no HTTP server exposing a metrics endpoint, and it installs no
command. The JSON has to be fetched by other means and handed to the
records' `loads` or `decode`; the rendered text has to be served by the
caller.