"""Network interface performance records."""

from __future__ import annotations

from dataclasses import dataclass, field

from .model import Model


@dataclass
class Ethernet(Model):
    """Ethernet port counters."""

    other_errors_per_sec: float = 0.0
    received_bytes_per_sec: float = 0.0
    received_crc_errors_per_sec: float = 0.0
    received_frame_errors_per_sec: float = 0.0
    received_packets_per_sec: float = 0.0
    total_errors_per_sec: float = 0.0
    transmitted_bytes_per_sec: float = 0.0
    transmitted_carrier_errors_per_sec: float = 0.0
    transmitted_dropped_errors_per_sec: float = 0.0
    transmitted_packets_per_sec: float = 0.0


@dataclass
class FibreChannel(Model):
    """Fibre Channel port counters."""

    received_bytes_per_sec: float = 0.0
    received_crc_errors_per_sec: float = 0.0
    received_frames_per_sec: float = 0.0
    received_link_failures_per_sec: float = 0.0
    received_loss_of_signal_per_sec: float = 0.0
    received_loss_of_sync_per_sec: float = 0.0
    total_errors_per_sec: float = 0.0
    transmitted_bytes_per_sec: float = 0.0
    transmitted_frames_per_sec: float = 0.0
    transmitted_invalid_words_per_sec: float = 0.0


@dataclass
class NetworkInterface(Model):
    """Performance of one network interface."""

    name: str = ""
    time: int = 0
    interface_type: str = ""
    eth: Ethernet = field(default_factory=Ethernet)
    fc: FibreChannel = field(default_factory=FibreChannel)


@dataclass
class NetworkInterfacesList(Model):
    """Response of the network interface performance endpoint."""

    continuation_token: str = ""
    total_item_count: int = 0
    more_items_remaining: bool = False
    items: list[NetworkInterface] = field(default_factory=list)