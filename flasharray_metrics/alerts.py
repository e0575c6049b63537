"""Alert records."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .model import Model


@dataclass
class Alert(Model):
    """An alert raised by the array."""

    id: str = ""
    name: str = ""
    actual: str = ""
    closed: int = 0
    code: int = 0
    component_name: str = ""
    component_type: str = ""
    created: int = 0
    description: str = ""
    expected: str = ""
    flagged: bool = False
    issue: str = ""
    index: int = 0
    knowledge_base_url: str = ""
    notified: int = 0
    severity: str = ""
    state: str = ""
    summary: str = ""
    updated: int = 0


@dataclass
class AlertsList(Model):
    """Response of the alerts endpoint."""

    continuation_token: str = ""
    total_item_count: int = 0
    more_items_remaining: bool = False
    items: list[Alert] = field(default_factory=list)

    def filter_state(self, state: str) -> AlertsList:
        """Return a list holding only the alerts in the given state."""
        matching = [alert for alert in self.items if alert.state == state]
        return dataclasses.replace(
            self, items=matching, total_item_count=len(matching)
        )