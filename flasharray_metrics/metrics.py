"""Metric descriptors, constant gauge samples and text exposition."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real

_METRIC_NAME = re.compile(r"[a-zA-Z_:][a-zA-Z0-9_:]*")
_LABEL_NAME = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")


def _check_label_name(name: str) -> None:
    if not isinstance(name, str) or not _LABEL_NAME.fullmatch(name) or name.startswith("__"):
        raise ValueError(f"invalid label name {name!r}")


@dataclass(frozen=True)
class Desc:
    """Describes a gauge: its name, help text and label names."""

    name: str
    help: str
    labels: tuple[str, ...] = ()
    const_labels: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _METRIC_NAME.fullmatch(self.name):
            raise ValueError(f"invalid metric name {self.name!r}")
        labels = tuple(self.labels)
        raw = self.const_labels
        pairs = raw.items() if isinstance(raw, Mapping) else raw
        const = tuple(sorted((str(key), value) for key, value in pairs))
        for _, value in const:
            if not isinstance(value, str):
                raise TypeError(f"constant label value {value!r} is not a string")
        names = [*labels, *(key for key, _ in const)]
        for label in names:
            _check_label_name(label)
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate label names in {self.name}")
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "const_labels", const)

    def sample(self, value: float, *args: str) -> Sample:
        """Return a gauge sample with the given value and label values."""
        if len(args) != len(self.labels):
            raise ValueError(
                f"{self.name}: inconsistent label cardinality: expected "
                f"{len(self.labels)} label values, got {len(args)}"
            )
        if not isinstance(value, Real):
            raise TypeError(f"{self.name}: sample value {value!r} is not a number")
        for arg in args:
            if not isinstance(arg, str):
                raise TypeError(f"{self.name}: label value {arg!r} is not a string")
        pairs = sorted([*zip(self.labels, args), *self.const_labels])
        return Sample(self, tuple(pairs), float(value))


@dataclass(frozen=True)
class Sample:
    """One gauge value with its labels, sorted by label name."""

    desc: Desc
    labels: tuple[tuple[str, str], ...]
    value: float


def _escape_help(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def _escape_label_value(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def _format_labels(labels: tuple[tuple[str, str], ...]) -> str:
    if not labels:
        return ""
    inner = ",".join(f'{name}="{_escape_label_value(value)}"' for name, value in labels)
    return "{" + inner + "}"


def _format_value(value: float) -> str:
    """Shortest round-tripping form, switching to exponent form like %g."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(map(str, digits))
    count = len(text)
    point = count + exponent
    exp = point - 1
    prefix = "-" if sign else ""
    if exp < -4 or exp >= 6:
        mantissa = text[0] + ("." + text[1:] if count > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{text}"
    if point >= count:
        return f"{prefix}{text}{'0' * (point - count)}"
    return f"{prefix}{text[:point]}.{text[point:]}"


def render_text(samples: Iterable[Sample]) -> str:
    """Render samples in the text exposition format, grouped by metric."""
    families: dict[str, tuple[Desc, list[Sample]]] = {}
    for sample in samples:
        families.setdefault(sample.desc.name, (sample.desc, []))[1].append(sample)
    lines: list[str] = []
    for name, (desc, members) in families.items():
        lines.append(f"# HELP {name} {_escape_help(desc.help)}")
        lines.append(f"# TYPE {name} gauge")
        lines.extend(
            f"{name}{_format_labels(member.labels)} {_format_value(member.value)}"
            for member in members
        )
    return "".join(line + "\n" for line in lines)