"""Compare a hardware snapshot against a requirement policy.

:func:`evaluate` is pure: it reads a :class:`HardwareSnapshot` and a
:class:`Requirements` and returns a :class:`Diagnosis`.  Every dimension is
always checked; a value equal to its threshold passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from .hardware import HardwareSnapshot
from .policy import DEFAULT_REQUIREMENTS, Requirements


# ---------------------------------------------------------------------------
# Enums & result dataclasses
# ---------------------------------------------------------------------------


class Dimension(str, Enum):
    CORES = "cores"
    CLOCK = "clock"
    MEMORY = "memory"
    DISK = "disk"


@dataclass(frozen=True)
class DimensionCheck:
    dimension: Dimension
    actual: Callable[[HardwareSnapshot], float]
    required: Callable[[Requirements], float]
    message: Callable[[float, float], str]

    def passes(self, snapshot: HardwareSnapshot, policy: Requirements) -> bool:
        return self.actual(snapshot) >= self.required(policy)


@dataclass(frozen=True)
class Diagnosis:
    meets: bool
    summary: str
    reason_header: str = ""
    # One slot per Dimension, in Dimension order; "" when that dimension passes.
    per_dimension: tuple[str, str, str, str] = ("", "", "", "")
    snapshot: Optional[HardwareSnapshot] = field(default=None, compare=False)
    requirements: Optional[Requirements] = field(default=None, compare=False)

    def message_for(self, dimension: Dimension) -> str:
        return self.per_dimension[list(Dimension).index(dimension)]

    @property
    def failed_dimensions(self) -> list[Dimension]:
        return [d for d, msg in zip(Dimension, self.per_dimension) if msg]

    @property
    def lines(self) -> list[str]:
        """Summary, reason header and the four slots, blanks included."""
        return [self.summary, self.reason_header, *self.per_dimension]

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "meets_requirements": self.meets,
            "message": self.summary,
            "message_because": self.reason_header,
            "message2": self.per_dimension[0],
            "message3": self.per_dimension[1],
            "message4": self.per_dimension[2],
            "message5": self.per_dimension[3],
            "failed": [d.value for d in self.failed_dimensions],
        }
        if self.snapshot is not None:
            data["snapshot"] = self.snapshot.to_dict()
        if self.requirements is not None:
            data["requirements"] = self.requirements.to_dict()
        return data


# ---------------------------------------------------------------------------
# Message set
# ---------------------------------------------------------------------------

SUMMARY_PASS = "Your PC meets the requirements."
SUMMARY_FAIL = "Your PC does not meet the requirements."
REASON_HEADER = "This is because of:"


def _cores_message(actual: float, required: float) -> str:
    return f"Not enough CPU cores (found {actual:.0f}, need at least {required:.0f})"


def _clock_message(actual: float, required: float) -> str:
    return (
        f"CPU clock speed too low (found {actual:.2f} GHz, "
        f"need at least {required:.2f} GHz)"
    )


def _memory_message(actual: float, required: float) -> str:
    return f"Not enough memory (found {actual:.0f} GB, need at least {required:.0f} GB)"


def _disk_message(actual: float, required: float) -> str:
    return (
        f"Not enough free disk space (found {actual:.0f} GB, "
        f"need at least {required:.0f} GB)"
    )


# ---------------------------------------------------------------------------
# Check table: fixed order, one entry per Dimension
# ---------------------------------------------------------------------------

CHECKS: tuple[DimensionCheck, DimensionCheck, DimensionCheck, DimensionCheck] = (
    DimensionCheck(
        Dimension.CORES,
        actual=lambda s: s.cores,
        required=lambda r: r.min_cores,
        message=_cores_message,
    ),
    DimensionCheck(
        Dimension.CLOCK,
        actual=lambda s: s.clock_ghz,
        required=lambda r: r.min_clock_ghz,
        message=_clock_message,
    ),
    DimensionCheck(
        Dimension.MEMORY,
        actual=lambda s: s.memory_gb,
        required=lambda r: r.min_memory_gb,
        message=_memory_message,
    ),
    DimensionCheck(
        Dimension.DISK,
        actual=lambda s: s.disk_gb,
        required=lambda r: r.min_disk_gb,
        message=_disk_message,
    ),
)


def evaluate(
    snapshot: HardwareSnapshot,
    policy: Requirements = DEFAULT_REQUIREMENTS,
) -> Diagnosis:
    """Check every dimension of *snapshot* against *policy*."""
    slots = tuple(
        ""
        if check.passes(snapshot, policy)
        else check.message(check.actual(snapshot), check.required(policy))
        for check in CHECKS
    )

    if not any(slots):
        return Diagnosis(
            meets=True,
            summary=SUMMARY_PASS,
            snapshot=snapshot,
            requirements=policy,
        )

    return Diagnosis(
        meets=False,
        summary=SUMMARY_FAIL,
        reason_header=REASON_HEADER,
        per_dimension=slots,  # type: ignore[arg-type]
        snapshot=snapshot,
        requirements=policy,
    )
