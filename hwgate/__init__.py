"""hwgate: check a machine against minimum hardware requirements.

Usage::

    from hwgate import evaluate, probe_hardware

    diagnosis = evaluate(probe_hardware())
    print(diagnosis.summary)
"""

from __future__ import annotations

__version__ = "1.0.0"

from .evaluator import Diagnosis, Dimension, evaluate  # noqa: E402
from .hardware import HardwareProbe, HardwareSnapshot, probe_hardware  # noqa: E402
from .policy import DEFAULT_REQUIREMENTS, Requirements  # noqa: E402

__all__ = [
    "DEFAULT_REQUIREMENTS",
    "Diagnosis",
    "Dimension",
    "HardwareProbe",
    "HardwareSnapshot",
    "Requirements",
    "__version__",
    "evaluate",
    "probe_hardware",
]
