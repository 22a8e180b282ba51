"""
sshsetup Domain Models

Clean dataclass-based models for type-safe data handling.
"""

from .context import (
    Platform,
    SetupContext,
)
from .results import (
    ResultStatus,
    StepResult,
    ExecutionResult,
)

__all__ = [
    # Context
    "Platform",
    "SetupContext",
    # Results
    "ResultStatus",
    "StepResult",
    "ExecutionResult",
]
