from infrastructure.observability.dispatch_observer import (
    describe_schema,
    is_dispatch_validation_error,
    observe_dispatch_step,
    observe_trigger_schema,
)
from infrastructure.observability.logging_utils import configure_logging, log_event

__all__ = [
    "configure_logging",
    "log_event",
    "describe_schema",
    "is_dispatch_validation_error",
    "observe_dispatch_step",
    "observe_trigger_schema",
]
