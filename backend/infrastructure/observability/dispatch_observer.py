import logging

from domain.dispatch import DISPATCH_VALIDATION_ERROR_PREFIX
from domain.models import TriggerSchema
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def describe_schema(schema: TriggerSchema | None) -> str:
    if schema is None:
        return "no_manual_trigger"
    if not schema:
        return "no_inputs"
    required_count = sum(1 for input_spec in schema.values() if input_spec.required)
    return f"inputs={len(schema)} required={required_count}"


def observe_trigger_schema(repository: str, workflow_id: str, schema: TriggerSchema | None) -> None:
    log_event(
        logger,
        logging.INFO,
        "dispatch.schema.loaded",
        repository=repository,
        workflow_id=workflow_id,
        schema=describe_schema(schema),
    )


def is_dispatch_validation_error(error_message: str) -> bool:
    return error_message.startswith(DISPATCH_VALIDATION_ERROR_PREFIX)


def observe_dispatch_step(step: str, status: str, detail: str | None = None) -> None:
    level = logging.INFO
    if status == "error":
        # Falha de validacao e corrigivel pelo operador; nao e erro do servico.
        level = logging.WARNING if detail and is_dispatch_validation_error(detail) else logging.ERROR
    log_event(
        logger,
        level,
        "dispatch.step",
        step=step,
        status=status,
        detail=detail,
    )
