from typing import Iterable

from domain.dispatch.validators import validate
from domain.models import DispatchRequest, TriggerSchema


FALLBACK_REF = "main"
PREFERRED_BRANCHES = ("main", "master")


def resolve_ref(selected_ref: str | None, branch_names: Iterable[str]) -> str:
    # Escolha explicita do operador sempre vence.
    if selected_ref:
        return selected_ref

    available_branches = set(branch_names)
    for preferred_branch in PREFERRED_BRANCHES:
        if preferred_branch in available_branches:
            return preferred_branch
    # Melhor esforco: "main" mesmo sem a branch existir.
    return FALLBACK_REF


def build(
    schema: TriggerSchema | None,
    current_values: dict[str, str],
    selected_ref: str | None,
    repository: str,
    workflow_id: str | int,
) -> DispatchRequest:
    validate(schema, current_values, selected_ref).raise_for_problems()

    # Copia somente inputs conhecidos pelo schema, sem alterar os valores.
    inputs = {
        input_name: current_values[input_name]
        for input_name in (schema or {})
        if input_name in current_values and current_values[input_name] is not None
    }
    return DispatchRequest(
        repository=repository,
        workflow_id=str(workflow_id),
        ref=selected_ref,
        inputs=inputs,
    )
