from concurrent.futures import ThreadPoolExecutor

from domain.dispatch import build
from domain.form import InputForm
from domain.models import DispatchRequest, TriggerSchema

from application.dispatch_flow.contracts import DispatchFlowDependencies, DispatchSession


def load_trigger_schema(
    repository: str,
    workflow_id: str,
    dependencies: DispatchFlowDependencies,
) -> TriggerSchema | None:
    # Busca o caminho do workflow, depois o texto ja decodificado, e extrai o schema.
    workflow_path = dependencies.get_workflow_path(repository, workflow_id)
    workflow_text = dependencies.get_file_text(repository, workflow_path)
    return dependencies.extract_schema(workflow_text)


def load_branch_names(repository: str, dependencies: DispatchFlowDependencies) -> list[str]:
    return [
        branch["name"]
        for branch in dependencies.get_branches(repository)
        if isinstance(branch.get("name"), str)
    ]


def open_dispatch_session(
    repository: str,
    workflow_id: str,
    dependencies: DispatchFlowDependencies,
) -> DispatchSession:
    # Schema e branches sao independentes; as duas buscas precisam terminar antes do form.
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="dispatch-open") as executor:
        schema_future = executor.submit(load_trigger_schema, repository, workflow_id, dependencies)
        branches_future = executor.submit(load_branch_names, repository, dependencies)
        schema = schema_future.result()
        branch_names = branches_future.result()

    dependencies.observe_schema(repository, workflow_id, schema)

    return DispatchSession(
        repository=repository,
        workflow_id=workflow_id,
        schema=schema,
        branch_names=branch_names,
        form=InputForm(schema),
    )


def submit_dispatch(
    session: DispatchSession,
    dependencies: DispatchFlowDependencies,
) -> DispatchRequest:
    if session.closed:
        raise RuntimeError("dispatch dialog was closed; reopen it to run the workflow")

    # Resolve ref, valida, monta o payload e envia; sem retry.
    request = build(
        session.schema,
        session.form.snapshot(),
        session.effective_ref,
        session.repository,
        session.workflow_id,
    )
    dependencies.dispatch_workflow(request)
    # Em caso de falha os valores atuais ficam intactos para reenvio.
    session.form.reset()
    return request
