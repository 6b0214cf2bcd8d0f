from fastapi import HTTPException, status

from domain.dispatch import DispatchValidationError, MissingRequiredInputsError
from infrastructure.github.errors import RemoteError


INTERNAL_DISPATCH_ERROR_MESSAGE = "Internal error while dispatching workflow"


class DispatchServiceError(RuntimeError):
    """Controlled exception for dispatch failures in the HTTP adapter."""


def to_http_exception(error: Exception) -> HTTPException:
    if isinstance(error, DispatchValidationError):
        missing_inputs = error.names if isinstance(error, MissingRequiredInputsError) else []
        missing_ref = (
            error.missing_ref if isinstance(error, MissingRequiredInputsError) else True
        )
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "message": str(error),
                "missing_ref": missing_ref,
                "missing_inputs": missing_inputs,
            },
        )

    if isinstance(error, RemoteError):
        # Erro remoto repassado sem alteracao para o operador.
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"status": error.status, "message": error.message},
        )

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_DISPATCH_ERROR_MESSAGE,
    )
