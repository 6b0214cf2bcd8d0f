DISPATCH_VALIDATION_ERROR_PREFIX = "Workflow dispatch validation failed"


class DispatchValidationError(ValueError):
    """Raised when the operator's dispatch request is incomplete."""


class MissingRefError(DispatchValidationError):
    """Raised when no branch or tag was selected for the run."""

    def __init__(self) -> None:
        super().__init__(f"{DISPATCH_VALIDATION_ERROR_PREFIX}: a branch or tag must be selected")


class MissingRequiredInputsError(DispatchValidationError):
    """Raised when required workflow inputs have no value."""

    def __init__(self, names: list[str], *, missing_ref: bool = False) -> None:
        self.names = list(names)
        self.missing_ref = missing_ref
        details = f"missing required inputs: {', '.join(self.names)}"
        if missing_ref:
            details = f"a branch or tag must be selected; {details}"
        super().__init__(f"{DISPATCH_VALIDATION_ERROR_PREFIX}: {details}")
