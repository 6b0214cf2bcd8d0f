from pydantic import BaseModel, Field


class NumericBoundsSchema(BaseModel):
    minimum: int | float | None = None
    maximum: int | float | None = None
    step: int | float = 1


class FormFieldSchema(BaseModel):
    name: str
    label: str
    control: str
    required: bool
    value: str
    placeholder: str
    options: list[str] = Field(default_factory=list)
    bounds: NumericBoundsSchema | None = None


class DispatchFormResponse(BaseModel):
    repository: str
    workflow_id: str
    has_manual_trigger: bool
    fields: list[FormFieldSchema] = Field(default_factory=list)
    branches: list[str] = Field(default_factory=list)
    default_ref: str


class DispatchWorkflowRequest(BaseModel):
    ref: str | None = None
    inputs: dict[str, str] = Field(default_factory=dict)


class DispatchWorkflowResponse(BaseModel):
    status: str
    message: str
    repository: str
    workflow_id: str
    ref: str
    inputs: dict[str, str] = Field(default_factory=dict)


class RepositorySchema(BaseModel):
    id: int
    full_name: str
    description: str | None = None
    private: bool = False
    html_url: str | None = None
    default_branch: str | None = None
    updated_at: str | None = None


class WorkflowSchema(BaseModel):
    id: int
    name: str
    path: str
    state: str | None = None


class WorkflowRunSchema(BaseModel):
    id: int
    name: str
    head_branch: str
    status: str
    conclusion: str | None = None
    status_label: str
    html_url: str
    created_at: str
    updated_at: str


class BranchSchema(BaseModel):
    name: str


class CommitSchema(BaseModel):
    sha: str
    message: str
    author_name: str | None = None
    authored_at: str | None = None
    html_url: str | None = None
