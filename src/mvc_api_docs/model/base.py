"""Documentation models produced by the readers.

Operation and resource readers populate these models; the builder
assembles them into a resource listing for serving or export.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class AllowableListValues(BaseModel):
    """An enumerated set of legal values."""

    value_type: Literal["LIST"] = "LIST"
    values: list[str]


class AllowableRangeValues(BaseModel):
    """A numeric range of legal values."""

    value_type: Literal["RANGE"] = "RANGE"
    min: float
    max: float
    exclusive: bool = False


DocumentationAllowableValues = Annotated[
    Union[AllowableListValues, AllowableRangeValues],
    Field(discriminator="value_type"),
]


class DocumentationParameter(BaseModel):
    """A single handler parameter (path or query)."""

    name: str
    description: str = ""
    internal_description: str = ""
    param_type: str | None = None  # path / query
    default_value: str | None = None
    allowable_values: DocumentationAllowableValues | None = None
    required: bool = False
    allow_multiple: bool = False
    data_type: str = "object"


class DocumentationError(BaseModel):
    """A documented error response."""

    code: int
    reason: str


class DocumentationOperation(BaseModel):
    """One handler method for one HTTP verb."""

    http_method: str  # GET / POST / PUT / DELETE / PATCH ...
    summary: str | None = None
    notes: str | None = None
    nickname: str | None = None
    deprecated: bool = False
    tags: list[str] | None = None
    parameters: list[DocumentationParameter] = []
    error_responses: list[DocumentationError] = []

    def add_parameter(self, parameter: DocumentationParameter) -> None:
        self.parameters.append(parameter)

    def add_error_response(self, error: DocumentationError) -> None:
        self.error_responses.append(error)


class DocumentationEndPoint(BaseModel):
    """A route together with the operations documented under it."""

    path: str | None
    description: str | None = None
    operations: list[DocumentationOperation] = []


class ControllerDocumentation(BaseModel):
    """Documentation container for a single controller."""

    api_version: str
    swagger_version: str
    base_path: str
    resource_path: str
    apis: list[DocumentationEndPoint] = []

    def get_endpoint(self, path: str) -> DocumentationEndPoint:
        """Return the endpoint for ``path``, adding it if it is not yet documented."""
        for endpoint in self.apis:
            if endpoint.path == path:
                return endpoint
        endpoint = DocumentationEndPoint(path=path)
        self.apis.append(endpoint)
        return endpoint


class Documentation(BaseModel):
    """Resource listing for a whole application."""

    api_version: str
    swagger_version: str
    base_path: str
    apis: list[DocumentationEndPoint] = []
    resources: dict[str, ControllerDocumentation] = {}
