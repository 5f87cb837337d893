"""Operation documentation for a single handler method.

Everything is read once, when the reader is constructed: the operation
metadata, one parameter per formal parameter, and the documented errors.
``get_operation`` then only assembles those values for an HTTP verb.
"""

import logging

from mvc_api_docs.annotations import ApiError, ApiErrorClasses, ApiErrors, ApiOperation, ApiParam
from mvc_api_docs.model.allowable import convert_to_allowable_values
from mvc_api_docs.model.base import DocumentationError, DocumentationOperation, DocumentationParameter
from mvc_api_docs.web.element import find_annotation
from mvc_api_docs.web.mapping import DEFAULT_NONE, ModelAttribute, PathVariable, Request, RequestMethod, RequestParam, Response
from mvc_api_docs.web.reflection import HandlerMethod, MethodParameter, simple_name

log = logging.getLogger(__name__)

IGNORED_PARAMETER_TYPES = frozenset({Request, Response})


class OperationReader:
    """Reads the documentation of one handler method."""

    def __init__(self, handler_method: HandlerMethod):
        self.handler_method = handler_method
        self.summary: str | None = None
        self.notes: str | None = None
        self.tags: str | None = None
        self.nickname: str = handler_method.name
        self.deprecated = False
        self.parameters: list[DocumentationParameter] = []
        self.errors: list[DocumentationError] = []

        self._document_operation()
        self._document_parameters()
        self._document_errors()

    def get_operation(self, request_method: RequestMethod | str) -> DocumentationOperation:
        """Assemble the operation for ``request_method`` from the values read at construction."""
        operation = DocumentationOperation(
            http_method=_request_method(request_method).value,
            summary=self.summary,
            notes=self.notes,
            nickname=self.nickname,
            deprecated=self.deprecated,
            tags=self.tags.split(",") if self.tags else None,
        )
        for parameter in self.parameters:
            operation.add_parameter(parameter)
        for error in self.errors:
            operation.add_error_response(error)
        return operation

    def _document_operation(self) -> None:
        api_operation = self.handler_method.get_method_annotation(ApiOperation)
        if api_operation is not None:
            self.summary = api_operation.value
            self.notes = api_operation.notes
            self.tags = api_operation.tags
        self.deprecated = self.handler_method.is_deprecated

    def _document_parameters(self) -> None:
        for method_parameter in self.handler_method.method_parameters:
            api_param = method_parameter.get_parameter_annotation(ApiParam)
            if api_param is None:
                self._document_default_parameter(method_parameter)
                continue
            # Explicitly documented parameters are always reported as path parameters
            self.parameters.append(
                DocumentationParameter(
                    name=select_best_parameter_name(method_parameter),
                    description=api_param.value,
                    internal_description=api_param.internal_description,
                    param_type="path",
                    default_value=api_param.default_value,
                    allowable_values=convert_to_allowable_values(api_param.allowable_values),
                    required=api_param.required,
                    allow_multiple=api_param.allow_multiple,
                    data_type=simple_name(method_parameter.parameter_type),
                )
            )

    def _document_default_parameter(self, method_parameter: MethodParameter) -> None:
        if method_parameter.parameter_type in IGNORED_PARAMETER_TYPES:
            return
        log.warning(
            "Parameter %r of %s is missing an ApiParam annotation, generating default documentation",
            method_parameter.name,
            self.handler_method,
        )

        param_type = None
        default_value = None
        required = False
        path_variable = method_parameter.get_parameter_annotation(PathVariable)
        request_param = method_parameter.get_parameter_annotation(RequestParam)
        if path_variable is not None:
            param_type = "path"
            required = True
        elif request_param is not None:
            param_type = "query"
            required = request_param.required
            if request_param.default_value != DEFAULT_NONE:
                default_value = request_param.default_value

        self.parameters.append(
            DocumentationParameter(
                name=select_best_parameter_name(method_parameter),
                param_type=param_type,
                default_value=default_value,
                required=required,
                data_type=simple_name(method_parameter.parameter_type),
            )
        )

    def _document_errors(self) -> None:
        self._discover_documented_errors()
        self._discover_error_classes()
        self._discover_raised_errors()

    def _discover_documented_errors(self) -> None:
        api_errors = self.handler_method.get_method_annotation(ApiErrors)
        if api_errors is None:
            return
        for api_error in api_errors.value:
            self.errors.append(DocumentationError(code=api_error.code, reason=api_error.reason))

    def _discover_error_classes(self) -> None:
        error_classes = self.handler_method.get_method_annotation(ApiErrorClasses)
        if error_classes is None:
            return
        for exception_type in error_classes.value:
            self._append_error_from_class(exception_type)

    def _discover_raised_errors(self) -> None:
        for exception_type in self.handler_method.exception_types:
            self._append_error_from_class(exception_type)

    def _append_error_from_class(self, exception_type: type[BaseException]) -> None:
        api_error = find_annotation(exception_type, ApiError)
        if api_error is None:
            return
        self.errors.append(DocumentationError(code=api_error.code, reason=api_error.reason))


def _request_method(request_method: RequestMethod | str) -> RequestMethod:
    if isinstance(request_method, RequestMethod):
        return request_method
    return RequestMethod(request_method.upper())

def select_best_parameter_name(method_parameter: MethodParameter) -> str:
    """The first non-empty declared name, falling back to the parameter's own name."""
    for kind in (ApiParam, PathVariable, ModelAttribute, RequestParam):
        annotation = method_parameter.get_parameter_annotation(kind)
        if annotation is None:
            continue
        declared = annotation.name if kind is ApiParam else annotation.value
        if declared:
            return declared
    return method_parameter.name
