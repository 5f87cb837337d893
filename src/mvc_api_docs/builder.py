"""Documentation builder — assembles a resource listing from controller classes."""

import logging
from types import ModuleType

from mvc_api_docs.config import DocumentationConfiguration
from mvc_api_docs.model.base import ControllerDocumentation, Documentation
from mvc_api_docs.reader.operation import OperationReader
from mvc_api_docs.reader.resource import ResourceDescriptor
from mvc_api_docs.web.element import find_annotation
from mvc_api_docs.web.mapping import RequestMapping, RequestMethod
from mvc_api_docs.web.reflection import HandlerMethod, find_controllers, handler_methods

log = logging.getLogger(__name__)

DEFAULT_REQUEST_METHODS = (RequestMethod.GET,)


class DocumentationBuilder:
    """Builds application documentation, one resource per controller."""

    def __init__(self, configuration: DocumentationConfiguration | None = None):
        self.configuration = configuration or DocumentationConfiguration()

    def build(self, controllers: list[type]) -> Documentation:
        """Document every controller that resolves to a resource path."""
        documentation = Documentation(
            api_version=self.configuration.api_version,
            swagger_version=self.configuration.swagger_version,
            base_path=self.configuration.base_path,
        )
        for controller in controllers:
            handlers = handler_methods(controller)
            if not handlers:
                log.info("Class %s has no handler methods, skipping", controller.__qualname__)
                continue

            resource = ResourceDescriptor(handlers[0], self.configuration)
            if resource.is_internal_resource() and not self.configuration.include_internal_resources:
                continue
            controller_doc = resource.create_empty_api_documentation()
            if controller_doc is None:
                continue
            if controller_doc.resource_path in documentation.resources:
                log.warning(
                    "Class %s resolves to resource path %s, which is already documented. Skipping it",
                    controller.__qualname__,
                    controller_doc.resource_path,
                )
                continue

            for handler in handlers:
                self._document_handler(controller_doc, handler)
            documentation.apis.append(resource.describe_as_endpoint())
            documentation.resources[controller_doc.resource_path] = controller_doc
            log.info("Documented %s", resource)
        return documentation

    def build_from_module(self, module: ModuleType) -> Documentation:
        return self.build(find_controllers(module))

    def _document_handler(self, controller_doc: ControllerDocumentation, handler: HandlerMethod) -> None:
        reader = OperationReader(handler)
        path = _handler_path(handler)
        endpoint = controller_doc.get_endpoint(path)
        mapping = handler.get_method_annotation(RequestMapping)
        for request_method in mapping.method or DEFAULT_REQUEST_METHODS:
            endpoint.operations.append(reader.get_operation(request_method))


def _handler_path(handler: HandlerMethod) -> str:
    """The full route of a handler: the first controller route joined with the first handler route."""
    class_mapping = find_annotation(handler.bean_type, RequestMapping)
    method_mapping = handler.get_method_annotation(RequestMapping)
    base = class_mapping.value[0] if class_mapping and class_mapping.value else ""
    route = method_mapping.value[0] if method_mapping.value else ""
    return _join_paths(base, route)


def _join_paths(base: str, route: str) -> str:
    if not route:
        return base or "/"
    return base.rstrip("/") + "/" + route.lstrip("/")
