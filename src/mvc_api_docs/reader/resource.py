"""Resource description for the controller owning a handler method."""

import logging
from functools import cached_property
from typing import TYPE_CHECKING

from mvc_api_docs.annotations import Api
from mvc_api_docs.controller import DocumentationController
from mvc_api_docs.model.base import ControllerDocumentation, DocumentationEndPoint
from mvc_api_docs.web.element import find_annotation
from mvc_api_docs.web.mapping import RequestMapping
from mvc_api_docs.web.reflection import HandlerMethod

if TYPE_CHECKING:
    from mvc_api_docs.config import DocumentationConfiguration

log = logging.getLogger(__name__)


class ResourceDescriptor:
    """Resolves the base route of a controller and creates its documentation container."""

    def __init__(self, handler_method: HandlerMethod, configuration: "DocumentationConfiguration"):
        self.handler_method = handler_method
        self.configuration = configuration
        self.controller_class = handler_method.bean_type

    def describe_as_endpoint(self) -> DocumentationEndPoint:
        """The controller URI paired with its ``Api`` description.

        The URI may be None; callers decide whether to skip the endpoint.
        """
        return DocumentationEndPoint(path=self.get_controller_uri(), description=self._get_api_description())

    def create_empty_api_documentation(self) -> ControllerDocumentation | None:
        """Ask the configuration for an empty container, or None when the URI is unresolved."""
        if self.get_controller_uri() is None:
            return None
        return self.configuration.new_documentation(self)

    def get_controller_uri(self) -> str | None:
        """The normalized base route of the controller, or None when it has none."""
        return self._controller_uri

    @cached_property
    def _controller_uri(self) -> str | None:
        # Resolved once, so each unresolved or ambiguous mapping is logged once
        name = self.controller_class.__qualname__
        request_mapping = find_annotation(self.controller_class, RequestMapping)
        if request_mapping is None:
            log.warning(
                "Class %s has handler methods, but no class-level request mapping. No documentation will be generated",
                name,
            )
            return None
        request_uris = request_mapping.value
        if not request_uris or not request_uris[0]:
            log.warning(
                "Class %s has a request mapping, but the uri could not be resolved. No documentation will be generated",
                name,
            )
            return None
        if len(request_uris) > 1:
            log.warning("Class %s has a request mapping with multiple uris. Only the first one will be documented", name)

        request_uri = request_uris[0]
        api = find_annotation(self.controller_class, Api)
        if api is not None and api.listing_path:
            request_uri = api.listing_path
        return remove_intermediate_slashes(request_uri)

    def is_internal_resource(self) -> bool:
        return self.controller_class is DocumentationController

    def _get_api_description(self) -> str | None:
        api = find_annotation(self.controller_class, Api)
        if api is None:
            return None
        return api.description

    def __str__(self) -> str:
        return f"ApiResource for {self.controller_class.__name__} at {self.get_controller_uri()}"


def remove_intermediate_slashes(request_uri: str) -> str:
    """Flatten a route into a single segment: ``/foo/bar`` becomes ``/foo_bar``."""
    replaced = request_uri.replace("/", "_")
    if request_uri.startswith("/"):
        return "/" + replaced[1:]
    return replaced
