"""Built-in controller that serves generated documentation."""

from typing import Annotated

from mvc_api_docs.annotations import api
from mvc_api_docs.model.base import ControllerDocumentation, Documentation
from mvc_api_docs.web.mapping import PathVariable, RequestMethod, request_mapping


@api(description="API documentation")
@request_mapping("/api-docs")
class DocumentationController:
    """Serves the resource listing and the documentation of each controller.

    Resource descriptors recognise this class as internal, so it is left out
    of the documentation it serves.
    """

    def __init__(self, documentation: Documentation):
        self.documentation = documentation

    @request_mapping(method=RequestMethod.GET)
    def get_resource_listing(self) -> Documentation:
        return self.documentation.model_copy(update={"resources": {}})

    @request_mapping("/{apiName}", method=RequestMethod.GET)
    def get_api_documentation(self, api_name: Annotated[str, PathVariable("apiName")]) -> ControllerDocumentation | None:
        return self.documentation.resources.get("/" + api_name.lstrip("/"))
