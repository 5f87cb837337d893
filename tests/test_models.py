from pydantic import TypeAdapter

from mvc_api_docs.model.base import (
    AllowableListValues,
    AllowableRangeValues,
    ControllerDocumentation,
    DocumentationAllowableValues,
    DocumentationError,
    DocumentationOperation,
    DocumentationParameter,
)


class TestDocumentationParameter:
    def test_create_minimal_parameter(self):
        p = DocumentationParameter(name="petId")
        assert p.param_type is None
        assert p.required is False
        assert p.allow_multiple is False
        assert p.default_value is None
        assert p.allowable_values is None

    def test_allowable_values_discriminated_by_value_type(self):
        adapter = TypeAdapter(DocumentationAllowableValues)
        assert isinstance(adapter.validate_python({"value_type": "LIST", "values": ["a"]}), AllowableListValues)
        ranged = adapter.validate_python({"value_type": "RANGE", "min": 1, "max": 5})
        assert isinstance(ranged, AllowableRangeValues)
        assert ranged.exclusive is False


class TestDocumentationOperation:
    def test_create_minimal_operation(self):
        op = DocumentationOperation(http_method="GET")
        assert op.summary is None
        assert op.tags is None
        assert op.parameters == []
        assert op.error_responses == []

    def test_lists_are_not_shared_between_operations(self):
        first = DocumentationOperation(http_method="GET")
        second = DocumentationOperation(http_method="POST")
        first.add_parameter(DocumentationParameter(name="id"))
        first.add_error_response(DocumentationError(code=404, reason="Not found"))
        assert second.parameters == []
        assert second.error_responses == []


class TestControllerDocumentation:
    def test_get_endpoint_adds_once(self):
        doc = ControllerDocumentation(api_version="1.0", swagger_version="1.1", base_path="/", resource_path="/pets")
        first = doc.get_endpoint("/pets/{petId}")
        second = doc.get_endpoint("/pets/{petId}")
        assert first is second
        assert len(doc.apis) == 1
