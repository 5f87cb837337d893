from typing import Annotated, Optional

import pytest
from pydantic import ValidationError

from mvc_api_docs.annotations import Api, ApiError, Deprecated, api, api_error, deprecated, throws
from mvc_api_docs.web.element import annotate, find_annotation
from mvc_api_docs.web.mapping import PathVariable, RequestMapping, RequestMethod, RequestParam, request_mapping
from mvc_api_docs.web.reflection import HandlerMethod, MethodParameter, find_controllers, handler_methods, simple_name


class TestAnnotations:
    def test_positional_fields(self):
        assert PathVariable("petId").value == "petId"
        error = ApiError(404, "Not found")
        assert (error.code, error.reason) == (404, "Not found")

    def test_too_many_positional_fields(self):
        with pytest.raises(TypeError):
            PathVariable("a", "b")

    def test_annotations_are_frozen(self):
        with pytest.raises(ValidationError):
            PathVariable("petId").value = "other"

    def test_request_mapping_normalizes_single_method(self):
        @request_mapping("/pets", method=RequestMethod.POST)
        def create():
            pass

        mapping = find_annotation(create, RequestMapping)
        assert mapping.value == ("/pets",)
        assert mapping.method == (RequestMethod.POST,)

    def test_request_param_defaults(self):
        param = RequestParam("limit")
        assert param.required is True
        assert param.default_value != ""


class TestFindAnnotation:
    def test_missing_annotation(self):
        def handler():
            pass

        assert find_annotation(handler, Deprecated) is None

    def test_class_annotations_are_not_inherited(self):
        @api(description="base")
        class Base:
            pass

        class Child(Base):
            pass

        assert find_annotation(Base, Api).description == "base"
        assert find_annotation(Child, Api) is None

    def test_exception_annotation_not_inherited(self):
        @api_error(404, "Not found")
        class NotFound(Exception):
            pass

        class PetNotFound(NotFound):
            pass

        assert find_annotation(NotFound, ApiError).code == 404
        assert find_annotation(PetNotFound, ApiError) is None

    def test_annotating_subclass_leaves_base_untouched(self):
        @api(description="base")
        class Base:
            pass

        @api(description="child")
        class Child(Base):
            pass

        assert find_annotation(Base, Api).description == "base"
        assert find_annotation(Child, Api).description == "child"

    def test_same_kind_replaces(self):
        def handler():
            pass

        annotate(handler, Api(description="first"))
        annotate(handler, Api(description="second"))
        assert find_annotation(handler, Api).description == "second"

    def test_objects_without_dict(self):
        assert find_annotation(42, Api) is None


class TestMethodParameter:
    def test_annotated_parameter(self):
        param = MethodParameter("pet_id", 0, Annotated[int, PathVariable("petId"), "not an annotation"])
        assert param.parameter_type is int
        assert param.get_parameter_annotation(PathVariable).value == "petId"
        assert param.get_parameter_annotation(RequestParam) is None
        assert len(param.annotations) == 1

    def test_unannotated_parameter(self):
        param = MethodParameter("anything", 0)
        assert param.parameter_type is object
        assert param.annotations == ()

    def test_simple_name(self):
        assert simple_name(int) == "int"
        assert simple_name(list[int]) == "list"

    def test_simple_name_of_optional(self):
        assert simple_name(int | None) == "int"
        assert simple_name(Optional[int]) == "int"
        assert simple_name(int | str) != "int"

    def test_optional_wrapped_annotated_parameter(self):
        param = MethodParameter("x", 0, Optional[Annotated[int, RequestParam("x")]])
        assert param.parameter_type is int
        assert param.get_parameter_annotation(RequestParam).value == "x"


class TestHandlerMethod:
    def test_parameters_skip_self_and_keep_order(self):
        class Controller:
            @request_mapping("/x")
            def handler(self, b: int, a: Annotated[str, PathVariable("a")], *args, **kwargs):
                pass

        handler = HandlerMethod(Controller, Controller.handler)
        params = handler.method_parameters
        assert [p.name for p in params] == ["b", "a"]
        assert [p.index for p in params] == [0, 1]
        assert params[0].parameter_type is int
        assert params[1].parameter_type is str

    def test_name_and_exception_types(self):
        class Oops(Exception):
            pass

        class Controller:
            @throws(Oops)
            @request_mapping("/x")
            def handler(self):
                pass

        handler = HandlerMethod(Controller, Controller.handler)
        assert handler.name == "handler"
        assert handler.bean_type is Controller
        assert handler.exception_types == (Oops,)

    def test_no_declared_exceptions(self):
        class Controller:
            @request_mapping("/x")
            def handler(self):
                pass

        assert HandlerMethod(Controller, Controller.handler).exception_types == ()

    def test_deprecated_marker(self):
        class Controller:
            @deprecated
            @request_mapping("/old")
            def old(self):
                pass

            @request_mapping("/new")
            def new(self):
                pass

        assert HandlerMethod(Controller, Controller.old).is_deprecated is True
        assert HandlerMethod(Controller, Controller.new).is_deprecated is False

    def test_dunder_deprecated_attribute(self):
        class Controller:
            @request_mapping("/old")
            def old(self):
                pass

        Controller.old.__deprecated__ = "use new"
        assert HandlerMethod(Controller, Controller.old).is_deprecated is True

    def test_unresolvable_hint_propagates(self):
        class Controller:
            @request_mapping("/x")
            def handler(self, thing: "UndefinedType"):  # noqa: F821
                pass

        with pytest.raises(NameError):
            HandlerMethod(Controller, Controller.handler).method_parameters


class TestDiscovery:
    def test_handler_methods_in_declaration_order(self, petstore):
        names = [h.name for h in handler_methods(petstore.PetController)]
        assert names == ["list_pets", "get_pet", "delete_pet"]

    def test_nested_classes_are_not_handlers(self):
        class Controller:
            @request_mapping("/inner")
            class Inner:
                pass

            @request_mapping("/x")
            def handler(self):
                pass

        assert [h.name for h in handler_methods(Controller)] == ["handler"]

    def test_find_controllers(self, petstore):
        controllers = find_controllers(petstore)
        assert controllers == [petstore.PetController, petstore.OrderController, petstore.HealthController]
