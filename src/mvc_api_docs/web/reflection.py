"""Reflection facade over decorated controllers and handler functions."""

import inspect
import types
import typing
from types import ModuleType
from typing import Annotated, Any, Union, get_args, get_origin

from mvc_api_docs.annotations import Deprecated, Throws

from .element import Annotation, find_annotation, unwrap
from .mapping import RequestMapping

_SELF_NAMES = ("self", "cls")


def without_none(tp: Any) -> Any:
    """The single non-None member of an optional type, or ``tp`` unchanged."""
    if get_origin(tp) in (Union, types.UnionType):
        members = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return tp


def simple_name(tp: Any) -> str:
    """The short type name used as a parameter's data type; ``int | None`` is ``int``."""
    tp = without_none(tp)
    name = getattr(tp, "__name__", None)
    if name:
        return name
    origin = get_origin(tp)
    name = getattr(origin, "__name__", None) or getattr(tp, "_name", None)
    return name or str(tp)


class MethodParameter:
    """One formal parameter of a handler method."""

    def __init__(self, name: str, index: int, hint: Any = inspect.Parameter.empty):
        self.name = name
        self.index = index
        self.annotations: tuple[Annotation, ...] = ()
        # Python 3.10 get_type_hints wraps hints of None-defaulted parameters in Optional
        unwrapped = without_none(hint)
        if get_origin(unwrapped) is Annotated:
            base, *metadata = get_args(unwrapped)
            self.parameter_type = base
            self.annotations = tuple(m for m in metadata if isinstance(m, Annotation))
        elif hint is inspect.Parameter.empty:
            self.parameter_type = object
        else:
            self.parameter_type = hint

    def get_parameter_annotation(self, kind: type) -> Any:
        for annotation in self.annotations:
            if type(annotation) is kind:
                return annotation
        return None

    def __repr__(self) -> str:
        return f"MethodParameter({self.name!r}, {simple_name(self.parameter_type)})"


class HandlerMethod:
    """A controller function mapped to a route, together with its controller."""

    def __init__(self, bean_type: type, method: Any):
        self.bean_type = bean_type
        self.method = unwrap(method)
        self.name = self.method.__name__

    def get_method_annotation(self, kind: type) -> Any:
        return find_annotation(self.method, kind)

    @property
    def is_deprecated(self) -> bool:
        if self.get_method_annotation(Deprecated) is not None:
            return True
        # warnings.deprecated / typing_extensions.deprecated
        return getattr(self.method, "__deprecated__", None) is not None

    @property
    def exception_types(self) -> tuple[type[BaseException], ...]:
        declared = self.get_method_annotation(Throws)
        return declared.value if declared is not None else ()

    @property
    def method_parameters(self) -> list[MethodParameter]:
        """Formal parameters in declaration order, without ``self``.

        Unresolvable type hints raise ``NameError`` from ``get_type_hints``.
        """
        hints = typing.get_type_hints(self.method, include_extras=True)
        declared = list(inspect.signature(self.method).parameters.values())
        if declared and declared[0].name in _SELF_NAMES:
            declared = declared[1:]
        parameters: list[MethodParameter] = []
        for param in declared:
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            hint = hints.get(param.name, param.annotation)
            parameters.append(MethodParameter(param.name, len(parameters), hint))
        return parameters

    def __repr__(self) -> str:
        return f"HandlerMethod({self.bean_type.__name__}.{self.name})"


def handler_methods(controller_class: type) -> list[HandlerMethod]:
    """Handler methods declared on ``controller_class``, in declaration order."""
    handlers = []
    for attr in vars(controller_class).values():
        func = unwrap(attr)
        if inspect.isfunction(func) and find_annotation(func, RequestMapping) is not None:
            handlers.append(HandlerMethod(controller_class, func))
    return handlers


def find_controllers(module: ModuleType) -> list[type]:
    """Classes defined in ``module`` that declare at least one handler method."""
    return [
        obj
        for obj in vars(module).values()
        if inspect.isclass(obj) and obj.__module__ == module.__name__ and handler_methods(obj)
    ]
