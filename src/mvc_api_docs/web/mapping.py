"""Routing and binding markers understood by the handler reflection layer."""

from enum import Enum

from .element import Annotation, annotate

# Marks "no default value" on RequestParam; distinct from the empty string.
DEFAULT_NONE = "\n\t\t\n\t\t\n\ue000\ue001\ue002\n\t\t\t\t\n"


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"


class RequestMapping(Annotation):
    """Route declaration on a controller class or a handler function."""

    value: tuple[str, ...] = ()
    method: tuple[RequestMethod, ...] = ()


class PathVariable(Annotation):
    value: str = ""


class RequestParam(Annotation):
    value: str = ""
    required: bool = True
    default_value: str = DEFAULT_NONE


class ModelAttribute(Annotation):
    value: str = ""


class Request:
    """Incoming transport request handed to a handler by the framework."""


class Response:
    """Outgoing transport response handed to a handler by the framework."""


def request_mapping(*paths: str, method: RequestMethod | tuple[RequestMethod, ...] = ()):
    """Map a controller class to a base route, or a function to a handler route."""
    if isinstance(method, RequestMethod):
        method = (method,)

    def decorator(target):
        return annotate(target, RequestMapping(value=paths, method=tuple(method)))

    return decorator
