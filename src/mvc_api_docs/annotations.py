"""Documentation annotations for controllers, handlers, parameters and exceptions.

Usage::

    @api(description="Operations about pets")
    @request_mapping("/pets")
    class PetController:

        @api_operation("Find pet by ID", notes="Returns a single pet", tags="pets")
        @api_errors(ApiError(400, "Invalid ID supplied"))
        @throws(PetNotFound)
        @request_mapping("/{petId}", method=RequestMethod.GET)
        def get_pet(self, pet_id: Annotated[int, ApiParam("ID of pet"), PathVariable("petId")]):
            ...
"""

from .web.element import Annotation, annotate


class Api(Annotation):
    description: str = ""
    listing_path: str = ""


class ApiOperation(Annotation):
    value: str = ""
    notes: str = ""
    tags: str = ""


class ApiParam(Annotation):
    value: str = ""
    name: str = ""
    internal_description: str = ""
    default_value: str | None = None
    allowable_values: str = ""
    required: bool = False
    allow_multiple: bool = False


class ApiError(Annotation):
    code: int
    reason: str


class ApiErrors(Annotation):
    value: tuple[ApiError, ...] = ()


class ApiErrorClasses(Annotation):
    value: tuple[type[BaseException], ...] = ()


class Throws(Annotation):
    value: tuple[type[BaseException], ...] = ()


class Deprecated(Annotation):
    pass


def api(description: str = "", listing_path: str = ""):
    def decorator(cls):
        return annotate(cls, Api(description=description, listing_path=listing_path))

    return decorator


def api_operation(value: str = "", notes: str = "", tags: str = ""):
    def decorator(func):
        return annotate(func, ApiOperation(value=value, notes=notes, tags=tags))

    return decorator


def api_errors(*errors: ApiError):
    """Document error responses directly on a handler."""

    def decorator(func):
        return annotate(func, ApiErrors(value=errors))

    return decorator


def api_error(code: int, reason: str):
    """Attach an error code and reason to an exception class."""

    def decorator(cls):
        return annotate(cls, ApiError(code=code, reason=reason))

    return decorator


def api_error_classes(*exception_types: type):
    """Document the errors of a handler by listing ``api_error`` exception classes."""

    def decorator(func):
        return annotate(func, ApiErrorClasses(value=exception_types))

    return decorator


def throws(*exception_types: type):
    """Declare the exceptions a handler raises."""

    def decorator(func):
        return annotate(func, Throws(value=exception_types))

    return decorator


def deprecated(func):
    return annotate(func, Deprecated())
