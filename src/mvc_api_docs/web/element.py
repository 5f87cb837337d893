"""Annotated elements.

Annotations are frozen pydantic models attached to a class or function by
decorators, or to a parameter through ``typing.Annotated`` metadata.
Lookups only read the element's own ``__dict__``, so a subclass never
inherits the annotations of its base class.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

ANNOTATIONS_ATTR = "__apidoc_annotations__"


class Annotation(BaseModel):
    """Base class for every annotation kind.

    Fields may be passed positionally in declaration order, so
    ``PathVariable("id")`` reads the same as ``PathVariable(value="id")``.
    """

    model_config = ConfigDict(frozen=True)

    def __init__(self, *args: Any, **data: Any):
        fields = list(type(self).model_fields)
        if len(args) > len(fields):
            raise TypeError(f"{type(self).__name__} takes at most {len(fields)} positional arguments")
        data.update(zip(fields, args))
        super().__init__(**data)


def unwrap(element: Any) -> Any:
    """The plain function behind a bound method, staticmethod or classmethod."""
    return getattr(element, "__func__", element)


def annotate(element: Any, annotation: Annotation) -> Any:
    """Attach ``annotation`` to ``element``, replacing one of the same kind."""
    target = unwrap(element)
    annotations = dict(vars(target).get(ANNOTATIONS_ATTR, {}))
    annotations[type(annotation)] = annotation
    setattr(target, ANNOTATIONS_ATTR, annotations)
    return element


def find_annotation(element: Any, kind: type) -> Any:
    """Return the ``kind`` annotation declared directly on ``element``, or None."""
    try:
        own = vars(unwrap(element))
    except TypeError:
        return None
    return own.get(ANNOTATIONS_ATTR, {}).get(kind)
