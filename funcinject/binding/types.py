"""
Type introspection helpers used by bind objects and injectors.

Parameter types are read from annotations and compared with the types of
candidate values. Everything the matching algorithm knows about Python's
type system lives here.
"""

import functools
import inspect
import types
import typing
from typing import Any, Optional, Union

import structlog

logger = structlog.get_logger(__name__)

# Declared type of a parameter that carries no annotation.
EMPTY = inspect.Parameter.empty

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def is_func(obj: Any) -> bool:
    """Return True when obj is a function binder rather than a plain value.

    Classes and instances implementing ``__call__`` are plain values.
    """
    return (
        inspect.isfunction(obj)
        or inspect.ismethod(obj)
        or inspect.isbuiltin(obj)
        or isinstance(obj, functools.partial)
    )


def get_signature(fn: Any) -> Optional[inspect.Signature]:
    """Return the signature of fn, or None when fn cannot be invoked."""
    if not callable(fn):
        return None
    try:
        return inspect.signature(fn)
    except (TypeError, ValueError):
        return None


def _type_hints(fn: Any) -> dict[str, Any]:
    target = fn.func if isinstance(fn, functools.partial) else fn
    if inspect.isclass(target):
        target = target.__init__
    elif not (inspect.isroutine(target) or inspect.ismethod(target)):
        # callable instance: the instance exposes its class's field annotations
        target = type(target).__call__
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError) as exc:
        # Unresolvable forward references; fall back to the raw annotations.
        logger.warning(
            "Could not resolve type hints",
            fn=type_name(target),
            error=str(exc)
        )
        return {}


def input_types(fn: Any, signature: Optional[inspect.Signature] = None) -> list[Any]:
    """
    Return the declared types of fn's positional parameters, in order.

    Keyword-only, ``*args`` and ``**kwargs`` parameters are not part of the
    positional input list. Unannotated parameters map to ``EMPTY``.

    Args:
        fn: Callable to inspect
        signature: Already computed signature of fn, if any

    Returns:
        List of declared types, one per positional parameter
    """
    if signature is None:
        signature = get_signature(fn)
        if signature is None:
            return []

    hints = _type_hints(fn)
    result = []
    for name, param in signature.parameters.items():
        if param.kind not in _POSITIONAL_KINDS:
            continue
        result.append(hints.get(name, param.annotation))
    return result


def return_type(fn: Any, signature: Optional[inspect.Signature] = None) -> Any:
    """Return the declared return type of fn, ``EMPTY`` when unannotated."""
    if signature is None:
        signature = get_signature(fn)
        if signature is None:
            return EMPTY

    hints = _type_hints(fn)
    if "return" in hints:
        return hints["return"]
    return signature.return_annotation


def is_assignable(src: Any, target: Any) -> bool:
    """
    Check whether a value of type src can be passed where target is declared.

    Args:
        src: Type of the candidate value
        target: Declared type of the parameter

    Returns:
        True if src satisfies target
    """
    if target is EMPTY or src is EMPTY:
        return False
    if target is Any:
        return True
    if src == target:
        return True

    origin = typing.get_origin(target)
    if origin is Union or origin is types.UnionType:
        return any(is_assignable(src, arm) for arm in typing.get_args(target))
    if origin is not None:
        target = origin

    src = typing.get_origin(src) or src
    if not (inspect.isclass(src) and inspect.isclass(target)):
        return False
    try:
        return issubclass(src, target)
    except TypeError:
        # Protocols with data members refuse issubclass checks.
        return False


def type_name(typ: Any) -> str:
    """Render a type for traces and log events."""
    if typ is EMPTY:
        return "<unannotated>"
    if typ is None or typ is type(None):
        return "None"
    if typing.get_origin(typ) is not None:
        return repr(typ).replace("typing.", "")
    if inspect.isclass(typ):
        if typ.__module__ == "builtins":
            return typ.__qualname__
        return f"{typ.__module__}.{typ.__qualname__}"
    if hasattr(typ, "__qualname__"):
        return typ.__qualname__
    return repr(typ)
