"""
Bind objects: candidate values wrapped for injection.

A bind object knows the type it produces, whether that type satisfies a
parameter, and how to produce the actual value when a call is assembled.
Static bind objects hand out a fixed value; dynamic ones call a function
binder with the per-call context values.
"""

import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..errors import BindObjectError, TypeCheckError
from .types import EMPTY, get_signature, is_assignable, is_func, return_type, type_name


class BindType(str, Enum):
    """How a bind object produces its value."""
    STATIC = "Static"
    DYNAMIC = "Dynamic"


# Override resolver: may supply a bind object for a declared parameter type.
Hijacker = Callable[[Any], Optional["BindObject"]]

# Validates the signature of a function binder before it is accepted.
TypeChecker = Callable[[inspect.Signature], bool]


@dataclass(frozen=True)
class BindObject:
    """A value source that can be bound to a function input."""

    type: Any
    value: Any
    bind_type: BindType = BindType.STATIC
    return_value: Optional[Callable[[Sequence[Any]], Any]] = None

    @property
    def is_dynamic(self) -> bool:
        return self.bind_type is BindType.DYNAMIC

    def is_assignable(self, to: Any) -> bool:
        """Check whether the produced type satisfies the declared type `to`."""
        return is_assignable(self.type, to)

    def assign(self, ctx: Sequence[Any], to_setter: Callable[[Any], None]) -> None:
        """
        Produce the value and hand it to to_setter.

        Args:
            ctx: Per-call context values, passed to function binders
            to_setter: Receives the produced value
        """
        if self.is_dynamic and self.return_value is not None:
            to_setter(self.return_value(ctx))
            return
        to_setter(self.value)

    def __str__(self) -> str:
        return f"{self.bind_type.value} binding: '{type_name(self.type)}'"


def make_return_value(
    fn: Callable[..., Any],
    good_func: Optional[TypeChecker] = None
) -> tuple[Callable[[Sequence[Any]], Any], Any]:
    """
    Build the producer for a function binder.

    Args:
        fn: Function binder
        good_func: Optional checker applied to the binder's signature

    Returns:
        Tuple of (producer taking the context values, produced type)

    Raises:
        BindObjectError: If fn is not a usable function binder
        TypeCheckError: If good_func rejects fn
    """
    signature = get_signature(fn)
    if not is_func(fn) or signature is None:
        raise BindObjectError(
            "Binder is not a function",
            binder=fn,
            reason="not_func"
        )

    out_type = return_type(fn, signature)
    if out_type is EMPTY or out_type is None or out_type is type(None):
        raise BindObjectError(
            f"Function binder {type_name(fn)} must declare a return type",
            binder=fn,
            reason="no_return_type"
        )

    if good_func is not None and not good_func(signature):
        raise TypeCheckError(
            f"Function binder {type_name(fn)} rejected by type checker",
            binder=fn,
            reason="type_check",
            context={"signature": str(signature)}
        )

    def producer(ctx: Sequence[Any]) -> Any:
        return fn(*ctx)

    return producer, out_type


def make_bind_object(value: Any, good_func: Optional[TypeChecker] = None) -> BindObject:
    """
    Wrap a candidate value as a bind object.

    Function binders become dynamic bind objects producing their declared
    return type; every other value is bound statically by its own type.

    Args:
        value: Candidate value or function binder
        good_func: Optional checker applied to function binders

    Returns:
        The bind object

    Raises:
        BindObjectError: If a function binder cannot be used
    """
    if is_func(value):
        producer, out_type = make_return_value(value, good_func)
        return BindObject(
            type=out_type,
            value=value,
            bind_type=BindType.DYNAMIC,
            return_value=producer,
        )

    return BindObject(type=type(value), value=value)
