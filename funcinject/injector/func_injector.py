"""
Function injector: binds candidate values to a function's inputs once and
reuses that binding on every call.

The injector is built by make_func_injector, which walks the positional
inputs of the target in order and records, for each one, either the bind
object supplied by the hijacker or the first unconsumed candidate value whose
type is assignable to the input. Inputs left without a binding are expected
to be filled by the caller (for example the ``self`` of an unbound method)
before inject() runs.
"""

import functools
from collections.abc import Callable, MutableSequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import structlog

from ..binding.bind_object import BindObject, Hijacker, TypeChecker, make_bind_object
from ..binding.types import get_signature, input_types, type_name
from ..config.defaults import InjectorParams, get_default_config
from ..errors import BindObjectError, InvalidInjectorError
from ..logging.config import get_binding_logger, log_binding_decision

logger = structlog.get_logger(__name__)
binding_logger = get_binding_logger(__name__)


class BindSource(str, Enum):
    """Where the bind object of an input came from."""
    OVERRIDE = "override"
    POOL = "pool"


@dataclass(frozen=True)
class TargetFuncInput:
    """A bind object assigned to one input position of the target."""
    input_index: int
    object: BindObject
    source: BindSource = BindSource.POOL


class FuncInjector:
    """
    Immutable binding of candidate values to a function's inputs.

    ``length`` is the number of bound inputs and ``valid`` is True when it
    is greater than zero. Both stay at 0/False when the build was aborted by
    a rejected binder, even though the inputs bound before the rejection are
    kept in ``inputs``.
    """

    def __init__(
        self,
        fn: Any,
        inputs: tuple[TargetFuncInput, ...] = (),
        length: int = 0,
        trace: str = "",
        params: Optional[InjectorParams] = None
    ) -> None:
        self._fn = fn
        self._inputs = tuple(inputs)
        self._length = length
        self._valid = length > 0
        self._trace = trace
        self._params = params or get_default_config().injector

    @property
    def fn(self) -> Any:
        return self._fn

    @property
    def inputs(self) -> tuple[TargetFuncInput, ...]:
        return self._inputs

    @property
    def length(self) -> int:
        return self._length

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def trace(self) -> str:
        """Debug text, one line per bound input."""
        return self._trace

    def __str__(self) -> str:
        return self._trace

    def __repr__(self) -> str:
        return (
            f"FuncInjector(fn={type_name(self._fn)}, "
            f"length={self._length}, valid={self._valid})"
        )

    def inject(self, args: MutableSequence[Any], *ctx: Any) -> None:
        """
        Fill the bound positions of an already allocated argument list.

        Positions without a binding are left as they are, so the caller can
        set them (e.g. ``args[0] = receiver``) before or after injection.

        Args:
            args: Argument list sized to the function's positional inputs
            *ctx: Per-call values passed to function binders
        """
        for target in self._inputs:
            target.object.assign(ctx, functools.partial(args.__setitem__, target.input_index))

    def call(self, *ctx: Any) -> Any:
        """
        Inject a fresh argument list of ``length`` items and call the function.

        Only correct when every input of the function is bound; use inject()
        when the caller has to supply some positions itself.

        Args:
            *ctx: Per-call values passed to function binders

        Returns:
            Whatever the function returns

        Raises:
            InvalidInjectorError: If strict_call is enabled and the injector is invalid
        """
        if not self._valid and self._params.strict_call:
            raise InvalidInjectorError(
                f"Injector for {type_name(self._fn)} has no bound inputs",
                fn_name=type_name(self._fn)
            )

        args: list[Any] = [None] * self._length
        self.inject(args, *ctx)
        return self._fn(*args)


def _trace_line(sequence: int, target: TargetFuncInput, param_type: Any) -> str:
    # on unbound methods input position 0 is the receiver and is never bound here
    return (
        f"[{sequence}] {target.object.bind_type.value} binding ({target.source.value}): "
        f"'{type_name(target.object.type)}' for input position: {target.input_index} "
        f"and type: '{type_name(param_type)}'\n"
    )


def make_func_injector(
    fn: Callable[..., Any],
    *values: Any,
    hijack: Optional[Hijacker] = None,
    good_func: Optional[TypeChecker] = None,
    params: Optional[InjectorParams] = None
) -> FuncInjector:
    """
    Build the injector for fn from an ordered pool of candidate values.

    Args:
        fn: Target function, method or class
        *values: Candidate values, earlier ones preferred; function binders
            are called on every injection
        hijack: Optional resolver that may supply a bind object for a
            declared input type, bypassing the pool for that input
        good_func: Optional checker for the signatures of function binders
        params: Injector parameters, defaults when omitted

    Returns:
        The injector; invalid when nothing could be bound
    """
    params = params or get_default_config().injector
    fn_name = type_name(fn)

    signature = get_signature(fn)
    if signature is None:
        logger.debug("Target is not invocable, nothing to bind", fn=fn_name)
        return FuncInjector(fn, params=params)

    in_types = input_types(fn, signature)
    inputs: list[TargetFuncInput] = []

    # inputs can share a type, e.g. (str, str), so a pool value bound to
    # one input must not be bound to the next one as well.
    consumed: set[int] = set()

    for i, in_type in enumerate(in_types):
        if hijack is not None:
            b = hijack(in_type)
            if b is not None:
                inputs.append(TargetFuncInput(i, b, BindSource.OVERRIDE))
                continue

        for val_idx, val in enumerate(values):
            if val_idx in consumed:
                continue

            try:
                b = make_bind_object(val, good_func)
            except BindObjectError as exc:
                binding_logger.warning(
                    "Binder rejected, injector left invalid",
                    fn=fn_name,
                    value_index=val_idx,
                    reason=exc.reason,
                    error=str(exc),
                    bound_inputs=len(inputs)
                )
                return FuncInjector(fn, tuple(inputs), params=params)

            if b.is_assignable(in_type):
                inputs.append(TargetFuncInput(i, b, BindSource.POOL))
                consumed.add(val_idx)
                break

    trace_lines = []
    for sequence, target in enumerate(inputs, start=1):
        param_type = in_types[target.input_index]
        trace_lines.append(_trace_line(sequence, target, param_type))

        if params.log_bindings:
            log_binding_decision(
                binding_logger,
                fn_name=fn_name,
                sequence=sequence,
                source=target.source.value,
                bind_type=target.object.bind_type.value,
                bound_type=type_name(target.object.type),
                input_index=target.input_index,
                param_type=type_name(param_type),
            )

    injector = FuncInjector(fn, tuple(inputs), len(inputs), "".join(trace_lines), params)

    logger.debug(
        "Function injector built",
        fn=fn_name,
        arity=len(in_types),
        length=injector.length,
        valid=injector.valid,
        consumed_values=len(consumed)
    )

    return injector
