"""Unsigned integer types for slot and epoch counters."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


def _raise_type_error(left: Any, right: Any, op_symbol: str) -> None:
    raise TypeError(
        f"Unsupported operand type(s) for {op_symbol}: "
        f"'{type(left).__name__}' and '{type(right).__name__}'"
    )


def _arithmetic(op: Callable[[int, int], int], op_symbol: str) -> Callable[..., Any]:
    """Build a binary operator that only accepts operands of the same class."""

    def method(self: BaseUint, other: Any) -> Any:
        if not isinstance(other, type(self)):
            _raise_type_error(self, other, op_symbol)
        return type(self)(op(int(self), int(other)))

    method.__doc__ = f"Handle the `{op_symbol}` operator."
    return method


def _comparison(op: Callable[[int, int], bool], op_symbol: str) -> Callable[..., bool]:
    """Build a comparison that only accepts operands of the same class."""

    def method(self: BaseUint, other: Any) -> bool:
        if not isinstance(other, type(self)):
            _raise_type_error(self, other, op_symbol)
        return op(int(self), int(other))

    method.__doc__ = f"Handle the `{op_symbol}` operator."
    return method


class BaseUint(int):
    """
    A bounded unsigned integer that refuses to mix with other integer types.

    Arithmetic and comparisons only accept operands of the exact same class,
    so a slot number can never be added to an epoch number by accident.
    Convert explicitly with `as_int()` when crossing between units.
    """

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Create and validate a new instance.

        Raises:
            TypeError: If `value` is a bool.
            OverflowError: If `value` is outside [0, 2**BITS - 1].
        """
        if isinstance(value, bool):
            raise TypeError(f"{cls.__name__} cannot be built from a bool")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate through the constructor and serialize as a plain int."""

        def validate(value: Any) -> BaseUint:
            if not isinstance(value, int):
                raise ValueError(f"{cls.__name__} requires an integer, got {type(value).__name__}")
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.int_schema(ge=0, lt=2**cls.BITS),
            python_schema=core_schema.plain_validator_function(validate),  # type: ignore[operator]
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    __add__ = _arithmetic(operator.add, "+")
    __sub__ = _arithmetic(operator.sub, "-")
    __mul__ = _arithmetic(operator.mul, "*")
    __floordiv__ = _arithmetic(operator.floordiv, "//")
    __mod__ = _arithmetic(operator.mod, "%")

    __eq__ = _comparison(operator.eq, "==")  # type: ignore[assignment]
    __ne__ = _comparison(operator.ne, "!=")  # type: ignore[assignment]
    __lt__ = _comparison(operator.lt, "<")
    __le__ = _comparison(operator.le, "<=")
    __gt__ = _comparison(operator.gt, ">")
    __ge__ = _comparison(operator.ge, ">=")

    def as_int(self) -> int:
        """Return the value as a plain Python int."""
        return int(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    def __hash__(self) -> int:
        return hash((type(self), int(self)))


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (uint64)."""

    BITS = 64
