from collections.abc import Callable
from contextlib import ExitStack, suppress
from functools import WRAPPER_ASSIGNMENTS, wraps
from typing import Any, Protocol, Type, TypeGuard, TypeVar

from schema import Schema, SchemaError

T_return = TypeVar("T_return", covariant=True)

ReturnsSchema = Callable[[], Schema]


class SupportsCheck(Protocol[T_return]):
    def __call__(self, obj: Any, check: bool = True) -> TypeGuard[T_return]:
        ...


def schema2checker(
    t_return: Type[T_return],
) -> Callable[[ReturnsSchema], SupportsCheck[T_return]]:
    """Turn a schema factory into a ``TypeGuard`` checker.

    The checker raises :class:`schema.SchemaError` on mismatch, unless it is
    called with ``check=False``, in which case it returns ``False``.
    """

    def decorator(f: ReturnsSchema) -> SupportsCheck[T_return]:
        @wraps(
            f,
            assigned=[
                i for i in WRAPPER_ASSIGNMENTS if i not in {"__annotations__"}
            ],
        )
        def wrapped(obj: Any, check: bool = True) -> TypeGuard[T_return]:
            with ExitStack() as stack:
                if not check:
                    stack.enter_context(suppress(SchemaError))
                f().validate(obj)
                return True
            return False

        return wrapped

    return decorator
