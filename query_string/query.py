from typing import Any, Callable

Scalar = str | int | float | bool | None
Value = Scalar | list[Scalar] | tuple[Scalar, ...]
Query = dict[str, Any]

ParseFunction = Callable[[str, str], Any]
StringifyFunction = Callable[[str, Scalar], Any]


def identity(key: str, value: Any) -> Any:
    return value


def resolve_separator(sep: str | None, default: str) -> str:
    """`None` and `""` both mean "use the default"."""
    return sep or default


def resolve_function(fn: Any) -> Callable[[str, Any], Any]:
    if fn is None or not callable(fn):
        return identity
    return fn


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))
