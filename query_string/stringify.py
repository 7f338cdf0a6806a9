from collections.abc import Mapping
from typing import Any
from .constants import DEFAULT_EQ, DEFAULT_SEP
from .logger import logger
from .query import StringifyFunction, Value, is_sequence, resolve_function, resolve_separator
from .uri import encode_component, to_text


def stringify(
    source: Mapping[str, Value],
    sep: str | None = None,
    eq: str | None = None,
    fn: StringifyFunction | None = None,
) -> str:
    """Build a query string from a mapping.

    A list or tuple value becomes one pair per element under the same key,
    a `None` value is left out. `fn(key, value)` is applied to every scalar
    before it is encoded:

        stringify({"a": "test", "b": "1"})            # 'a=test&b=1'
        stringify({"a": "test", "b": "1"}, "|", "#")  # 'a#test|b#1'
        stringify({"a": ["test1", "test2"]})          # 'a=test1&a=test2'
        stringify({"c": True})                        # 'c=true'
    """
    if source is None or not isinstance(source, Mapping):
        return ""

    sep = resolve_separator(sep, DEFAULT_SEP)
    eq = resolve_separator(eq, DEFAULT_EQ)
    transform = resolve_function(fn)

    pairs: list[str] = []
    for key, value in source.items():
        encoded_key = encode_component(to_text(key))

        if value is None:
            logger.debug(f"skip key without value: {key!r}")
            continue

        values = value if is_sequence(value) else [value]
        for v in values:
            v = transform(key, v)
            pairs.append(encoded_key + eq + encode_component(to_text(v)))

    return sep.join(pairs)
