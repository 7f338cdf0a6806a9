from typing import Any
from .constants import DEFAULT_EQ, DEFAULT_SEP, URL_PREFIX_RE
from .logger import logger
from .query import ParseFunction, Query, resolve_function, resolve_separator
from .uri import decode_component


def parse(
    source: str,
    sep: str | None = None,
    eq: str | None = None,
    fn: ParseFunction | None = None,
) -> Query:
    """Parse a query string (or a whole url) into a dict.

    Repeated keys are collected into a list in the order they appear.
    Groups without exactly one `eq` are dropped, so a bare flag like `c`
    in `a=1&c` is ignored. Keys and values are percent-decoded, then
    `fn(key, value)` may replace the value:

        parse("a=1&b=s")                    # {'a': '1', 'b': 's'}
        parse("http://foo.com?a=1&b=s")     # {'a': '1', 'b': 's'}
        parse("a#test|b#1", "|", "#")       # {'a': 'test', 'b': '1'}
        parse("a=test1&b=1&a=test2")        # {'a': ['test1', 'test2'], 'b': '1'}
        parse("b=1", fn=lambda k, v: int(v))  # {'b': 1}

    Raises `DecodeError` if a key or value holds a malformed escape.
    """
    query: Query = {}
    if not source or not isinstance(source, str):
        return query

    sep = resolve_separator(sep, DEFAULT_SEP)
    eq = resolve_separator(eq, DEFAULT_EQ)
    transform = resolve_function(fn)

    source = URL_PREFIX_RE.sub("", source, count=1)

    # keys that already hold a list of collected values
    collected: set[str] = set()

    for group in source.split(sep):
        parts = group.split(eq)
        if len(parts) != 2:
            logger.debug(f"discard group: {group!r}")
            continue

        key = decode_component(parts[0])
        value: Any = transform(key, decode_component(parts[1]))

        if key in collected:
            query[key].append(value)
        elif key in query:
            query[key] = [query[key], value]
            collected.add(key)
        else:
            query[key] = value

    return query
