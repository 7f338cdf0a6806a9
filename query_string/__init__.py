from .constants import DEFAULT_EQ, DEFAULT_SEP
from .exceptions import DecodeError, QueryStringError
from .parse import parse
from .query import ParseFunction, Query, Scalar, StringifyFunction, Value
from .stringify import stringify
from .uri import decode_component, encode_component


__version__ = "1.0.0"

__all__ = (
    "DEFAULT_EQ",
    "DEFAULT_SEP",
    "DecodeError",
    "QueryStringError",
    "parse",
    "ParseFunction",
    "Query",
    "Scalar",
    "StringifyFunction",
    "Value",
    "stringify",
    "decode_component",
    "encode_component",
)
