import logging
from query_string import *

logging.basicConfig(level=logging.DEBUG)


# parse a normal query string
print(parse("a=1&b=s"))  # {'a': '1', 'b': 's'}

# parse the query part of an url
print(parse("http://foo.com?a=1&b=s"))  # {'a': '1', 'b': 's'}

# custom separators
print(parse("a#test|b#1", "|", "#"))  # {'a': 'test', 'b': '1'}

# encoded values are decoded
print(parse("a=test1%20%26%20test2"))  # {'a': 'test1 & test2'}

# a key without value is dropped (see the debug log)
print(parse("a=1&c"))  # {'a': '1'}

# repeated keys become lists
print(parse("a=test1&b=1&a=test2"))  # {'a': ['test1', 'test2'], 'b': '1'}


# customize values while parsing
def parse_value(key: str, value: str):
    if key == "b":
        return int(value)
    if key == "c":
        return {"on": True, "off": False}[value]
    return value


print(parse("a=test&b=1&c=on", None, None, parse_value))  # {'a': 'test', 'b': 1, 'c': True}


# stringify a dict
print(stringify({"a": "test", "b": "1"}))  # a=test&b=1
print(stringify({"a": "test", "b": "1"}, "|", "#"))  # a#test|b#1
print(stringify({"a": "test1 & test2"}))  # a=test1%20%26%20test2
print(stringify({"a": ["test1", "test2"], "b": "1"}))  # a=test1&a=test2&b=1


# customize values while stringifying
def stringify_value(key: str, value):
    if key == "c":
        return "on" if value else "off"
    return value


print(stringify({"a": "test", "b": 1, "c": True}, None, None, stringify_value))  # a=test&b=1&c=on

# a malformed escape is the only error parse raises
try:
    parse("a=%E0%A4%A")
except DecodeError as e:
    print(e)
