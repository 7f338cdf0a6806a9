import re

DEFAULT_SEP = "&"
DEFAULT_EQ = "="

# left unescaped by encode_component, on top of ascii letters, digits and "_.-~"
SAFE_CHARS = "!'()*"

# everything up to and including the first "?"
URL_PREFIX_RE = re.compile(r".*?\?")
