class QueryStringError(Exception):
    pass


class DecodeError(QueryStringError, ValueError):
    def __init__(self, value: str, reason: str):
        super().__init__(f"can not decode {value!r}: {reason}")
        self.value = value
        self.reason = reason
