# Contains the exceptions raised while turning JSON into SQL


class JsonToSqlError(Exception):
    """Base class for every error raised by JsonToDDL."""


class MalformedInputError(JsonToSqlError, ValueError):
    """
    The input is not valid JSON, or its root value is not an object.
    """


class UnsupportedTypeError(JsonToSqlError, TypeError):
    """
    A JSON value has a kind that cannot be mapped to a column or a child table.

    Attributes:
        path: Dotted JSON path of the offending value (e.g. "main.items[0].tags")
        kind: Name of the offending value kind
        context: "object" when the value was a member, "array" when it was an element
    """

    def __init__(self, path, kind, context="object"):
        self.path = path
        self.kind = kind
        self.context = context
        super().__init__(f"The {kind} type is not supported in {context}s (at '{path}')")
