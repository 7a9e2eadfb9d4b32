"""Error types raised by the transformation engines."""


class ToolkitError(ValueError):
    """Base class for every error an engine reports back to its caller."""


# ---------- Decode errors ----------
class DecodeError(ToolkitError):
    pass


class InvalidPadding(DecodeError):
    pass


class InvalidCharacter(DecodeError):
    pass


class InvalidEscape(DecodeError):
    pass


class InvalidUtf8(DecodeError):
    pass


class MalformedToken(DecodeError):
    pass


class InvalidEncoding(DecodeError):
    pass


class InvalidJson(DecodeError):
    pass


class InvalidYaml(DecodeError):
    pass


# ---------- Parse errors ----------
class ParseError(ToolkitError):
    pass


class NotANumber(ParseError):
    pass


class InvalidDate(ParseError):
    pass


class InvalidTimezone(ParseError):
    pass


class InvalidNamespace(ParseError):
    pass


class UnknownAlgorithm(ParseError):
    pass


# ---------- Range errors ----------
class RangeError(ToolkitError):
    pass
