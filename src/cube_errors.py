"""Exceptions raised for malformed or impossible cube input.

Every input problem is a `CubeInputError` (a `ValueError`), so callers that
only care about "bad input" can catch one type. The `kind` attribute names
the failure for transport layers (the HTTP shell puts it in the JSON body).
"""

from typing import Any, Optional


class CubeInputError(ValueError):
    kind = "InvalidInput"

    def __init__(self, message: str, expected: Optional[Any] = None, found: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.found = found


class MalformedLengthError(CubeInputError):
    kind = "MalformedLength"


class UnknownColorSymbolError(CubeInputError):
    kind = "UnknownColorSymbol"


class AmbiguousOrMissingCenterError(CubeInputError):
    kind = "AmbiguousOrMissingCenter"


class UnresolvableColorPairError(CubeInputError):
    kind = "UnresolvableColorPair"


class NoValidMovesError(CubeInputError):
    kind = "NoValidMoves"


class InvalidMoveError(CubeInputError):
    kind = "InvalidMove"


class InvariantViolationError(CubeInputError):
    """The cube is well-formed but physically impossible.

    `code` is the numeric verification status, `reason` its description.
    """

    kind = "InvariantViolation"

    def __init__(self, code: int, reason: str):
        super().__init__(reason)
        self.code = code
        self.reason = reason


class SearchError(RuntimeError):
    """The external search answered with an `Error`-prefixed reply.

    The reply text is kept verbatim in `reply`.
    """

    kind = "SearchError"

    def __init__(self, reply: str):
        super().__init__(reply)
        self.reply = reply
