"""Error taxonomy and the ``Result`` type returned by every service call.

Expected failures (bad credentials, missing permissions, unknown records)
are values, not exceptions. Routes inspect ``result.ok`` and map
``result.error.kind`` onto an HTTP response.
"""
import enum

from messages import get_translator

_english = get_translator("en")


class ErrorKind(enum.Enum):
    UNAUTHENTICATED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    VALIDATION_ERROR = 400

    @property
    def status_code(self):
        return self.value


class ServiceError:
    """A failed operation.

    ``code`` is the stable machine-readable identifier clients branch on,
    ``message`` is the human text (English by default, looked up from the
    message catalog), ``details`` carries extra payload such as the
    required and granted permissions of a denied API call.
    """

    def __init__(self, kind, code, message=None, **details):
        self.kind = kind
        self.code = code
        self.message = message or _english(code)
        self.details = details

    @property
    def status_code(self):
        return self.kind.status_code

    def __eq__(self, other):
        if not isinstance(other, ServiceError):
            return NotImplemented
        return (self.kind, self.code, self.message, self.details) == \
            (other.kind, other.code, other.message, other.details)

    def __repr__(self):
        return f"ServiceError({self.kind.name}, {self.code!r})"


class Result:
    __slots__ = ("value", "error")

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, value=None):
        return cls(value=value)

    @classmethod
    def failure(cls, kind, code, message=None, **details):
        return cls(error=ServiceError(kind, code, message, **details))

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return f"Result.success({self.value!r})"
        return f"Result.failure({self.error!r})"


def unauthenticated(code="login_required", message=None, **details):
    return Result.failure(ErrorKind.UNAUTHENTICATED, code, message, **details)


def forbidden(code="forbidden", message=None, **details):
    return Result.failure(ErrorKind.FORBIDDEN, code, message, **details)


def not_found(code="not_found", message=None, **details):
    return Result.failure(ErrorKind.NOT_FOUND, code, message, **details)


def conflict(code="conflict", message=None, **details):
    return Result.failure(ErrorKind.CONFLICT, code, message, **details)


def invalid(code="invalid_request", message=None, **details):
    return Result.failure(ErrorKind.VALIDATION_ERROR, code, message, **details)
