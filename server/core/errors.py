# server/core/errors.py


class HostsApiError(Exception):
    """
    Base class for every request-scoped error raised by the hosts API.
    """


class ValidationError(HostsApiError):
    """
    Missing or malformed request input. `fields` are echoed back in the
    response body next to the message.
    """

    def __init__(self, message: str, **fields):
        super().__init__(message)
        self.message = message
        self.fields = fields

    def to_dict(self) -> dict:
        return {"message": self.message, **self.fields}


class StoreError(HostsApiError):
    """
    Reading or writing the hosts file failed.
    The original OSError is kept as __cause__.
    """


class ReloadError(HostsApiError):
    """
    The DNS service reload command could not be run or exited non-zero.
    """


# -------------------------------
# Authentication errors
# -------------------------------

class AuthError(HostsApiError):
    body_key = "error"
    message = "Unauthorized"


class Unauthorized(AuthError):
    message = "Unauthorized"


class InvalidToken(AuthError):
    message = "Invalid token"


class InvalidCredentials(AuthError):
    message = "invalid credentials"
