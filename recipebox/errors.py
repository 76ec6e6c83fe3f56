"""
Domain errors raised by the services layer.

Controllers never build HTTP errors for these themselves; the handlers
registered in recipebox.main translate them into responses.
"""


class RecipeBoxError(Exception):
    """Base class for all recipe box errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RecipeBoxError):
    """
    Malformed or missing input.

    Carries a field -> message map so clients can show errors next to
    the offending inputs.
    """

    status_code = 422

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        super().__init__(message)
        self.errors = errors or {}


class NotFoundOrUnauthorized(RecipeBoxError):
    """
    The entity does not exist or belongs to another user.

    Both cases share one error so the existence of other users'
    records is never revealed.
    """

    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class AuthenticationError(RecipeBoxError):
    """No verified identity is attached to the request."""

    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
