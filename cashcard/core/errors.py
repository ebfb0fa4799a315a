class AppError(Exception):
    def __init__(self, code: str, message: str, status_code: int = 400):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code


class AuthError(AppError):
    def __init__(self, code: str, message: str, status_code: int = 401, scheme: str = "Basic"):
        super().__init__(code, message, status_code)
        # схема для заголовка WWW-Authenticate
        self.scheme = scheme


class InvalidSortError(AppError):
    pass


class PrincipalMissingError(AppError):
    """Raised when a handler is reached without an authenticated owner."""

    def __init__(self):
        super().__init__(
            "PRINCIPAL_MISSING",
            "Request reached the handler without an authenticated principal.",
            500,
        )
