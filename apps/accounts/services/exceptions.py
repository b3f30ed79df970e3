"""Errors raised by the staff account services."""


class AccountsServiceError(Exception):
    pass


class EmailAlreadyRegisteredError(AccountsServiceError):
    """Another account already uses this email."""

    def __init__(self, email):
        self.email = email
        super().__init__(f"Email {email} is already registered")


class InvalidCredentialsError(AccountsServiceError):
    """Unknown email or wrong password; the two are not distinguished."""
    pass


class InactiveAccountError(AccountsServiceError):
    """The account exists but has been deactivated by an administrator."""
    pass
