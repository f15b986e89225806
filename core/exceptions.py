class AppError(Exception):
    def __init__(self, message: str, status_code: int):
        """
        Base class for errors raised by the services.

        Args:
            message (str): The error message.
            status_code (int): The HTTP status code associated with the error.
        """
        super().__init__(message)

        self.message = message
        self.status_code = status_code
        self.status = "fail" if str(status_code).startswith("4") else "error"


class DuplicateUserError(AppError):
    def __init__(self, message: str):
        super().__init__(message, 400)


class InvalidCredentialsError(AppError):
    def __init__(self, message: str = "Username and password cannot be blank"):
        super().__init__(message, 400)


class UserNotFoundError(AppError):
    def __init__(self, username: str):
        super().__init__(f"User '{username}' not found", 404)


class FriendshipError(AppError):
    def __init__(self, message: str):
        super().__init__(message, 400)
