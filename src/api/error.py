from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class UnauthenticatedError(ClientError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_401_UNAUTHORIZED)


class BadRequestError(ClientError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_400_BAD_REQUEST)


class ForbiddenError(ClientError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_403_FORBIDDEN)


class NotFoundError(ClientError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_404_NOT_FOUND)


class ConflictError(ClientError):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_409_CONFLICT):
        super().__init__(base_error, status_code=status_code)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
