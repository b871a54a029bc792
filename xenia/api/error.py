"""
API errors

Routes and authorization dependencies raise these; the handlers in
xenia.api.app turn them into the {ok: false, error} envelope.
"""

from fastapi import status

from xenia.libs.result import Error


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    @property
    def code(self) -> str:
        return self.base_error.code

    @property
    def message(self) -> str:
        return self.base_error.message


class ClientError(ApiError):
    """Expected failure; the message is shown to the caller as is"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error)
        self.status_code = status_code


class ServerError(ApiError):
    """Unmapped use-case error; only the code reaches the logs"""
