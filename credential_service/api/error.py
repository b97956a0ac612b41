from typing import Mapping

from fastapi import status
from credential_service.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error, statuses: Mapping[str, int]) -> None:
    """
    Raise the HTTP exception for a use case error.

    Codes listed in statuses become a ClientError with that status; any other
    code (DELIVERY_FAILED, INVARIANT_VIOLATION, ...) becomes a ServerError.
    """
    status_code = statuses.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
