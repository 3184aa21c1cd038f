'''
    Exceptions raised by the AppSync value objects.
'''
import typing


class AppSyncClientException(Exception):
    '''Base class for every error raised by this package.'''

    error_type = "appsync_client_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> typing.Dict[str, typing.Any]:
        '''Error payload in the shape used for API error responses.'''
        return {
            "error": {
                "message": self.message,
                "type": self.error_type,
            }
        }


class InvalidArgument(AppSyncClientException, ValueError):
    '''A required parameter is missing or unusable.

    Raised while building a request, so a malformed payload never reaches
    the service.
    '''

    error_type = "invalid_argument"
