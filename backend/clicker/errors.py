"""Error taxonomy shared by the services and the HTTP layer.

Services raise these; the handlers registered in ``create_app`` turn them
into the ``{success, message, payload}`` envelope with the matching status.
"""


class ApiError(Exception):
    status_code = 400
    default_message = 'Bad request'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    default_message = 'Invalid request'


class ConflictError(ApiError):
    status_code = 400
    default_message = 'Resource already exists'


class AuthError(ApiError):
    status_code = 400
    default_message = 'Invalid email or password'


class NotFoundError(ApiError):
    status_code = 404
    default_message = 'Not found'


class InternalError(ApiError):
    status_code = 500
    default_message = 'Internal server error'
