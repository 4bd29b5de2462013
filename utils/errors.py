"""
Errors Module - Error taxonomy shared by the portfolio service and the JSON API
"""


class ApiError(Exception):
    """Base error carrying the HTTP status the API responds with"""
    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'error': self.message}


class Unauthorized(ApiError):
    status_code = 401

    def __init__(self, message='Unauthorized'):
        super().__init__(message)


class BadRequest(ApiError):
    status_code = 400


class NotFound(ApiError):
    status_code = 404

    def __init__(self, message='Portfolio not found'):
        super().__init__(message)


class InternalError(ApiError):
    status_code = 500


__all__ = ['ApiError', 'Unauthorized', 'BadRequest', 'NotFound', 'InternalError']
