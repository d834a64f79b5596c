"""Plain text HTTP responses returned by the request handlers

Every response carries a human readable text/plain body. Error responses also
carry the machine readable error code in the `X-Error-Code` header.
"""

from flask import Response, redirect


def _plain(body: str, status: int, error_code: str | None = None) -> Response:
    response = Response(body, status=status, mimetype='text/plain')
    if error_code:
        response.headers['X-Error-Code'] = error_code
    return response


def response_200(message: str) -> Response:
    return _plain(message, 200)


def response_302(*, location: str) -> Response:
    return redirect(location, code=302)


def response_400(message: str, error_code: str | None = None) -> Response:
    return _plain(message, 400, error_code)


def response_404(message: str, error_code: str | None = None) -> Response:
    return _plain(message, 404, error_code)


def response_429(message: str, error_code: str | None = None) -> Response:
    return _plain(message, 429, error_code)


def response_500(error_code: str | None = None) -> Response:
    return _plain('Internal Server Error', 500, error_code)
