"""
HTTP transport used by the validator to reach the siteverify endpoint.

A transport is any callable taking ``(url, data)`` and returning an object
with a ``content`` attribute and a ``close()`` method, such as a
``requests.Response``. Tests substitute their own.
"""

from typing import Callable, Dict

import requests

from .config import settings

PostForm = Callable[[str, Dict[str, str]], requests.Response]


def post_form(url: str, data: Dict[str, str]) -> requests.Response:
    """
    POST ``data`` form-encoded to ``url``.

    Network failures and non-2xx statuses raise ``requests.RequestException``
    subclasses, which the validator passes through unchanged.
    """
    response = requests.post(
        url,
        data=data,
        timeout=settings.RECAPTCHA_TIMEOUT_SECONDS
    )
    response.raise_for_status()
    return response
