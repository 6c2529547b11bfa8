"""Client for the tbxmanager.com REST API."""

from collections.abc import Mapping, Sequence
from urllib.parse import urlencode

import requests

from tbxcli.logging import get_logger
from tbxcli.models import RestResult

logger = get_logger(__name__)

CREDENTIAL_OPTIONS = ('login', 'password')


def with_credentials(required: Sequence[str]) -> list[str]:
    """Prepend the login and password to a list of required options."""
    return [*CREDENTIAL_OPTIONS, *(name for name in required if name not in CREDENTIAL_OPTIONS)]


def options_to_query(
    options: Mapping[str, str],
    exclude: Sequence[str] = CREDENTIAL_OPTIONS,
) -> str:
    """Encode options as ``key=value`` pairs joined by ``&``.

    Options named in ``exclude`` are left out.
    """
    return urlencode([(key, value) for key, value in options.items() if key not in exclude])


def build_url(api_base: str, path: str, options: Mapping[str, str]) -> str:
    """Assemble the full URL of an API call."""
    query = options_to_query(options)
    url = f'{api_base.rstrip("/")}/{path.strip("/")}'
    return f'{url}?{query}' if query else url


def call_endpoint(
    url: str,
    login: str,
    password: str,
    *,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> RestResult:
    """Perform an authenticated GET request.

    Transport failures are reported in the result instead of being raised.
    """
    http = session or requests.Session()
    try:
        response = http.get(url, auth=(login, password), timeout=timeout)
    except requests.RequestException as exc:
        logger.warning('rest_call_failed', url=url, error=str(exc))
        return RestResult(status=0, message='Error', body=str(exc), ok=False)
    finally:
        if session is None:
            http.close()

    if not response.ok:
        logger.warning('rest_call_rejected', url=url, status=response.status_code)

    return RestResult(
        status=response.status_code,
        message=response.reason or ('OK' if response.ok else 'Error'),
        body=response.text,
        ok=response.ok,
    )
