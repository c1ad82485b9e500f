import requests

DEFAULT_TIMEOUT = 10.0


def _get(url: str, timeout: float) -> requests.Response:
    return requests.get(url, timeout=timeout, headers={'Accept': 'text/csv, text/plain'})


def fetch_csv_text(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download a word list. The body is decoded as UTF-8 regardless of the
    declared charset; a leading BOM is left for the parser to strip."""
    try:
        response = _get(url, timeout)
    except requests.RequestException as e:
        raise FetchError(f'Could not fetch "{url}": {e}') from e

    if not response.ok:
        raise FetchError(f'Could not fetch "{url}": HTTP {response.status_code}')

    try:
        return response.content.decode('utf-8')
    except UnicodeDecodeError as e:
        raise FetchError(f'"{url}" is not UTF-8 text') from e


class FetchError(Exception):
    pass
