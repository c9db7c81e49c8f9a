import logging

import requests

from config import FETCH_TIMEOUT
from services.errors import FetchError


def download_image(url, timeout=FETCH_TIMEOUT):
    """
    Downloads the raw bytes behind `url` with a single GET.
    The body is returned as-is whatever Content-Type the remote declares.
    Any network failure or non-2xx status is raised as FetchError.
    """
    try:
        with requests.get(url, timeout=timeout) as response:
            response.raise_for_status()
            data = response.content
            logging.info(f"Fetched {url} → {response.status_code}, {len(data)} bytes")
            return data

    except requests.exceptions.Timeout as e:
        logging.error(f"Timed out after {timeout}s fetching {url}: {e}")
        raise FetchError(f"Timed out fetching image: {url}") from e
    except requests.exceptions.RequestException as e:
        logging.error(f"Image download failed for {url}: {e}")
        raise FetchError(f"Failed to fetch image: {url}") from e
