# common/data_access.py

"""
Fetch and parse the dashboard's CSV sources.

A source locator is either:
  - an absolute http(s) URL, downloaded with requests;
  - a relative path, joined onto DATA_BASE_URL when one is configured;
  - otherwise a file under DATA_ROOT.

Every failure (bad status, no connection, timeout, missing file, bad
encoding, unparseable CSV) is raised as DatasetLoadError so callers only
have one thing to catch.
"""

import io
from pathlib import Path
from typing import Optional

import pandas as pd
import requests

import config
from common.logging_utils import get_logger

logger = get_logger(__name__)


class DatasetLoadError(RuntimeError):
    """A dataset could not be fetched or parsed."""


def _is_url(locator: str) -> bool:
    return locator.startswith(("http://", "https://"))


def resolve_locator(locator: str, base_url: Optional[str] = None, data_root: Optional[Path] = None):
    """
    Turn a configured locator into either a full URL (str) or a local Path.
    """
    base_url = config.DATA_BASE_URL if base_url is None else base_url
    data_root = config.DATA_ROOT if data_root is None else data_root

    if _is_url(locator):
        return locator
    if base_url:
        # Safely combine the base URL with the relative path
        return base_url.rstrip('/') + "/" + locator.lstrip('/')
    return Path(data_root) / locator.lstrip('/')


def _download(url: str, timeout: float) -> str:
    try:
        logger.info("Downloading %s", url)
        response = requests.get(url, timeout=timeout)
        # Raises for 4xx / 5xx
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        raise DatasetLoadError(f"Download failed: The URL returned a bad status. {e}") from e
    except requests.exceptions.ConnectionError as e:
        raise DatasetLoadError(f"Download failed: Could not connect to the server. {e}") from e
    except requests.exceptions.Timeout as e:
        raise DatasetLoadError("Download failed: The request timed out.") from e
    except requests.exceptions.RequestException as e:
        raise DatasetLoadError(f"An unexpected download error occurred: {e}") from e

    try:
        return response.content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DatasetLoadError(f"Download failed: {url} is not UTF-8 text. {e}") from e


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise DatasetLoadError(f"Data file not found at '{path}'") from e
    except UnicodeDecodeError as e:
        raise DatasetLoadError(f"Data file '{path}' is not UTF-8 text. {e}") from e
    except OSError as e:
        raise DatasetLoadError(f"Could not read data file '{path}': {e}") from e


def fetch_text(locator: str, timeout: Optional[float] = None) -> str:
    """Return the raw CSV text behind a source locator."""
    timeout = config.FETCH_TIMEOUT_S if timeout is None else timeout
    target = resolve_locator(locator)
    if isinstance(target, Path):
        return _read_file(target)
    return _download(target, timeout)


def parse_csv(text: str) -> tuple[dict[str, str], ...]:
    """
    Parse CSV text with a header row into a tuple of row dicts.

    All values stay strings; empty cells and cells missing from short rows
    become "".
    """
    try:
        df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise DatasetLoadError("CSV has no header row") from e
    except pd.errors.ParserError as e:
        raise DatasetLoadError(f"Could not parse CSV: {e}") from e

    df = df.fillna("")
    return tuple(df.to_dict(orient="records"))
