"""Utility functions for loading schema documents.

This module provides functions for loading JSON from files and URLs with
proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any, List, Sequence
from urllib.parse import urlparse

import requests

from .core.schema import Registry
from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If file is missing, cannot be read, or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load JSON from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise JSONLoaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        # Might still be valid JSON
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info("Loaded JSON from %s", file_path)
        return str(file_path), data
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load JSON data from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug("Attempting to load JSON from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "json" not in content_type and not url.endswith(".json"):
            logger.warning("URL %s does not have JSON content type: %s", url, content_type)

        data = response.json()
        logger.info("Loaded JSON from %s", url)
        return url, data

    except requests.exceptions.Timeout as e:
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        raise JSONLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load JSON data from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If neither or both parameters are provided, or loading fails.
    """
    if not file_path and not url:
        raise JSONLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise JSONLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_json_from_file(file_path)
    else:
        return load_json_from_url(url, timeout)


def is_url(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def load_registry(sources: Sequence[str], timeout: int = 30) -> Registry:
    """Load schema documents from paths or URLs into a Registry.

    Documents without an ``id`` are identified by their source.

    Args:
        sources: File paths or HTTP(S) URLs, in registry order.
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Registry with one root schema per source.
    """
    documents: List[Any] = []
    ids: List[str] = []

    for source in sources:
        if is_url(source):
            loaded = load_json(url=source, timeout=timeout)
        else:
            loaded = load_json(file_path=source)
        ids.append(loaded[0])
        documents.append(loaded[1])

    return Registry.from_documents(documents, ids)
