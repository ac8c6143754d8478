"""Utility functions for loading descriptor documents.

This module provides functions for loading descriptor JSON from files and
URLs with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class DescriptorLoaderError(Exception):
    """Custom exception for descriptor loading errors."""

    pass


def load_descriptors_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load a descriptor document from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        DescriptorLoaderError: If the file is missing, unreadable or not JSON.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load descriptors from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise DescriptorLoaderError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info("Loaded descriptors from %s", file_path)
        return str(file_path), data
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise DescriptorLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise DescriptorLoaderError(f"Error reading file {file_path}: {e}") from e


def load_descriptors_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load a descriptor document from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        DescriptorLoaderError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug("Attempting to load descriptors from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise DescriptorLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
        logger.info("Loaded descriptors from %s", url)
        return url, data

    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise DescriptorLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise DescriptorLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except ValueError as e:
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise DescriptorLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise DescriptorLoaderError(f"Request error for URL {url}: {e}") from e


def load_descriptors(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load a descriptor document from either a file or URL.

    Raises:
        DescriptorLoaderError: If neither or both sources are given, or loading fails.
    """
    if not file_path and not url:
        raise DescriptorLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise DescriptorLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_descriptors_from_file(file_path)
    return load_descriptors_from_url(url, timeout)
