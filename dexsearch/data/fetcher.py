"""ABOUTME: Downloads the dataset CSV files listed in sources.yml.
ABOUTME: Supports async downloading with caching of already present files."""

import asyncio
import logging
from pathlib import Path

import httpx

from dexsearch.config import SourcesConfig, load_sources_config
from dexsearch.settings import settings

logger = logging.getLogger(__name__)


async def fetch_file(
    name: str,
    config: SourcesConfig,
    output_dir: Path,
    force: bool = False,
    client: httpx.AsyncClient | None = None,
) -> Path:
    """Fetch a single dataset file.

    Args:
        name: Name of the file to fetch.
        config: Sources configuration.
        output_dir: Directory to save the file in.
        force: If True, re-download even if file exists.
        client: Optional httpx client for connection reuse.

    Returns:
        Path to the downloaded file.

    Raises:
        httpx.HTTPStatusError: If download fails.
        KeyError: If name not in config.
    """
    output_path = output_dir / config.files[name]

    if await asyncio.to_thread(output_path.exists) and not force:
        logger.debug("Using cached %s", output_path)
        return output_path

    await asyncio.to_thread(output_dir.mkdir, parents=True, exist_ok=True)

    url = config.get_file_url(name)

    should_close_client = client is None
    if client is None:
        client = httpx.AsyncClient(follow_redirects=True, timeout=60.0)

    try:
        response = await client.get(url)
        response.raise_for_status()

        await asyncio.to_thread(output_path.write_text, response.text, encoding="utf-8")
        logger.info("Downloaded %s -> %s", url, output_path)
        return output_path
    finally:
        if should_close_client:
            await client.aclose()


async def fetch_dex_files(
    config: SourcesConfig | None = None,
    output_dir: Path | None = None,
    force: bool = False,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Path]:
    """Fetch all configured dataset files.

    Args:
        config: Sources configuration. Loads default if not provided.
        output_dir: Directory to save files. Uses settings.dex_dir if not provided.
        force: If True, re-download even if files exist.
        client: Optional httpx client; a new one is opened and closed otherwise.

    Returns:
        Dictionary mapping file names to their downloaded paths.
    """
    if config is None:
        config = load_sources_config()

    if output_dir is None:
        output_dir = settings.dex_dir

    names = config.get_file_names()

    if client is not None:
        paths = await asyncio.gather(*(fetch_file(name, config, output_dir, force, client) for name in names))
    else:
        async with httpx.AsyncClient(follow_redirects=True, timeout=60.0) as own_client:
            paths = await asyncio.gather(
                *(fetch_file(name, config, output_dir, force, own_client) for name in names)
            )

    return dict(zip(names, paths, strict=True))
