"""
Source resolution: turn heterogeneous image sources into raw bytes.

Callers hand the library bytes, file paths, URLs or rendered surfaces.
:func:`as_image_source` classifies each value into a tagged variant and
:func:`resolve_source` maps every variant to exactly one fetch strategy.
:func:`resolve_sources` fans the fetches out concurrently and gathers
the results back in input order.
"""

from __future__ import annotations

import asyncio
import io
import os
import urllib.request
from collections.abc import Iterable

import aiofiles
import aiohttp
from PIL import Image

from image_collage.canvas import Canvas
from image_collage.constants import (
    DOWNLOAD_CHUNK_SIZE,
    ENCODE_FORMAT,
    FTP_PREFIX,
    URL_PREFIXES,
)
from image_collage.errors import SourceUnavailable, UnsupportedSourceType
from image_collage.logging_utils import logger
from image_collage.type_defs import (
    BufferSource,
    ImageSource,
    PathSource,
    SourceValue,
    SurfaceSource,
    UrlSource,
)

_VARIANTS = (BufferSource, PathSource, UrlSource, SurfaceSource)


def is_url(text: str) -> bool:
    """Return True when text looks like an http(s) or ftp location."""
    return text.startswith(URL_PREFIXES)


def as_image_source(value: SourceValue) -> ImageSource:
    """
    Classify a raw caller value into a source variant.

    Raises:
        UnsupportedSourceType: If the value is none of bytes, str,
            os.PathLike, Canvas, Pillow image or an existing variant.

    """
    if isinstance(value, _VARIANTS):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BufferSource(bytes(value))
    if isinstance(value, os.PathLike):
        return PathSource(os.fsdecode(os.fspath(value)))
    if isinstance(value, str):
        return UrlSource(value) if is_url(value) else PathSource(value)
    if isinstance(value, (Canvas, Image.Image)):
        return SurfaceSource(value)
    raise UnsupportedSourceType(type(value).__name__)


def classify_sources(values: Iterable[SourceValue]) -> list[ImageSource]:
    """Classify every value up front, before any I/O is started."""
    return [as_image_source(v) for v in values]


async def download(url: str) -> bytes:
    """Stream an http(s) resource and join its chunks."""
    chunks: list[bytes] = []
    # No total timeout; a stalled server stalls the build
    timeout = aiohttp.ClientTimeout(total=None)
    async with aiohttp.ClientSession(timeout=timeout) as session, \
            session.get(url) as response:
        response.raise_for_status()
        async for chunk in response.content.iter_chunked(
                DOWNLOAD_CHUNK_SIZE):
            chunks.append(chunk)
    return b"".join(chunks)


def _fetch_ftp(url: str) -> bytes:
    with urllib.request.urlopen(url) as handle:  # noqa: S310
        return handle.read()


async def fetch_url(url: str) -> bytes:
    """
    Fetch a remote source.

    http(s) goes through aiohttp; ftp is served by urllib in a worker
    thread since aiohttp has no ftp client.

    Raises:
        SourceUnavailable: On any transport or status error.

    """
    try:
        if url.startswith(FTP_PREFIX):
            return await asyncio.to_thread(_fetch_ftp, url)
        return await download(url)
    except (aiohttp.ClientError, OSError, ValueError) as e:
        logger.debug("Download failed for %s: %s", url, e)
        raise SourceUnavailable(url, kind="url") from e


async def read_file(path: str) -> bytes:
    """
    Read a local file in full.

    Raises:
        SourceUnavailable: If the file is missing or unreadable.

    """
    try:
        async with aiofiles.open(path, "rb") as f:
            return await f.read()
    except OSError as e:
        logger.debug("Read failed for %s: %s", path, e)
        raise SourceUnavailable(path, kind="file") from e


def encode_surface(surface: Canvas | Image.Image) -> bytes:
    """Serialize a rendered surface to encoded bytes, synchronously."""
    if isinstance(surface, Canvas):
        return surface.to_bytes()
    buffer = io.BytesIO()
    surface.save(buffer, format=ENCODE_FORMAT)
    return buffer.getvalue()


async def resolve_source(value: SourceValue) -> bytes:
    """
    Resolve one source into raw image bytes.

    Buffers and surfaces complete without suspending; URLs and paths
    suspend on network or disk I/O.
    """
    source = as_image_source(value)
    match source:
        case BufferSource(data=data):
            return data
        case SurfaceSource(surface=surface):
            return encode_surface(surface)
        case UrlSource(url=url):
            data = await fetch_url(url)
        case PathSource(path=path):
            data = await read_file(path)
    logger.debug("Resolved %s source (%d bytes)", source.kind, len(data))
    return data


async def resolve_sources(values: Iterable[SourceValue]) -> list[bytes]:
    """
    Resolve all sources concurrently, keeping input order.

    Every value is classified first, so an unsupported one fails before
    any fetch is issued. The first fetch failure propagates; fetches
    still in flight are left to finish on their own.
    """
    sources = classify_sources(values)
    return list(await asyncio.gather(*(resolve_source(s) for s in sources)))
