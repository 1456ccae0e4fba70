"""
Downloader

Streams one asset from the archive to the local downloads directory.

- the body is read in chunks (stream), never buffered whole in memory;
- the filename comes from the Content-Disposition header, then from the
  caller's suggestion, then from a fallback token;
- an extensionless name gets `.pdf`/`.zip` from the Content-Type;
- a SHA-256 is computed while writing, like the platform's other
  downloaders, and returned with the path.

Any failure removes the partial file and raises `DownloadError`.
"""

from __future__ import annotations

import hashlib
import logging
import re
from pathlib import Path, PurePosixPath
from typing import Mapping, Optional
from urllib.parse import unquote

import requests

from pastpapers.core.errors import DownloadError
from pastpapers.core.models import FetchResult
from pastpapers.core.scraping.detector import extension_for_content_type
from pastpapers.core.scraping.fetcher import Fetcher

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192

# filename*=UTF-8''na%C3%AFve.pdf
_EXT_FILENAME_RE = re.compile(r"filename\*\s*=\s*([^']*)'[^']*'([^;\n]+)", re.IGNORECASE)
# filename="a b.pdf" / filename=a.pdf
_FILENAME_RE = re.compile(
    r"filename[^;=\n*]*=\s*((['\"]).*?\2|[^;\n]*)", re.IGNORECASE
)


def _safe_name(name: str) -> str:
    # keep the basename only: a header must not escape the downloads dir
    name = name.replace("\\", "/")
    name = PurePosixPath(name).name.strip()
    if name in (".", ".."):
        return ""
    return name


def filename_from_disposition(header: Optional[str]) -> Optional[str]:
    """Extract the filename parameter of a Content-Disposition header.

    The RFC 5987 ``filename*`` form is preferred when present. Quotes are
    stripped; an empty value gives None.
    """
    if not header:
        return None

    m = _EXT_FILENAME_RE.search(header)
    if m:
        charset = m.group(1) or "utf-8"
        try:
            name = unquote(m.group(2).strip(), encoding=charset)
        except LookupError:
            name = unquote(m.group(2).strip())
        name = _safe_name(name.replace('"', "").replace("'", ""))
        if name:
            return name

    m = _FILENAME_RE.search(header)
    if m and m.group(1):
        name = _safe_name(m.group(1).replace('"', "").replace("'", ""))
        return name or None
    return None


def resolve_filename(
    headers: Mapping[str, str],
    suggested_name: Optional[str] = None,
    fallback: str = "download",
) -> str:
    """Pick the on-disk name for a response.

    Order: Content-Disposition, `suggested_name`, `fallback`. When the
    result has no extension one is inferred from the Content-Type.
    """
    name = filename_from_disposition(headers.get("content-disposition"))
    if not name and suggested_name:
        name = _safe_name(suggested_name)
    if not name:
        name = fallback

    if not PurePosixPath(name).suffix:
        name += extension_for_content_type(headers.get("content-type"))
    return name


class Downloader:
    """Download a single asset and return where it was written.

    Accepts an optional `Fetcher` so tests can inject one that returns
    canned responses.
    """

    def __init__(
        self,
        fetcher: Fetcher | None = None,
        dest_dir: str | Path = "downloads",
        fallback_filename: str = "download",
    ):
        self.fetcher = fetcher or Fetcher()
        self.dest_dir = Path(dest_dir)
        self.fallback_filename = fallback_filename

    def _out_dir(self) -> Path:
        out_dir = self.dest_dir
        if not out_dir.is_absolute():
            out_dir = Path.cwd() / out_dir
        # exist_ok makes concurrent first use safe
        out_dir.mkdir(parents=True, exist_ok=True)
        return out_dir

    def download(self, url: str, suggested_name: Optional[str] = None) -> FetchResult:
        """Stream `url` to `<dest_dir>/<filename>`.

        Returns a FetchResult once the file handle is closed. Raises
        DownloadError on network, HTTP status or write failures; nothing
        is left on disk in that case.
        """
        logger.info("Downloading %s", url)
        try:
            resp = self.fetcher.stream_get(url)
        except requests.RequestException as exc:
            raise DownloadError(url, str(exc)) from exc
        try:
            resp.raise_for_status()
        except requests.RequestException as exc:
            resp.close()
            raise DownloadError(url, str(exc)) from exc

        out_path: Optional[Path] = None
        opened = False
        hasher = hashlib.sha256()
        total = 0
        try:
            with resp as r:
                filename = resolve_filename(
                    r.headers, suggested_name, self.fallback_filename
                )
                out_path = self._out_dir() / filename
                with open(out_path, "wb") as fh:
                    opened = True
                    for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        hasher.update(chunk)
                        total += len(chunk)
        except (requests.RequestException, OSError) as exc:
            # only remove a file this call created
            if opened and out_path is not None:
                out_path.unlink(missing_ok=True)
            raise DownloadError(url, str(exc)) from exc

        logger.info("Saved %s (%d bytes)", out_path, total)
        return FetchResult(
            file_path=str(out_path),
            url=url,
            size=total,
            sha256=hasher.hexdigest(),
            content_type=resp.headers.get("content-type"),
        )
