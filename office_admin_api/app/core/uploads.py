"""
Storage of uploaded invoice and document files.

The dashboard embeds files in JSON bodies as base64 data URIs
(``data:application/pdf;base64,JVBERi0...``).  ``save_upload`` decodes
such a payload and writes it below the uploads directory, returning the
path stored on the project or document record.  Stored names are never
reused: when the timestamped name is taken, a counter is appended
(``invoice_<ms>_1.pdf``).  Writes are not retried, checksummed or
cancellable; an ``OSError`` propagates to the caller and ends up as a
500 response.
"""

import base64
import binascii
import logging
import re
import time
from pathlib import Path

from werkzeug.utils import secure_filename


logger = logging.getLogger(__name__)

DATA_URI_RE = re.compile(r"^data:([A-Za-z0-9.+/-]+);base64,(.+)$", re.DOTALL)
WHITESPACE_RE = re.compile(r"\s+")

# Upper bound on ``_<n>`` suffixes tried before giving up on a name.
MAX_NAME_ATTEMPTS = 1000


class InvalidFilePayload(ValueError):
    """Raised when an upload is not a base64 data URI."""


def decode_data_uri(payload: str) -> bytes:
    """Return the bytes carried by a ``data:<mime>;base64,<data>`` URI.

    Line breaks inside the data and missing ``=`` padding are accepted;
    characters outside the base64 alphabet are not.
    """
    match = DATA_URI_RE.match(payload or "")
    if not match:
        raise InvalidFilePayload("Invalid base64 string")
    data = WHITESPACE_RE.sub("", match.group(2))
    data += "=" * (-len(data) % 4)
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise InvalidFilePayload("Invalid base64 string") from exc


def timestamp_ms() -> int:
    return int(time.time() * 1000)


def invoice_filename() -> str:
    return f"invoice_{timestamp_ms()}.pdf"


def document_filename(original: str) -> str:
    """Prefix a sanitized client filename with the upload time."""
    safe_name = secure_filename(original) or "file"
    return f"{timestamp_ms()}_{safe_name}"


def _write_new_file(directory: Path, filename: str, data: bytes) -> Path:
    """Create ``filename`` in ``directory``, numbering it if the name is taken."""
    base = Path(filename)
    for attempt in range(MAX_NAME_ATTEMPTS):
        name = filename if attempt == 0 else f"{base.stem}_{attempt}{base.suffix}"
        path = directory / name
        try:
            with open(path, "xb") as fh:
                fh.write(data)
        except FileExistsError:
            continue
        return path
    raise FileExistsError(f"No free name for {filename} in {directory}")


def save_upload(uploads_dir: str, payload: str, filename: str) -> str:
    """Decode ``payload`` and write it under ``uploads_dir``.

    The directory is created on demand.  ``filename`` is the preferred
    name; an existing file is never overwritten.  Returns the written
    path.  Raises ``InvalidFilePayload`` before touching the disk when
    the payload cannot be decoded.
    """
    data = decode_data_uri(payload)
    directory = Path(uploads_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = _write_new_file(directory, filename, data)
    logger.info("Stored upload %s (%d bytes)", path, len(data))
    return str(path)


def remove_upload(path: str) -> None:
    """Delete a stored upload, logging instead of raising on failure."""
    if not path:
        return
    try:
        Path(path).unlink()
    except OSError as exc:
        logger.warning("Failed to delete file %s: %s", path, exc)
