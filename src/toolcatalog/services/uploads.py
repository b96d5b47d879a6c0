import logging
import re
import time
from os import PathLike

import anyio

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def safe_filename(original_name: str) -> str:
    """Base name of an uploaded file, restricted to URL-safe characters."""
    name = original_name.replace("\\", "/").rsplit("/", 1)[-1]
    name = _UNSAFE_CHARS.sub("_", name).lstrip(".")
    return name or "upload"


async def store_upload(upload_dir: str | PathLike, original_name: str, data: bytes) -> str:
    """Write ``data`` under a fresh ``<millis>-<name>`` file and return that name.

    Files are opened in exclusive mode; when the name is taken the timestamp
    prefix is bumped until a free name is found.
    """
    directory = anyio.Path(upload_dir)
    await directory.mkdir(parents=True, exist_ok=True)

    base = safe_filename(original_name)
    stamp = int(time.time() * 1000)
    while True:
        target = directory / f"{stamp}-{base}"
        try:
            async with await anyio.open_file(target, "xb") as fh:
                await fh.write(data)
        except FileExistsError:
            stamp += 1
            continue
        logger.info("Upload stored: %s (%d bytes)", target.name, len(data))
        return target.name
