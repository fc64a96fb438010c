"""File helpers used for token persistence and downloads."""

import os
from typing import Union

import aiofiles
import aiofiles.os

PathLike = Union[str, os.PathLike]


async def check_is_directory(path: PathLike) -> bool:
    """Return True if path exists and is a directory."""
    return await aiofiles.os.path.isdir(path)


async def create_directory(path: PathLike) -> None:
    """Create a directory and any missing parents."""
    await aiofiles.os.makedirs(path, exist_ok=True)


async def ensure_directory(path: PathLike) -> None:
    if not await check_is_directory(path):
        await create_directory(path)


async def write_to_file(path: PathLike, content: Union[bytes, str]) -> None:
    """Write bytes or text to path, replacing any existing file."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    async with aiofiles.open(path, "wb") as f:
        await f.write(content)


async def read_file(path: PathLike) -> bytes:
    async with aiofiles.open(path, "rb") as f:
        return await f.read()


async def read_text_file(path: PathLike) -> str:
    async with aiofiles.open(path, "r", encoding="utf-8") as f:
        return await f.read()
