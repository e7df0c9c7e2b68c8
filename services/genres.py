# services/genres.py — the genre list offered as filter options
from pathlib import Path
from typing import List, Union

from starlette.concurrency import run_in_threadpool


async def read_genres(path: Union[str, Path]) -> List[str]:
    """
    Reads the newline-delimited genre file.

    The file is read on every call so edits show up without a restart.
    Lines are returned exactly as split on "\\n".

    Raises
    ------
    OSError
        If the file cannot be read.
    """
    text = await run_in_threadpool(Path(path).read_text, encoding="utf-8")
    return text.split("\n")
