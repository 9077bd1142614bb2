import logging
import os

from .align import render
from .config import DEFAULT_CHARSET, DEFAULT_OUTPUT_DIR

logger = logging.getLogger(__name__)

CLASS_HEADER = render(r"""
/**    / \____  _    ______   _____ / \____   ____  _____
 *    /  \__  \/ \  / \__  \ /  __//  \__  \ /    \/ __  \   Javaslang
 *  _/  // _\  \  \/  / _\  \\_  \/  // _\  \  /\  \__/  /   Copyright 2014-2015 Daniel Dietrich
 * /___/ \_____/\____/\_____/____/\___\_____/_/  \_/____/    Licensed under the Apache License, Version 2.0
 */
// @@ GENERATED FILE - DO NOT MODIFY @@
""")

FILE_TEMPLATE = """
    ${header}
    ${body}
"""


def _ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def emit(
    package_path: str,
    file_name: str,
    header: str,
    body: str,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    charset: str = DEFAULT_CHARSET,
) -> str:
    """
    Write header followed by body to output_dir/package_path/file_name.

    Missing directories are created and an existing file is overwritten. Errors
    from the filesystem propagate unchanged. Returns the path written.
    """
    logger.info("Generating %s/%s", package_path, file_name)

    contents = render(FILE_TEMPLATE, header=header, body=body)

    dir_path = os.path.join(output_dir, *package_path.split("/"))
    _ensure_dir(dir_path)
    path = os.path.join(dir_path, file_name)

    with open(path, "wb") as f:
        f.write(contents.encode(charset))
    return path
