"""
Pretty-prints generated JavaScript with an external formatter.

The translator's own output is already valid JavaScript; formatting is an
optional post-processing step. The text is written to a temporary ``.js``
file, the formatter is run on that file in place, and the result is read
back.

Functions:
    format_js(js, command=None) -> str

Configuration:
    The command defaults to ``npx prettier --write``. The CLI lets the
    ``RB2JS_FORMATTER`` environment variable override it.

Raises:
    FormatError: If the tool cannot be started or exits with a non-zero status.
"""

import logging
import os
import shlex
import subprocess
import tempfile

from rb2js.rb2js_errors import FormatError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "npx prettier --write"


def format_js(js: str, command: str | None = None) -> str:
    """Formats ``js`` with an external tool and returns the formatted text.

    Args:
        js (str): JavaScript source to format.
        command (str | None): Formatter command line; the temporary file path
            is appended as the last argument. Defaults to ``DEFAULT_COMMAND``.

    Returns:
        str: The formatted source, stripped of leading and trailing whitespace.

    Raises:
        FormatError: If the formatter is missing or reports a failure.
    """
    args = shlex.split(command or DEFAULT_COMMAND)
    fd, path = tempfile.mkstemp(suffix=".js", prefix="rb2js-")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(js)

        logger.info("running formatter: %s", " ".join(args + [path]))
        try:
            result = subprocess.run(
                args + [path], capture_output=True, text=True, check=False
            )
        except OSError as e:
            logger.error("formatter could not be started: %s", e)
            raise FormatError(str(e)) from e

        if result.returncode != 0:
            logger.error("formatter exited with status %d", result.returncode)
            raise FormatError(result.stderr or result.stdout)

        with open(path, encoding="utf-8") as f:
            return f.read().strip()
    finally:
        os.unlink(path)


__all__ = ["DEFAULT_COMMAND", "format_js"]
