"""
Golden fixture support for the rb2js test suite.

Fixtures come in pairs under a test data directory::

    testdata/rb/<name>.rb   source program
    testdata/js/<name>.js   expected translation

Classes:
    FixtureLocator: Finds fixture names and builds their paths.
    ShaStore: Remembers a SHA-256 digest per file so that slow external
        validators only run when fixture text has changed.
    SyntaxValidator: Checks text with ``ruby -c`` and ``node --check``.

Raises:
    ValidationError: When a fixture set is too small or a validator rejects text.
"""

import hashlib
import json
import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when fixtures are missing or fail an external syntax check."""


class FixtureLocator:
    """Locates paired source/expected fixture files.

    Attributes:
        root (Path): Directory holding the ``rb`` and ``js`` subdirectories.
        minimum (int): Fewest fixtures accepted before discovery is considered broken.
    """

    def __init__(self, root: str | Path, minimum: int = 10) -> None:
        self.root = Path(root)
        self.minimum = minimum

    def golden_files(self) -> list[str]:
        """Returns the sorted fixture names found under ``root/rb``.

        Raises:
            ValidationError: If fewer than ``minimum`` fixtures are found.
        """
        names = sorted(p.stem for p in (self.root / "rb").glob("*.rb"))
        if len(names) < self.minimum:
            raise ValidationError(
                f"Expected to find a few more files, only found {len(names)}"
            )
        return names

    def source_path(self, name: str) -> Path:
        return self.root / "rb" / f"{name}.rb"

    def expected_path(self, name: str) -> Path:
        return self.root / "js" / f"{name}.js"


class ShaStore:
    """JSON-backed map from file path to the SHA-256 of its last validated text.

    The store is written back to disk on every update so that separate test
    runs share it.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.shas: dict[str, str] = {}
        if self.path.exists() and self.path.stat().st_size > 0:
            with open(self.path, encoding="utf-8") as f:
                self.shas = json.load(f)
        logger.debug("loaded %d digests from %s", len(self.shas), self.path)

    @staticmethod
    def digest(text: str) -> str:
        return hashlib.sha256(text.encode("utf-8")).hexdigest()

    def match(self, file_path: str | Path, text: str) -> bool:
        """Returns True if ``text`` is what was last recorded for ``file_path``."""
        return self.shas.get(str(file_path)) == self.digest(text)

    def update(self, file_path: str | Path, text: str) -> None:
        self.shas[str(file_path)] = self.digest(text)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.shas, f, indent=2, sort_keys=True)
        logger.debug("recorded digest for %s", file_path)


class SyntaxValidator:
    """Runs external syntax checkers over source text."""

    @staticmethod
    def available(tool: str) -> bool:
        return shutil.which(tool) is not None

    @classmethod
    def ensure_valid_rb(cls, text: str) -> None:
        cls._check(["ruby", "-c"], text, ".rb", "Ruby")

    @classmethod
    def ensure_valid_js(cls, text: str) -> None:
        cls._check(["node", "--check"], text, ".js", "JavaScript")

    @staticmethod
    def _check(args: list[str], text: str, suffix: str, language: str) -> None:
        fd, path = tempfile.mkstemp(suffix=suffix, prefix="rb2js-check-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            result = subprocess.run(
                args + [path], capture_output=True, text=True, check=False
            )
            if result.returncode != 0:
                raise ValidationError(f"{language} syntax error: {result.stderr}")
        finally:
            os.unlink(path)


__all__ = ["FixtureLocator", "ShaStore", "SyntaxValidator", "ValidationError"]
