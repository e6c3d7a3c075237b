"""Filesystem implementation of :class:`~tablecraft.core.protocols.TableWriter`.

This module is the **only** place in the codebase that writes files.
``OSError`` is caught here and re-raised as
:class:`~tablecraft.exceptions.TableSaveError`.
"""

from __future__ import annotations

from pathlib import Path

from tablecraft.exceptions import TableSaveError


class FileTableWriter:
    """Concrete :class:`TableWriter` writing UTF-8 text files.

    Relative filenames resolve against *base_dir*, or the current
    working directory when it is not given.
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir: Path | None = base_dir

    def _resolve(self, filename: str) -> Path:
        path = Path(filename).expanduser()
        if self._base_dir is not None and not path.is_absolute():
            return self._base_dir / path
        return path

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def write(self, filename: str, text: str) -> None:
        """Write *text* to *filename* in one call, replacing any existing file.

        ``RuntimeError`` (unknown ``~user``) and ``ValueError`` (NUL byte in
        the name) are reported like ``OSError``.
        """
        try:
            path = self._resolve(filename)
            with path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(text)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise TableSaveError(
                f"Could not save {filename}: {reason}",
                hint="Check that the directory exists and is writable.",
            ) from exc
        except (RuntimeError, ValueError) as exc:
            raise TableSaveError(
                f"Could not save {filename}: {exc}",
                hint="Choose a plain file name or path.",
            ) from exc
