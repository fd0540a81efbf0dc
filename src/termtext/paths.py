"""Path string helpers for config values and file listings."""

from __future__ import annotations

import os


def is_root(path: str) -> bool:
    """True if ``path`` is a filesystem root ("/" on POSIX)."""
    return os.path.dirname(path) == path


def replace_tilde(s: str, home: str | os.PathLike[str] | None = None) -> str:
    """Replace a leading ``~`` in ``s`` with the user's home directory.

    Args:
        s: Path-like string, e.g. a config value "~/.config/app".
        home: Home directory to substitute. Defaults to the configured
            ``home_dir`` (see ``termtext.config``).
    """
    if not s.startswith("~"):
        return s
    if home is None:
        from termtext.config import get_config

        home = get_config().home_dir
    return s.replace("~", os.fspath(home), 1)


def file_extension(name: str | os.PathLike[str], *, is_dir: bool = False) -> str:
    """Return the extension of a file name with its leading dot.

    Returns an empty string when no extension can be determined: for
    directories, hidden files without another dot (".bashrc") and names
    without a dot.

    Examples:
        file_extension("archive.tar.gz")  # Returns ".gz"
        file_extension(".bashrc")         # Returns ""
    """
    if is_dir:
        return ""
    base = os.path.basename(os.fspath(name))
    if base.count(".") == 1 and base.startswith("."):
        return ""
    dot = base.rfind(".")
    if dot < 0:
        return ""
    return base[dot:]
