"""
Line-oriented file helpers shared by the CSV writers.

Both helpers either leave a complete write on disk or raise OSError:
atomic_write_text renames a fully written temporary sibling into place,
append_text issues a single write and fsyncs it.
"""

import os
import stat
import tempfile

ENCODING = "utf-8"


def _target_mode(path: str) -> int:
    """Mode of the file being replaced, or what open(path, "w") would give a new one."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(path: str, text: str) -> None:
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".csv")
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, newline="") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        # mkstemp creates 0600 files
        os.chmod(tmp_path, _target_mode(path))
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def append_text(path: str, text: str) -> None:
    with open(path, "a", encoding=ENCODING, newline="") as fh:
        fh.write(text)
        fh.flush()
        os.fsync(fh.fileno())
