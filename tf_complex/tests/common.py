import contextlib
import os
import tempfile


@contextlib.contextmanager
def write_temp_file(s, suffix=".yml"):
    fd, a = tempfile.mkstemp(suffix=suffix)
    with os.fdopen(fd, "w") as f:
        f.write(s)
    try:
        yield a
    finally:
        os.remove(a)
