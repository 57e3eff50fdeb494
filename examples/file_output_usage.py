"""examples/file_output_usage.py - Per-level, per-day log files.

Lines written with the ``*_to_file`` methods land in
``<base_dir>/<log_dir_name>/<level>/<YYYYMMDD>.log``.

Run:
    python examples/file_output_usage.py
"""

import os
import tempfile

from logify import Logger

BASE_DIR = os.path.join(tempfile.gettempdir(), "logify_demo")

log = Logger(level="info", context="import", base_dir=BASE_DIR, log_dir_name="logs")


if __name__ == "__main__":
    log.debug_to_file("below the gate, not written")
    log.info_to_file("import started")
    log.warn_to_file("row 17 skipped: missing id")
    log.error_to_file("import aborted")

    for level in ("debug", "info", "warn", "error"):
        path = log.file_path(level)
        if os.path.exists(path):
            print(f"--- {path} ---")
            with open(path, encoding="utf-8") as f:
                print(f.read(), end="")
        else:
            print(f"--- {path} (not created) ---")
