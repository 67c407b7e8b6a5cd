from __future__ import annotations

import logging

from mutants.api.logging_utils import StartupLogBufferHandler


def _attach(handler: logging.Handler) -> tuple[logging.Logger, int]:
    root = logging.getLogger()
    original_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    return root, original_level


def test_startup_buffer_writes_file_on_flush(tmp_path) -> None:
    handler = StartupLogBufferHandler(output_dir=tmp_path, capacity=10)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
    root, original_level = _attach(handler)
    test_logger = logging.getLogger("mutants.test.startup")
    try:
        test_logger.info("loading records")
        test_logger.warning("store ready")
        handler.flush()
    finally:
        root.removeHandler(handler)
        root.setLevel(original_level)
        handler.close()

    files = list(tmp_path.glob("startup_*.log"))
    assert len(files) == 1
    assert handler.file_path == files[0]
    contents = files[0].read_text(encoding="utf-8")
    assert "INFO:loading records" in contents
    assert "WARNING:store ready" in contents


def test_startup_buffer_stops_after_capacity(tmp_path) -> None:
    handler = StartupLogBufferHandler(output_dir=tmp_path, capacity=2)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root, original_level = _attach(handler)
    test_logger = logging.getLogger("mutants.test.capacity")
    try:
        test_logger.info("first")
        test_logger.info("second")
        test_logger.info("third")
    finally:
        root.removeHandler(handler)
        root.setLevel(original_level)
        handler.close()

    files = list(tmp_path.glob("startup_*.log"))
    assert len(files) == 1
    assert files[0].read_text(encoding="utf-8") == "first\nsecond\n"
