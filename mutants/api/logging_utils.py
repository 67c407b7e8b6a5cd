from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

DEFAULT_LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO", fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Install a basic root handler unless the host already configured logging."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric_level, format=fmt)
    else:
        root.setLevel(numeric_level)


class StartupLogBufferHandler(logging.Handler):
    """Keep the first ``capacity`` log lines of a run and write them to one file.

    The buffer is written when it fills up, when ``flush`` is called, or when
    the handler is closed. Nothing is recorded after the first write.
    """

    def __init__(self, output_dir: Path, capacity: int = 500) -> None:
        super().__init__()
        self._output_dir = output_dir
        self._capacity = max(1, capacity)
        self._buffer: list[str] = []
        self._lock = threading.Lock()
        self._written = False
        self._file_path: Optional[Path] = None

    @property
    def file_path(self) -> Optional[Path]:
        with self._lock:
            return self._file_path

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return
        with self._lock:
            if self._written:
                return
            self._buffer.append(message)
            if len(self._buffer) >= self._capacity:
                self._write_locked()

    def flush(self) -> None:
        with self._lock:
            self._write_locked()

    def close(self) -> None:
        try:
            self.flush()
        finally:
            super().close()

    def _write_locked(self) -> None:
        if self._written or not self._buffer:
            return
        self._written = True
        self._output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        self._file_path = self._output_dir / f"startup_{timestamp}.log"
        self._file_path.write_text("\n".join(self._buffer) + "\n", encoding="utf-8")
        self._buffer.clear()


def install_startup_log_buffer(
    output_dir: Path,
    capacity: int = 500,
    formatter: logging.Formatter | None = None,
) -> StartupLogBufferHandler:
    handler = StartupLogBufferHandler(output_dir=output_dir, capacity=capacity)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        formatter
        or logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    logging.getLogger().addHandler(handler)
    logging.getLogger(__name__).info(
        "Startup log buffering enabled; keeping the first %d lines in %s",
        capacity,
        output_dir,
    )
    return handler


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "StartupLogBufferHandler",
    "configure_logging",
    "install_startup_log_buffer",
]
