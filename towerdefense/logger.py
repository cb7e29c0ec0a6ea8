"""A file logger that writes queued messages from a background thread."""

from __future__ import annotations

import queue
import threading
from datetime import datetime
from os import PathLike


def current_timestamp() -> str:
    """Local time as 'YYYY-MM-DD HH:MM:SS'."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class Logger:
    """Writes timestamped lines to a file, truncating it on open."""

    def __init__(self, path: str | PathLike[str] = "log.txt", interval: float = 1.0) -> None:
        self._file = open(path, "w", encoding="utf-8")
        self._interval = interval
        self._queue: queue.SimpleQueue[str] = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._closed = False
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _drain(self) -> None:
        with self._lock:
            if self._file.closed:
                return
            while True:
                try:
                    line = self._queue.get_nowait()
                except queue.Empty:
                    break
                self._file.write(line + "\n")
            self._file.flush()

    def _run(self) -> None:
        while True:
            self._drain()
            if self._stop.is_set():
                break
            self._stop.wait(self._interval)

    def log(self, message: str) -> None:
        """Queue a message, prefixed with the current timestamp."""
        if self._closed:
            raise ValueError("log on a closed logger")
        self._queue.put(f"{current_timestamp()} {message}")

    def flush(self) -> None:
        """Write every queued message now."""
        self._drain()

    def close(self) -> None:
        """Write what is left, stop the writer thread and close the file."""
        if self._closed:
            return
        self._closed = True
        self._stop.set()
        self._thread.join()
        self._drain()
        with self._lock:
            self._file.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()