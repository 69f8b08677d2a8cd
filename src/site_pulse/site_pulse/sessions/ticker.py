from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from ..core.constants import STATUS_REFRESH_SECONDS
from .model import SessionStatus

logger = logging.getLogger(__name__)

StatusMap = dict[str, SessionStatus]
ComputeCallback = Callable[[], StatusMap]
UpdateCallback = Callable[[StatusMap], None]
ErrorCallback = Callable[[Exception], None]


class StatusTicker:
    """Recompute session status on a fixed interval until stopped.

    ``compute`` is a zero-argument callable (usually a bound
    ``HourlyReportService.status_for`` with user/date filled in). ``refresh``
    recomputes immediately, e.g. after a successful submission.
    """

    def __init__(
        self,
        compute: ComputeCallback,
        *,
        on_update: UpdateCallback | None = None,
        on_error: ErrorCallback | None = None,
        interval_seconds: float = STATUS_REFRESH_SECONDS,
    ):
        self._compute = compute
        self._on_update = on_update
        self._on_error = on_error
        self._interval_seconds = max(1.0, float(interval_seconds))
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._latest: Optional[StatusMap] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def latest(self) -> Optional[StatusMap]:
        return self._latest

    def start(self) -> bool:
        with self._lock:
            if self.is_running:
                return False
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._run_loop,
                name="site-pulse-status-ticker",
                daemon=True,
            )
            self._thread.start()
        logger.info("Status ticker started (every %.0fs)", self._interval_seconds)
        return True

    def stop(self, timeout_seconds: float = 5.0) -> None:
        with self._lock:
            thread = self._thread
            if thread is None:
                return
            self._stop_event.set()

        thread.join(timeout=timeout_seconds)

        with self._lock:
            if self._thread is thread:
                self._thread = None
        logger.info("Status ticker stopped")

    def refresh(self) -> StatusMap:
        status = self._compute()
        self._latest = status
        if self._on_update:
            self._on_update(status)
        return status

    def _run_loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.refresh()
            except Exception as exc:
                logger.exception("Status refresh failed")
                if self._on_error:
                    self._on_error(exc)
            self._stop_event.wait(self._interval_seconds)
