"""
polling.py - 定期リフレッシュ
Bug Tracker v1.0

ダッシュボードはストレージを一定間隔で読み直して「ライブ更新」を模倣する。
プッシュ通知ではなくポーリング。ビューを閉じたら stop() で必ず止める。
"""
import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class PollingRefresher:
    def __init__(self, interval: float, callback: Callable[[], None], name: str = "refresh"):
        self.interval = interval
        self.callback = callback
        self.name = name
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name=self.name, daemon=True)
        self._thread.start()
        logger.debug("%s started (every %ss)", self.name, self.interval)

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        thread = self._thread
        if thread and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None
        logger.debug("%s stopped", self.name)

    def _loop(self) -> None:
        # wait() は stop() で即座に True を返す
        while not self._stop.wait(self.interval):
            try:
                self.callback()
            except Exception:
                logger.warning("%s: refresh failed", self.name, exc_info=True)
