import asyncio
import logging

from django.conf import settings

logger = logging.getLogger(__name__)


class LivenessSweeper:
    """
    Runs ``registry.sweep()`` every ``WEBSOCKET_SWEEP_INTERVAL`` seconds on
    the event loop that serves the sockets, for the lifetime of the process.

    The task is started lazily by the first connection, since the loop does
    not exist while Django is being set up.
    """

    def __init__(self, registry, interval=None):
        self.registry = registry
        self.interval = interval
        self._task = None

    @property
    def enabled(self):
        return getattr(settings, 'WEBSOCKET_LIVENESS_SWEEP', True)

    def get_interval(self):
        return self.interval or settings.WEBSOCKET_SWEEP_INTERVAL

    @property
    def is_running(self):
        return self._task is not None and not self._task.done()

    def ensure_running(self):
        if not self.enabled:
            return None

        loop = asyncio.get_running_loop()
        if self.is_running and self._task.get_loop() is loop:
            return self._task

        self._task = loop.create_task(self._run())
        logger.info(f"Liveness sweep started, every {self.get_interval()}s")
        return self._task

    def stop(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self):
        interval = self.get_interval()
        while True:
            await asyncio.sleep(interval)
            try:
                await self.registry.sweep()
            except Exception:
                logger.error("Liveness sweep failed", exc_info=True)
