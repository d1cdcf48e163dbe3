import threading


class Debouncer:
    """Run ``func`` once ``wait`` seconds after the last call; earlier calls are dropped."""

    def __init__(self, func, wait: float = 0.3):
        self.func = func
        self.wait = wait
        self._timer = None
        self._pending = None
        self._lock = threading.Lock()

    def __call__(self, *args, **kwargs) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = (args, kwargs)
            self._timer = threading.Timer(self.wait, self._fire)
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def _take(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            pending, self._pending = self._pending, None
        return pending

    def _fire(self) -> None:
        pending = self._take()
        if pending is not None:
            args, kwargs = pending
            self.func(*args, **kwargs)

    def flush(self) -> None:
        """Run the pending call now, if any."""
        self._fire()

    def cancel(self) -> None:
        self._take()
