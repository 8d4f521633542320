"""Background HTTP POST with streamed output and cancellation."""

from __future__ import annotations

import http.client
import socket
import threading
from typing import Callable, Mapping
from urllib.parse import urlsplit

_CHUNK_SIZE = 64 * 1024


def _ignore(*_args: object) -> None:
    return None


class _Job:
    def __init__(self, connection: http.client.HTTPConnection) -> None:
        self.connection = connection
        self.cancelled = threading.Event()
        self.superseded = False
        self.thread: threading.Thread | None = None

    def abort(self) -> None:
        self.cancelled.set()
        sock = self.connection.sock
        if sock is not None:
            try:
                sock.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass


class NetworkWorker:
    """Sends one POST at a time on a background thread.

    Callbacks run on that thread: ``on_data`` for each chunk of the reply,
    ``on_error`` with a message when the request fails, and ``on_finished``
    once the request is over, whether it succeeded, failed or was cancelled.
    """

    def __init__(
        self,
        on_data: Callable[[bytes], None] = _ignore,
        on_finished: Callable[[], None] = _ignore,
        on_error: Callable[[str], None] = _ignore,
        timeout: float | None = None,
    ) -> None:
        self.on_data = on_data
        self.on_finished = on_finished
        self.on_error = on_error
        self.timeout = timeout
        self._lock = threading.Lock()
        self._job: _Job | None = None
        self._jobs: list[_Job] = []

    def process_request(
        self, url: str, data: bytes, headers: Mapping[str, str] | None = None
    ) -> None:
        """Start posting ``data`` to ``url``; any earlier request is dropped."""
        parts = urlsplit(url)
        if parts.scheme == "http":
            connection_class = http.client.HTTPConnection
        elif parts.scheme == "https":
            connection_class = http.client.HTTPSConnection
        else:
            raise ValueError(f'Protocol "{parts.scheme}" is unknown')
        if not parts.hostname:
            raise ValueError(f"No host in URL {url!r}")
        path = parts.path or "/"
        if parts.query:
            path = f"{path}?{parts.query}"

        connection = connection_class(parts.hostname, parts.port, timeout=self.timeout)
        job = _Job(connection)
        with self._lock:
            previous = self._job
            if previous is not None:
                previous.superseded = True
                previous.abort()
            self._job = job
            self._jobs = [j for j in self._jobs if j.thread and j.thread.is_alive()]
            self._jobs.append(job)
        job.thread = threading.Thread(
            target=self._run,
            args=(job, url, path, bytes(data), dict(headers or {})),
            daemon=True,
        )
        job.thread.start()

    def cancel_request(self) -> None:
        """Abort the current request; it then finishes without an error."""
        with self._lock:
            job = self._job
        if job is not None:
            job.abort()

    def close(self) -> None:
        """Abort any request and wait for its thread to end."""
        with self._lock:
            job = self._job
            jobs = list(self._jobs)
        if job is not None:
            job.abort()
        for each in jobs:
            if each.thread is not None:
                each.thread.join()

    def __enter__(self) -> NetworkWorker:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def _emit(self, job: _Job, callback: Callable[..., None], *args: object) -> None:
        if not job.superseded:
            callback(*args)

    def _run(
        self, job: _Job, url: str, path: str, data: bytes, headers: dict[str, str]
    ) -> None:
        connection = job.connection
        try:
            connection.request("POST", path, body=data, headers=headers)
            response = connection.getresponse()
            while not job.cancelled.is_set():
                chunk = response.read1(_CHUNK_SIZE)
                if not chunk:
                    break
                self._emit(job, self.on_data, chunk)
            if not job.cancelled.is_set() and response.status >= 400:
                self._emit(
                    job,
                    self.on_error,
                    f"Error transferring {url} - server replied: {response.reason}",
                )
        except (OSError, http.client.HTTPException) as exc:
            if not job.cancelled.is_set():
                self._emit(job, self.on_error, str(exc) or exc.__class__.__name__)
        finally:
            connection.close()
        self._emit(job, self.on_finished)