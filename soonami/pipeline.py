"""Pipeline - Wires Functional Core and Imperative Shell.

Runs the fetch -> parse -> present flow once, and provides a single
background task that does so off the caller's thread and hands the
result to a display surface.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable
from datetime import timezone, tzinfo

from soonami.core.config import Config, resolve_timezone
from soonami.core.event import parse_event
from soonami.core.formatter import DisplayText, present
from soonami.shell.display import Display
from soonami.shell.usgs_client import USGSClient, USGS_REQUEST_URL


logger = logging.getLogger(__name__)


# Task states
IDLE = "idle"
FETCHING = "fetching"
PARSED = "parsed"
DISPLAYED = "displayed"


class Pipeline:
    """Coordinates one fetch, parse and present cycle.

    Stages never raise across their boundaries: an empty body or a
    missing event collapses the rest of the pipeline to "no update".
    """

    def __init__(
        self,
        config: Config | None = None,
        usgs_client: USGSClient | None = None,
        url: str = USGS_REQUEST_URL,
    ) -> None:
        """Initialize pipeline.

        Args:
            config: Application configuration (defaults if None)
            usgs_client: USGS client (created from config if not provided)
            url: Feed URL to fetch
        """
        self.config = config or Config()
        self.usgs_client = usgs_client or USGSClient(
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
        )
        self.url = url
        self.state = IDLE

    def _timezone(self) -> tzinfo:
        tz = resolve_timezone(self.config.display_timezone)
        if tz is None:
            logger.warning(
                "Unknown time zone %s, using UTC", self.config.display_timezone
            )
            return timezone.utc
        return tz

    def run(self) -> DisplayText | None:
        """Run the pipeline once.

        Returns:
            DisplayText, or None if no event was available
        """
        self.state = FETCHING
        body = self.usgs_client.fetch(self.url)

        event = parse_event(body)
        if event is None:
            logger.info("No earthquake available, skipping display update")
            self.state = IDLE
            return None

        self.state = PARSED
        return present(event, self.config.labels, self._timezone())

    def update(self, display: Display) -> bool:
        """Run the pipeline and show the result on a display.

        Returns:
            True if the display was updated
        """
        text = self.run()
        if text is None:
            return False

        display.show(text)
        self.state = DISPLAYED
        return True


class EarthquakeTask:
    """Fire-once background task that updates a display.

    The pipeline runs on a single worker thread. On completion the
    result is dispatched to the display exactly once, unless the task
    was cancelled first, in which case the result is dropped.

    A host with its own UI thread passes a dispatcher that schedules a
    zero-argument callable there (e.g. by wrapping Kivy's
    Clock.schedule_once); by default the display is updated directly
    on the worker thread.
    """

    def __init__(
        self,
        pipeline: Pipeline,
        display: Display,
        dispatcher: Callable[[Callable[[], None]], None] | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.display = display
        self.dispatcher = dispatcher
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="soonami"
        )
        self._cancelled = threading.Event()
        self._done = threading.Event()
        self._future: Future | None = None
        self.updated = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def start(self) -> Future:
        """Start the background fetch.

        Raises:
            RuntimeError: If the task was already started
        """
        if self._future is not None:
            raise RuntimeError("EarthquakeTask can only be started once")

        logger.info("Starting earthquake task")
        self._future = self._executor.submit(self.pipeline.run)
        self._future.add_done_callback(self._on_complete)
        self._executor.shutdown(wait=False)
        return self._future

    def cancel(self) -> None:
        """Drop the result if it has not been displayed yet."""
        self._cancelled.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the task completes.

        Returns:
            True if the display was updated
        """
        if self._future is None:
            return False
        self._done.wait(timeout)
        return self.updated

    def _on_complete(self, future: Future) -> None:
        text = None
        try:
            text = self._result(future)
        finally:
            if text is None:
                self._done.set()

        if text is None:
            return
        if self.dispatcher is None:
            self._show(text)
        else:
            self.dispatcher(lambda: self._show(text))

    def _result(self, future: Future) -> DisplayText | None:
        if self.cancelled:
            logger.info("Earthquake task cancelled, dropping result")
            return None

        error = future.exception()
        if error is not None:
            logger.error("Earthquake task failed", exc_info=error)
            return None

        return future.result()

    def _show(self, text: DisplayText) -> None:
        try:
            # cancel may land between completion and a deferred dispatch
            if self.cancelled:
                logger.info("Earthquake task cancelled, dropping result")
                return
            self.display.show(text)
            self.pipeline.state = DISPLAYED
            self.updated = True
        finally:
            self._done.set()
