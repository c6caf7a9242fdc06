# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Observation of the scratch file in watch mode.

A watchdog observer thread pushes the events concerning a single file
into a queue. The consumer blocks on `wait`, which collapses a burst of
events into one notification.
"""

import os
import queue
import time

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from . import log


class FileChangeHandler(FileSystemEventHandler):
    """Forwards the events concerning one file to a queue."""

    def __init__(self, filename, channel):
        super(FileChangeHandler, self).__init__()
        self.filename = os.path.abspath(filename)
        self.channel = channel

    def _concerns_file(self, event):
        if event.is_directory:
            return False
        paths = [event.src_path, getattr(event, 'dest_path', None)]
        return any(p and os.path.abspath(os.fsdecode(p)) == self.filename for p in paths)

    def on_any_event(self, event):
        if event.event_type not in ('modified', 'created', 'moved', 'deleted', 'closed'):
            return
        if self._concerns_file(event):
            log.debug("Observed %s event on %s", event.event_type, self.filename)
            self.channel.put(event)


class FileWatcher(object):
    """Watches a single file for modifications.

    Editors often save by writing a new file and renaming it over the
    old one, so the parent directory is observed and events are
    filtered by path.
    """

    def __init__(self, filename, debounce=0.2, observer_factory=Observer):
        self.filename = os.path.abspath(filename)
        self.debounce = debounce
        self.channel = queue.Queue()
        self._observer_factory = observer_factory
        self._observer = None

    def start(self):
        handler = FileChangeHandler(self.filename, self.channel)
        self._observer = self._observer_factory()
        self._observer.schedule(handler, os.path.dirname(self.filename), recursive=False)
        self._observer.start()
        log.debug("Watching %s for changes", self.filename)

    def stop(self):
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()

    def wait(self, timeout=None):
        """Block until the file changed.

        Returns the list of events of the coalesced burst, or an empty
        list if timeout expired first. Events arriving less than
        `debounce` seconds apart belong to the same burst.
        """
        try:
            first = self.channel.get(timeout=timeout)
        except queue.Empty:
            return []
        events = [first]
        deadline = time.monotonic() + self.debounce
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            try:
                events.append(self.channel.get(timeout=remaining))
            except queue.Empty:
                break
            deadline = time.monotonic() + self.debounce
        log.debug("Coalesced %d file events", len(events))
        return events
