# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Interactive editing of a json patch.

The patch is applied to its input document, the result is opened in a
text editor, and the patch is recomputed from the edited result. In
watch mode the patch is recomputed every time the editor saves, until
the loop is interrupted.
"""

from contextlib import contextmanager
import os
import shlex
import shutil
import signal
import subprocess
import sys
import tempfile
import threading

from . import log
from .diffing import diff
from .errors import ApplyError, EditorError, IoError, JSONPatchError, ParseError
from .patch_format import parse_patch, serialize_patch
from .patching import patch
from .prettyprint import PrettyPrintConfig, pretty_print_patch_change
from .utils import read_document, read_text, write_atomic, write_document
from .watching import FileWatcher


DEFAULT_EDITOR = 'vim'

SCRATCH_BASENAME = 'patched.json'


class EditState:
    "States of the edit loop."
    IDLE = "idle"
    APPLYING = "applying"
    EDITOR_RUNNING = "editor-running"
    DIFFING = "diffing"
    WRITING = "writing"
    WATCH_WAITING = "watch-waiting"
    FAILED = "failed"


class ApplyErrorPolicy:
    "What the edit loop does when the existing patch cannot be applied."
    EDIT_BASE = "edit-base"
    FAIL = "fail"


def resolve_editor(editor=None):
    """Return the editor command as an argument list.

    Falls back to $VISUAL, then $EDITOR, then vim.
    """
    if not editor:
        editor = os.environ.get('VISUAL') or os.environ.get('EDITOR') or DEFAULT_EDITOR
    if isinstance(editor, str):
        editor = shlex.split(editor, posix=os.name != 'nt')
    return list(editor)


def run_editor(command, filename, wait=True):
    """Open filename in the editor.

    With wait, block until the editor exits and raise EditorError if it
    fails. Otherwise return the running process.
    """
    cmd = list(command) + [filename]
    log.debug("Running editor: %r", cmd)
    try:
        proc = subprocess.Popen(cmd)
    except OSError as e:
        raise EditorError("Could not start editor", command=cmd) from e
    if wait:
        returncode = proc.wait()
        if returncode != 0:
            raise EditorError("Editor exited with an error", command=cmd, returncode=returncode)
    return proc


class EditLoop(object):
    """Apply, edit, diff and write back a patch file.

    Parameters
    ----------

    input_filename: str
        The json document the patch applies to
    patch_filename: str
        The patch file, created if it does not exist
    editor: str or list
        The editor command, see resolve_editor
    watch: bool
        Keep recomputing the patch on every save of the edited document
    on_apply_error: str
        ApplyErrorPolicy for an existing patch that fails to parse or apply
    debounce: float
        Seconds within which saves are coalesced in watch mode
    pretty_config: PrettyPrintConfig
        Where and how changes to the patch file are printed
    """

    def __init__(self, input_filename, patch_filename, editor=None, watch=False,
                 on_apply_error=ApplyErrorPolicy.EDIT_BASE, debounce=0.2,
                 pretty_config=None, watcher_factory=FileWatcher, poll_interval=0.1):
        if on_apply_error not in (ApplyErrorPolicy.EDIT_BASE, ApplyErrorPolicy.FAIL):
            raise ValueError("Invalid apply error policy: %r" % (on_apply_error,))
        self.input_filename = input_filename
        self.patch_filename = patch_filename
        self.editor_command = resolve_editor(editor)
        self.watch = watch
        self.on_apply_error = on_apply_error
        self.debounce = debounce
        if pretty_config is None:
            pretty_config = PrettyPrintConfig(out=sys.stdout)
        self.pretty_config = pretty_config
        self.watcher_factory = watcher_factory
        self.poll_interval = poll_interval

        self.state = EditState.IDLE
        self.error = None
        self.apply_error = None
        self.base = None
        self.patch_text = ""
        self.scratch_dir = None
        self.scratch_filename = None
        self.editor_process = None
        self.writes = 0
        self._editor_exit_reported = False
        self._stop = threading.Event()

    def _enter(self, state):
        log.debug("Edit loop: %s -> %s", self.state, state)
        self.state = state

    def request_stop(self):
        """Ask a watching loop to stop.

        The loop finishes the cycle in progress and stops before waiting
        for the next change.
        """
        self._stop.set()

    def run(self):
        """Run the loop until it is done, returning the final state.

        Errors that end the loop are re-raised after entering FAILED.
        No patch is written in that case.
        """
        try:
            self._run()
        except JSONPatchError as e:
            self.error = e
            self._enter(EditState.FAILED)
            raise
        finally:
            self._cleanup()
        return self.state

    def _run(self):
        self._enter(EditState.APPLYING)
        applied = self.apply()

        self._enter(EditState.EDITOR_RUNNING)
        self.scratch_dir = tempfile.mkdtemp(prefix='json-patch-')
        self.scratch_filename = os.path.join(self.scratch_dir, SCRATCH_BASENAME)
        write_document(self.scratch_filename, applied)

        if not self.watch:
            run_editor(self.editor_command, self.scratch_filename, wait=True)
            self._enter(EditState.DIFFING)
            new_patch = self.diff_scratch()
            self._enter(EditState.WRITING)
            self.write_patch(new_patch)
            self._enter(EditState.IDLE)
            return

        watcher = self.watcher_factory(self.scratch_filename, debounce=self.debounce)
        try:
            watcher.start()
        except OSError as e:
            raise IoError("Could not watch file", self.scratch_filename) from e
        try:
            self.editor_process = run_editor(
                self.editor_command, self.scratch_filename, wait=False)
            with self._interrupt_handler():
                self._watch(watcher)
        finally:
            watcher.stop()
            self._release_editor()
        self._enter(EditState.IDLE)

    def apply(self):
        """Read the input and the patch, and return the document to edit.

        Depending on on_apply_error, a broken patch either ends the loop
        or is reported and the unpatched input is edited instead.
        """
        self.base = read_document(self.input_filename)
        if os.path.exists(self.patch_filename):
            self.patch_text = read_text(self.patch_filename, "patch file")
        try:
            if self.patch_text.strip():
                entries = parse_patch(self.patch_text, source=self.patch_filename)
            else:
                entries = []
            return patch(self.base, entries)
        except (ParseError, ApplyError) as e:
            if self.on_apply_error == ApplyErrorPolicy.FAIL:
                raise
            self.apply_error = e
            log.error("Patch %s could not be applied: %s", self.patch_filename, e)
            log.warning("Editing the unpatched document %s instead", self.input_filename)
            return self.base

    def diff_scratch(self):
        "Reload the edited document and diff it against the input."
        edited = read_document(self.scratch_filename)
        return diff(self.base, edited)

    def write_patch(self, new_patch):
        text = serialize_patch(new_patch)
        pretty_print_patch_change(self.patch_text, text, self.pretty_config)
        write_atomic(self.patch_filename, text)
        self.patch_text = text
        self.writes += 1
        log.info("Wrote %d patch operations to %s", len(new_patch), self.patch_filename)

    def _watch(self, watcher):
        self._enter(EditState.WATCH_WAITING)
        while self._wait_for_change(watcher):
            self._enter(EditState.DIFFING)
            try:
                new_patch = self.diff_scratch()
            except ParseError as e:
                log.warning("Not updating patch, edited document is invalid: %s", e)
            else:
                self._enter(EditState.WRITING)
                self.write_patch(new_patch)
            self._enter(EditState.WATCH_WAITING)

    def _wait_for_change(self, watcher):
        "Block until the scratch file changed, or return False when asked to stop."
        while not self._stop.is_set():
            events = watcher.wait(timeout=self.poll_interval)
            self._check_editor()
            if events:
                return True
        log.info("Stopped watching %s", self.scratch_filename)
        return False

    def _check_editor(self):
        proc = self.editor_process
        if proc is None or self._editor_exit_reported:
            return
        returncode = proc.poll()
        if returncode is not None:
            self._editor_exit_reported = True
            log.info("Editor exited with code %d, still watching %s (interrupt to stop)",
                     returncode, self.scratch_filename)

    def _release_editor(self):
        "Reap an editor that has exited, and report one that is still open."
        proc = self.editor_process
        if proc is None or proc.poll() is not None:
            return
        log.warning("Editor (pid %d) is still running, further changes to %s are not recorded",
                    proc.pid, self.scratch_filename)

    @contextmanager
    def _interrupt_handler(self):
        # Signal handlers can only be installed from the main thread
        if threading.current_thread() is not threading.main_thread():
            yield
            return

        def handler(signum, frame):
            log.info("Interrupted, stopping after the current cycle")
            self.request_stop()

        previous = signal.signal(signal.SIGINT, handler)
        try:
            yield
        finally:
            signal.signal(signal.SIGINT, previous)

    def _cleanup(self):
        if self.scratch_dir is not None:
            shutil.rmtree(self.scratch_dir, ignore_errors=True)
            self.scratch_dir = None


def edit_patch(input_filename, patch_filename, **kwargs):
    """Interactively edit the patch file for input_filename.

    See EditLoop for the keyword arguments.
    """
    return EditLoop(input_filename, patch_filename, **kwargs).run()
