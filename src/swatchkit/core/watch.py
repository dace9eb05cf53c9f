"""
Watch mode.

Rebuilds the site when pattern, token, layout or CSS sources change.

Everything runs on one thread:

- ``ChangeDetector`` diffs mtime snapshots of the watched roots to produce
  change events (new, modified and deleted files). Generated paths (the
  output directory, the token pages directory, generated CSS) are ignored
  so a build never triggers itself.
- ``RebuildScheduler`` debounces those events. It is a small state machine
  (idle -> scheduled -> building) driven by an injectable clock, so the
  coalescing and at-most-one-build guarantees can be tested without
  sleeping.
- The output directory is polled separately; if something deletes it while
  no build is running, a recovery rebuild is scheduled.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable
from enum import StrEnum
from pathlib import Path

from .errors import SwatchKitError
from .settings import BuildSettings

logger = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 0.1
POLL_INTERVAL = 0.25
OUTPUT_POLL_INTERVAL = 1.0


class WatchState(StrEnum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    BUILDING = "building"


class RebuildScheduler:
    """
    Debounced, non-reentrant rebuild scheduling.

    Transitions:
        change event      idle/scheduled -> scheduled (timer restarts)
                          building -> building (marks dirty)
        timer fired       scheduled -> building -> idle, or scheduled if dirty
        output missing    idle -> scheduled
    """

    def __init__(
        self,
        build: Callable[[], object],
        clock: Callable[[], float] = time.monotonic,
        debounce: float = DEBOUNCE_SECONDS,
    ):
        self._build = build
        self._clock = clock
        self.debounce = debounce

        self.state = WatchState.IDLE
        self.deadline: float | None = None
        self.builds = 0
        self._dirty = False

    @property
    def is_building(self) -> bool:
        return self.state is WatchState.BUILDING

    def _schedule(self) -> None:
        self.state = WatchState.SCHEDULED
        self.deadline = self._clock() + self.debounce

    def notify_change(self, path: Path | None = None) -> None:
        """A watched file changed."""
        if path is not None:
            logger.debug("Change detected: %s", path)
        if self.state is WatchState.BUILDING:
            self._dirty = True
            return
        self._schedule()

    def notify_output_missing(self) -> None:
        """The output directory disappeared."""
        if self.state is WatchState.IDLE:
            logger.info("Output directory missing, rebuilding...")
            self._schedule()

    def tick(self) -> bool:
        """Run the pending build if its quiet period has passed.

        Returns True when a build ran.
        """
        if self.state is not WatchState.SCHEDULED or self.deadline is None:
            return False
        if self._clock() < self.deadline:
            return False

        self.state = WatchState.BUILDING
        self.deadline = None
        self._dirty = False
        try:
            self._build()
        except (SwatchKitError, OSError) as e:
            logger.error("Build failed: %s", e)
        except Exception:
            logger.exception("Unexpected error during rebuild")
        finally:
            self.builds += 1
            if self._dirty:
                self._dirty = False
                self._schedule()
            else:
                self.state = WatchState.IDLE
        return True


class ChangeDetector:
    """
    Produces change events by comparing file mtimes between polls.
    """

    def __init__(self, roots: Iterable[Path], ignored: Iterable[Path] = ()):
        self.roots = [Path(root) for root in roots]
        self.ignored = [Path(path).resolve() for path in ignored]
        self._mtimes: dict[Path, float] = self._scan()

    def _is_ignored(self, path: Path, root: Path) -> bool:
        # Dotfiles and dot-directories (editor swap files, .git) never trigger a rebuild
        if path != root and any(part.startswith(".") for part in path.relative_to(root).parts):
            return True
        resolved = path.resolve()
        return any(resolved == ignored or ignored in resolved.parents for ignored in self.ignored)

    def _scan(self) -> dict[Path, float]:
        mtimes: dict[Path, float] = {}
        for root in self.roots:
            if not root.exists():
                continue
            candidates = [root] if root.is_file() else root.rglob("*")
            for path in candidates:
                if self._is_ignored(path, root):
                    continue
                try:
                    if path.is_file():
                        mtimes[path] = path.stat().st_mtime
                except OSError:
                    continue
        return mtimes

    def poll(self) -> list[Path]:
        """Files added, modified or deleted since the last poll."""
        current = self._scan()
        changed = [
            path
            for path, mtime in current.items()
            if path not in self._mtimes or mtime != self._mtimes[path]
        ]
        changed.extend(path for path in self._mtimes if path not in current)
        self._mtimes = current
        return sorted(changed)


def watch_roots(settings: BuildSettings) -> list[Path]:
    """Source locations that trigger a rebuild."""
    return [settings.swatchkit_dir, settings.tokens_dir, settings.css_dir]


def ignored_paths(settings: BuildSettings) -> list[Path]:
    """Generated locations inside the watched roots."""
    return [
        settings.out_dir,
        settings.token_pages_dir,
        *settings.generated_css_files,
    ]


def watch(
    settings: BuildSettings,
    build: Callable[[], object],
    *,
    stop: threading.Event | None = None,
    clock: Callable[[], float] = time.monotonic,
    debounce: float = DEBOUNCE_SECONDS,
    poll_interval: float = POLL_INTERVAL,
    output_poll_interval: float = OUTPUT_POLL_INTERVAL,
) -> RebuildScheduler:
    """Watch sources and rebuild until ``stop`` is set or Ctrl-C.

    The initial build is expected to have run already.
    """
    stop = stop or threading.Event()
    scheduler = RebuildScheduler(build, clock=clock, debounce=debounce)
    detector = ChangeDetector(watch_roots(settings), ignored_paths(settings))

    logger.info("Watch mode enabled. Watching for changes in:")
    for root in detector.roots:
        if root.exists():
            logger.info("  - %s", root)

    next_output_check = clock() + output_poll_interval
    try:
        while not stop.is_set():
            for path in detector.poll():
                scheduler.notify_change(path)

            now = clock()
            if now >= next_output_check:
                next_output_check = now + output_poll_interval
                if not scheduler.is_building and not settings.out_dir.exists():
                    scheduler.notify_output_missing()

            scheduler.tick()

            stop.wait(poll_interval)
    except KeyboardInterrupt:
        logger.info("Stopping watch mode")
    return scheduler
