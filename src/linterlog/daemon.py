"""
linterlog - File watch daemon.

Re-lints Python files as they are saved, most recent first.

Usage:
    linterlog --watch
    linterlog --watch src/ --interval 1.0
"""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Dict, Optional, Tuple

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .config import LintConfig, should_exclude_path
from .runner import lint_file

logger = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 2.0


class RecentQueue:
    """Thread-safe queue of modified files, popped most recent first."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: Dict[str, float] = {}  # path -> last_ts

    def push(self, path: Path, ts: float) -> None:
        p = str(path)
        with self._lock:
            prev = self._items.get(p)
            if prev is None or ts > prev:
                self._items[p] = ts

    def pop_most_recent(self) -> Optional[Tuple[Path, float]]:
        with self._lock:
            if not self._items:
                return None
            p, ts = max(self._items.items(), key=lambda kv: kv[1])
            del self._items[p]
            return Path(p), ts

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class PyChangeHandler(FileSystemEventHandler):
    """
    Queues Python files that were created or modified.

    A file under a watched directory is queued unless its path relative to
    that directory hits an excluded dir, the same test the scanner applies.
    Files named explicitly on the command line are queued on their own;
    their siblings are not.
    """

    def __init__(self, cfg: LintConfig, queue: RecentQueue) -> None:
        super().__init__()
        self.cfg = cfg
        self.queue = queue
        self.dirs = [p.resolve() for p in cfg.paths if p.is_dir()]
        self.files = {p.resolve() for p in cfg.paths if p.is_file()}

    def accepts(self, path: Path) -> bool:
        if path.suffix not in self.cfg.python_exts:
            return False
        path = path.resolve()
        if path in self.files:
            return True
        for root in self.dirs:
            try:
                rel = path.relative_to(root)
            except ValueError:
                continue
            return not should_exclude_path(self.cfg, rel)
        return False

    def on_modified(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        p = Path(str(event.src_path))
        if self.accepts(p):
            self.queue.push(p, time.time())

    def on_created(self, event: FileSystemEvent) -> None:
        self.on_modified(event)


def _watch_roots(cfg: LintConfig) -> list[Path]:
    roots: list[Path] = []
    for p in cfg.paths:
        root = (p if p.is_dir() else p.parent).resolve()
        if root not in roots:
            roots.append(root)
    return roots


def run_daemon(
    cfg: LintConfig,
    interval: float = 0.75,
    debounce_seconds: float = DEBOUNCE_SECONDS,
    queue: Optional[RecentQueue] = None,
) -> int:
    """
    Run the watch loop until interrupted.

    A change seen within debounce_seconds of the file's last lint is put back
    on the queue and linted once the window has passed. A change older than
    the last lint was already covered by it and is dropped.
    """
    queue = queue if queue is not None else RecentQueue()
    handler = PyChangeHandler(cfg, queue)

    observer = Observer()
    roots = _watch_roots(cfg)
    for root in roots:
        observer.schedule(handler, str(root), recursive=True)
    observer.start()

    print(f"[linterlog] watching {', '.join(str(r) for r in roots)}")
    logger.debug("interval=%ss debounce=%ss", interval, debounce_seconds)

    last_linted: Dict[str, float] = {}

    try:
        while True:
            item = queue.pop_most_recent()
            if item is None:
                time.sleep(interval)
                continue

            path, ts = item
            now = time.time()
            p = str(path)

            prev = last_linted.get(p)
            if prev is not None:
                if ts <= prev:
                    continue
                if (now - prev) < debounce_seconds:
                    queue.push(path, ts)
                    time.sleep(interval)
                    continue
            last_linted[p] = now

            findings = lint_file(path, cfg.rules)
            if findings:
                print(f"\n[linterlog] {path} (queue={len(queue)})")
                for f in findings:
                    print(f)

            time.sleep(interval)

    except KeyboardInterrupt:
        print("\n[linterlog] stopping...")
    finally:
        observer.stop()
        observer.join()

    return 0
