#!/usr/bin/env python3
"""
Dev mode runner for wordfinder

Watches the package for changes and re-runs a search on every save.

Usage:
  ./dev.py cat notes.txt todo.txt
"""
import subprocess
import sys
import time
from pathlib import Path
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler


class SearchRerunHandler(FileSystemEventHandler):
    """Re-runs wordfinder on Python file changes."""

    def __init__(self, args: list[str]):
        self.args = args
        self.run_search()

    def run_search(self):
        """Run one search and show its output and exit status."""
        print(f"$ wordfinder {' '.join(self.args)}")
        result = subprocess.run(
            [sys.executable, "-m", "wordfinder", "-v", *self.args],
            text=True
        )
        print(f"[exit {result.returncode}] watching for changes...")

    def on_modified(self, event):
        """Handle file modification events."""
        if event.src_path.endswith('.py'):
            print(f"\n{event.src_path} changed - re-running...")
            time.sleep(0.1)  # Debounce
            self.run_search()


def main():
    """Run searches on every change until interrupted."""
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        return 1

    print("wordfinder dev mode")
    print("Ctrl+C to stop\n")

    # Set up file watcher
    handler = SearchRerunHandler(args)
    observer = Observer()
    observer.schedule(handler, str(Path(__file__).parent / "wordfinder"), recursive=True)
    observer.start()

    try:
        while True:
            time.sleep(0.5)
    except KeyboardInterrupt:
        print("\nStopping dev mode...")
        observer.stop()

    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
