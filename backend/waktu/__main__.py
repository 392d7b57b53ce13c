"""Waktu CLI entry point: `python -m waktu`."""

from waktu.main import run

if __name__ == "__main__":
    run()
