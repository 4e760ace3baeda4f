"""Cursor-based iteration commands."""

from __future__ import annotations

from typing import Any

from rediskit.command import Command, CommandBase, Reply


def _scan_options(match: str, count: int) -> list[Any]:
    args: list[Any] = []
    if match:
        args += ["match", match]
    if count > 0:
        args += ["count", count]
    return args


class ScanCommands(CommandBase):
    """SCAN and its per-type variants."""

    def scan(self, cursor: int, match: str, count: int) -> Command:
        return self._call(Reply.SCAN, "scan", cursor, *_scan_options(match, count))

    def scan_type(self, cursor: int, match: str, count: int, key_type: str) -> Command:
        """SCAN restricted to keys of one type."""
        args: list[Any] = ["scan", cursor, *_scan_options(match, count)]
        if key_type:
            args += ["type", key_type]
        return self._call(Reply.SCAN, *args)

    def sscan(self, key: str, cursor: int, match: str, count: int) -> Command:
        return self._call(Reply.SCAN, "sscan", key, cursor, *_scan_options(match, count))

    def hscan(self, key: str, cursor: int, match: str, count: int) -> Command:
        return self._call(Reply.SCAN, "hscan", key, cursor, *_scan_options(match, count))

    def zscan(self, key: str, cursor: int, match: str, count: int) -> Command:
        return self._call(Reply.SCAN, "zscan", key, cursor, *_scan_options(match, count))