"""List commands."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from rediskit.command import Command, CommandBase, Reply, append_args, format_sec


@dataclass
class LPosArgs:
    """RANK and MAXLEN options of LPOS; zero leaves an option out."""

    rank: int = 0
    max_len: int = 0

    def _args(self) -> list[Any]:
        args: list[Any] = []
        if self.rank != 0:
            args += ["rank", self.rank]
        if self.max_len != 0:
            args += ["maxlen", self.max_len]
        return args


class ListCommands(CommandBase):
    """Commands on list values."""

    def blpop(self, timeout: timedelta, *keys: str) -> Command:
        return self._call(
            Reply.STRING_SLICE, "blpop", *keys, format_sec(timeout), read_timeout=timeout
        )

    def brpop(self, timeout: timedelta, *keys: str) -> Command:
        return self._call(
            Reply.STRING_SLICE, "brpop", *keys, format_sec(timeout), read_timeout=timeout
        )

    def brpoplpush(self, source: str, destination: str, timeout: timedelta) -> Command:
        return self._call(
            Reply.STRING,
            "brpoplpush",
            source,
            destination,
            format_sec(timeout),
            read_timeout=timeout,
        )

    def lindex(self, key: str, index: int) -> Command:
        return self._call(Reply.STRING, "lindex", key, index)

    def linsert(self, key: str, op: str, pivot: Any, value: Any) -> Command:
        return self._call(Reply.INT, "linsert", key, op, pivot, value)

    def linsert_before(self, key: str, pivot: Any, value: Any) -> Command:
        return self._call(Reply.INT, "linsert", key, "before", pivot, value)

    def linsert_after(self, key: str, pivot: Any, value: Any) -> Command:
        return self._call(Reply.INT, "linsert", key, "after", pivot, value)

    def llen(self, key: str) -> Command:
        return self._call(Reply.INT, "llen", key)

    def lpop(self, key: str) -> Command:
        return self._call(Reply.STRING, "lpop", key)

    def lpop_count(self, key: str, count: int) -> Command:
        return self._call(Reply.STRING_SLICE, "lpop", key, count)

    def lpos(self, key: str, value: str, args: LPosArgs) -> Command:
        return self._call(Reply.INT, "lpos", key, value, *args._args())

    def lpos_count(self, key: str, value: str, count: int, args: LPosArgs) -> Command:
        return self._call(
            Reply.INT_SLICE, "lpos", key, value, "count", count, *args._args()
        )

    def lpush(self, key: str, *values: Any) -> Command:
        return self._call(Reply.INT, *append_args(["lpush", key], values))

    def lpushx(self, key: str, *values: Any) -> Command:
        return self._call(Reply.INT, *append_args(["lpushx", key], values))

    def lrange(self, key: str, start: int, stop: int) -> Command:
        return self._call(Reply.STRING_SLICE, "lrange", key, start, stop)

    def lrem(self, key: str, count: int, value: Any) -> Command:
        return self._call(Reply.INT, "lrem", key, count, value)

    def lset(self, key: str, index: int, value: Any) -> Command:
        return self._call(Reply.STATUS, "lset", key, index, value)

    def ltrim(self, key: str, start: int, stop: int) -> Command:
        return self._call(Reply.STATUS, "ltrim", key, start, stop)

    def rpop(self, key: str) -> Command:
        return self._call(Reply.STRING, "rpop", key)

    def rpop_count(self, key: str, count: int) -> Command:
        return self._call(Reply.STRING_SLICE, "rpop", key, count)

    def rpoplpush(self, source: str, destination: str) -> Command:
        return self._call(Reply.STRING, "rpoplpush", source, destination)

    def rpush(self, key: str, *values: Any) -> Command:
        return self._call(Reply.INT, *append_args(["rpush", key], values))

    def rpushx(self, key: str, *values: Any) -> Command:
        return self._call(Reply.INT, *append_args(["rpushx", key], values))

    def lmove(self, source: str, destination: str, srcpos: str, destpos: str) -> Command:
        return self._call(Reply.STRING, "lmove", source, destination, srcpos, destpos)