"""Generic key and connection commands."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from rediskit.command import (
    MILLISECOND,
    SECOND,
    Command,
    CommandBase,
    Reply,
    format_ms,
    format_sec,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _micros_since_epoch(when: datetime) -> int:
    if when.tzinfo is None:
        when = when.astimezone()
    return (when - _EPOCH) // timedelta(microseconds=1)


@dataclass
class Sort:
    """Options of the SORT command."""

    by: str = ""
    offset: int = 0
    count: int = 0
    get: list[str] = field(default_factory=list)
    order: str = ""
    alpha: bool = False

    def args(self, key: str) -> list[Any]:
        """The SORT arguments for the given key."""
        args: list[Any] = ["sort", key]
        if self.by:
            args += ["by", self.by]
        if self.offset != 0 or self.count != 0:
            args += ["limit", self.offset, self.count]
        for pattern in self.get:
            args += ["get", pattern]
        if self.order:
            args.append(self.order)
        if self.alpha:
            args.append("alpha")
        return args


class KeyCommands(CommandBase):
    """Commands that operate on keys regardless of their type."""

    def command(self) -> Command:
        return self._call(Reply.COMMANDS_INFO, "command")

    def client_get_name(self) -> Command:
        return self._call(Reply.STRING, "client", "getname")

    def echo(self, message: Any) -> Command:
        return self._call(Reply.STRING, "echo", message)

    def ping(self) -> Command:
        return self._call(Reply.STATUS, "ping")

    def wait(self, num_replicas: int, timeout: timedelta) -> Command:
        return self._call(Reply.INT, "wait", num_replicas, math.trunc(timeout / MILLISECOND))

    def delete(self, *keys: str) -> Command:
        return self._call(Reply.INT, "del", *keys)

    def unlink(self, *keys: str) -> Command:
        return self._call(Reply.INT, "unlink", *keys)

    def dump(self, key: str) -> Command:
        return self._call(Reply.STRING, "dump", key)

    def exists(self, *keys: str) -> Command:
        return self._call(Reply.INT, "exists", *keys)

    def expire(self, key: str, expiration: timedelta) -> Command:
        return self._call(Reply.BOOL, "expire", key, format_sec(expiration))

    def expire_at(self, key: str, when: datetime) -> Command:
        return self._call(Reply.BOOL, "expireat", key, _micros_since_epoch(when) // 1_000_000)

    def keys(self, pattern: str) -> Command:
        return self._call(Reply.STRING_SLICE, "keys", pattern)

    def migrate(self, host: str, port: str, key: str, db: int, timeout: timedelta) -> Command:
        return self._call(
            Reply.STATUS,
            "migrate",
            host,
            port,
            key,
            db,
            format_ms(timeout),
            read_timeout=timeout,
        )

    def move(self, key: str, db: int) -> Command:
        return self._call(Reply.BOOL, "move", key, db)

    def object_ref_count(self, key: str) -> Command:
        return self._call(Reply.INT, "object", "refcount", key)

    def object_encoding(self, key: str) -> Command:
        return self._call(Reply.STRING, "object", "encoding", key)

    def object_idle_time(self, key: str) -> Command:
        return self._call(Reply.DURATION, "object", "idletime", key, precision=SECOND)

    def persist(self, key: str) -> Command:
        return self._call(Reply.BOOL, "persist", key)

    def pexpire(self, key: str, expiration: timedelta) -> Command:
        return self._call(Reply.BOOL, "pexpire", key, format_ms(expiration))

    def pexpire_at(self, key: str, when: datetime) -> Command:
        micros = _micros_since_epoch(when)
        millis = abs(micros) // 1000
        return self._call(Reply.BOOL, "pexpireat", key, millis if micros >= 0 else -millis)

    def pttl(self, key: str) -> Command:
        return self._call(Reply.DURATION, "pttl", key, precision=MILLISECOND)

    def random_key(self) -> Command:
        return self._call(Reply.STRING, "randomkey")

    def rename(self, key: str, newkey: str) -> Command:
        return self._call(Reply.STATUS, "rename", key, newkey)

    def rename_nx(self, key: str, newkey: str) -> Command:
        return self._call(Reply.BOOL, "renamenx", key, newkey)

    def restore(self, key: str, ttl: timedelta, value: str) -> Command:
        return self._call(Reply.STATUS, "restore", key, format_ms(ttl), value)

    def restore_replace(self, key: str, ttl: timedelta, value: str) -> Command:
        return self._call(Reply.STATUS, "restore", key, format_ms(ttl), value, "replace")

    def sort(self, key: str, sort: Sort) -> Command:
        return self._call(Reply.STRING_SLICE, *sort.args(key))

    def sort_store(self, key: str, store: str, sort: Sort) -> Command:
        args = sort.args(key)
        if store:
            args += ["store", store]
        return self._call(Reply.INT, *args)

    def sort_interfaces(self, key: str, sort: Sort) -> Command:
        return self._call(Reply.SLICE, *sort.args(key))

    def touch(self, *keys: str) -> Command:
        return self._call(Reply.INT, "touch", *keys)

    def ttl(self, key: str) -> Command:
        return self._call(Reply.DURATION, "ttl", key, precision=SECOND)

    def type(self, key: str) -> Command:
        return self._call(Reply.STATUS, "type", key)