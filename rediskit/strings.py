"""String value commands."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from rediskit.command import (
    KEEP_TTL,
    Command,
    CommandBase,
    Reply,
    append_args,
    format_ms,
    format_sec,
    use_precise,
)

_ZERO = timedelta(0)


def _expiry_args(expiration: timedelta) -> list[Any]:
    if use_precise(expiration):
        return ["px", format_ms(expiration)]
    return ["ex", format_sec(expiration)]


@dataclass
class SetArgs:
    """Options of the SET command.

    ``mode`` is "nx", "xx" or empty.  A zero ``ttl`` and no ``expire_at`` mean
    the key has no expiration.  ``get`` returns the old value; ``keep_ttl``
    keeps the existing TTL (requires server >= 6.0).
    """

    mode: str = ""
    ttl: timedelta = _ZERO
    expire_at: datetime | None = None
    get: bool = False
    keep_ttl: bool = False


class StringCommands(CommandBase):
    """Commands on string values."""

    def append(self, key: str, value: str) -> Command:
        return self._call(Reply.INT, "append", key, value)

    def decr(self, key: str) -> Command:
        return self._call(Reply.INT, "decr", key)

    def decr_by(self, key: str, decrement: int) -> Command:
        return self._call(Reply.INT, "decrby", key, decrement)

    def get(self, key: str) -> Command:
        return self._call(Reply.STRING, "get", key)

    def get_range(self, key: str, start: int, end: int) -> Command:
        return self._call(Reply.STRING, "getrange", key, start, end)

    def get_set(self, key: str, value: Any) -> Command:
        return self._call(Reply.STRING, "getset", key, value)

    def get_ex(self, key: str, expiration: timedelta) -> Command:
        """GETEX; a zero expiration removes the TTL (requires server >= 6.2)."""
        args: list[Any] = ["getex", key]
        if expiration > _ZERO:
            args += _expiry_args(expiration)
        elif expiration == _ZERO:
            args.append("persist")
        return self._call(Reply.STRING, *args)

    def get_del(self, key: str) -> Command:
        return self._call(Reply.STRING, "getdel", key)

    def incr(self, key: str) -> Command:
        return self._call(Reply.INT, "incr", key)

    def incr_by(self, key: str, value: int) -> Command:
        return self._call(Reply.INT, "incrby", key, value)

    def incr_by_float(self, key: str, value: float) -> Command:
        return self._call(Reply.FLOAT, "incrbyfloat", key, value)

    def mget(self, *keys: str) -> Command:
        return self._call(Reply.SLICE, "mget", *keys)

    def mset(self, *values: Any) -> Command:
        """MSET with pairs, a flat sequence or a mapping."""
        return self._call(Reply.STATUS, *append_args(["mset"], values))

    def msetnx(self, *values: Any) -> Command:
        """MSETNX with pairs, a flat sequence or a mapping."""
        return self._call(Reply.BOOL, *append_args(["msetnx"], values))

    def set(self, key: str, value: Any, expiration: timedelta) -> Command:
        """SET; zero expiration means none, KEEP_TTL keeps the existing TTL."""
        args: list[Any] = ["set", key, value]
        if expiration > _ZERO:
            args += _expiry_args(expiration)
        elif expiration == KEEP_TTL:
            args.append("keepttl")
        return self._call(Reply.STATUS, *args)

    def set_args(self, key: str, value: Any, args: SetArgs) -> Command:
        """SET with every option the command supports."""
        cmd_args: list[Any] = ["set", key, value]
        if args.keep_ttl:
            cmd_args.append("keepttl")
        if args.expire_at is not None:
            cmd_args += ["exat", math.floor(args.expire_at.timestamp())]
        if args.ttl > _ZERO:
            cmd_args += _expiry_args(args.ttl)
        if args.mode:
            cmd_args.append(args.mode)
        if args.get:
            cmd_args.append("get")
        return self._call(Reply.STATUS, *cmd_args)

    def set_ex(self, key: str, value: Any, expiration: timedelta) -> Command:
        return self._call(Reply.STATUS, "setex", key, format_sec(expiration), value)

    def set_nx(self, key: str, value: Any, expiration: timedelta) -> Command:
        """SET ... NX; a zero expiration uses the plain SETNX command."""
        if expiration == _ZERO:
            return self._call(Reply.BOOL, "setnx", key, value)
        if expiration == KEEP_TTL:
            return self._call(Reply.BOOL, "set", key, value, "keepttl", "nx")
        return self._call(Reply.BOOL, "set", key, value, *_expiry_args(expiration), "nx")

    def set_xx(self, key: str, value: Any, expiration: timedelta) -> Command:
        """SET ... XX."""
        if expiration == _ZERO:
            return self._call(Reply.BOOL, "set", key, value, "xx")
        if expiration == KEEP_TTL:
            return self._call(Reply.BOOL, "set", key, value, "keepttl", "xx")
        return self._call(Reply.BOOL, "set", key, value, *_expiry_args(expiration), "xx")

    def set_range(self, key: str, offset: int, value: str) -> Command:
        return self._call(Reply.INT, "setrange", key, offset, value)

    def strlen(self, key: str) -> Command:
        return self._call(Reply.INT, "strlen", key)