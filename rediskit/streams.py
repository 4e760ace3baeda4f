"""Stream commands."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from rediskit.command import (
    MILLISECOND,
    Command,
    CommandBase,
    Reply,
    append_arg,
    format_ms,
)

_ZERO = timedelta(0)


def _whole_ms(dur: timedelta) -> int:
    return math.trunc(dur / MILLISECOND)


def _blocks(block: timedelta | None) -> bool:
    return block is not None and block >= _ZERO


@dataclass
class XAddArgs:
    """Options of XADD.

    ``values`` may be a flat sequence of fields and values or a mapping.
    ``max_len``/``max_len_approx`` and ``min_id`` conflict; only one is used.
    """

    stream: str = ""
    no_mk_stream: bool = False
    max_len: int = 0
    max_len_approx: int = 0
    min_id: str = ""
    approx: bool = False
    limit: int = 0
    id: str = ""
    values: Any = None


@dataclass
class XReadArgs:
    """Options of XREAD; ``streams`` holds stream names followed by ids.

    A ``block`` of None or a negative duration sends no BLOCK option.
    """

    streams: list[str] = field(default_factory=list)
    count: int = 0
    block: timedelta | None = _ZERO


@dataclass
class XReadGroupArgs:
    """Options of XREADGROUP; ``streams`` holds stream names followed by ids."""

    group: str = ""
    consumer: str = ""
    streams: list[str] = field(default_factory=list)
    count: int = 0
    block: timedelta | None = _ZERO
    no_ack: bool = False


@dataclass
class XPendingExtArgs:
    """Options of the extended XPENDING form."""

    stream: str = ""
    group: str = ""
    idle: timedelta = _ZERO
    start: str = ""
    end: str = ""
    count: int = 0
    consumer: str = ""


@dataclass
class XAutoClaimArgs:
    """Options of XAUTOCLAIM."""

    stream: str = ""
    group: str = ""
    min_idle: timedelta = _ZERO
    start: str = ""
    count: int = 0
    consumer: str = ""


@dataclass
class XClaimArgs:
    """Options of XCLAIM."""

    stream: str = ""
    group: str = ""
    consumer: str = ""
    min_idle: timedelta = _ZERO
    messages: list[str] = field(default_factory=list)


def _xautoclaim_args(a: XAutoClaimArgs) -> list[Any]:
    args: list[Any] = [
        "xautoclaim",
        a.stream,
        a.group,
        a.consumer,
        format_ms(a.min_idle),
        a.start,
    ]
    if a.count > 0:
        args += ["count", a.count]
    return args


def _xclaim_args(a: XClaimArgs) -> list[Any]:
    return ["xclaim", a.stream, a.group, a.consumer, _whole_ms(a.min_idle), *a.messages]


class StreamCommands(CommandBase):
    """Commands on stream values."""

    def xadd(self, args: XAddArgs) -> Command:
        cmd_args: list[Any] = ["xadd", args.stream]
        if args.no_mk_stream:
            cmd_args.append("nomkstream")
        if args.max_len > 0:
            cmd_args += ["maxlen", "~", args.max_len] if args.approx else ["maxlen", args.max_len]
        elif args.max_len_approx > 0:
            cmd_args += ["maxlen", "~", args.max_len_approx]
        elif args.min_id:
            cmd_args += ["minid", "~", args.min_id] if args.approx else ["minid", args.min_id]
        if args.limit > 0:
            cmd_args += ["limit", args.limit]
        cmd_args.append(args.id or "*")
        cmd_args = append_arg(cmd_args, args.values)
        return self._call(Reply.STRING, *cmd_args)

    def xdel(self, stream: str, *ids: str) -> Command:
        return self._call(Reply.INT, "xdel", stream, *ids)

    def xlen(self, stream: str) -> Command:
        return self._call(Reply.INT, "xlen", stream)

    def xrange(self, stream: str, start: str, stop: str) -> Command:
        return self._call(Reply.XMESSAGE_SLICE, "xrange", stream, start, stop)

    def xrange_n(self, stream: str, start: str, stop: str, count: int) -> Command:
        return self._call(Reply.XMESSAGE_SLICE, "xrange", stream, start, stop, "count", count)

    def xrevrange(self, stream: str, start: str, stop: str) -> Command:
        return self._call(Reply.XMESSAGE_SLICE, "xrevrange", stream, start, stop)

    def xrevrange_n(self, stream: str, start: str, stop: str, count: int) -> Command:
        return self._call(
            Reply.XMESSAGE_SLICE, "xrevrange", stream, start, stop, "count", count
        )

    def xread(self, args: XReadArgs) -> Command:
        cmd_args: list[Any] = ["xread"]
        if args.count > 0:
            cmd_args += ["count", args.count]
        blocking = _blocks(args.block)
        if blocking:
            cmd_args += ["block", _whole_ms(args.block)]
        cmd_args.append("streams")
        key_pos = len(cmd_args)
        cmd_args += args.streams
        return self._call(
            Reply.XSTREAM_SLICE,
            *cmd_args,
            read_timeout=args.block if blocking else None,
            first_key_pos=key_pos,
        )

    def xread_streams(self, *streams: str) -> Command:
        """XREAD without blocking."""
        return self.xread(XReadArgs(streams=list(streams), block=None))

    def xgroup_create(self, stream: str, group: str, start: str) -> Command:
        return self._call(Reply.STATUS, "xgroup", "create", stream, group, start)

    def xgroup_create_mkstream(self, stream: str, group: str, start: str) -> Command:
        return self._call(Reply.STATUS, "xgroup", "create", stream, group, start, "mkstream")

    def xgroup_set_id(self, stream: str, group: str, start: str) -> Command:
        return self._call(Reply.STATUS, "xgroup", "setid", stream, group, start)

    def xgroup_destroy(self, stream: str, group: str) -> Command:
        return self._call(Reply.INT, "xgroup", "destroy", stream, group)

    def xgroup_create_consumer(self, stream: str, group: str, consumer: str) -> Command:
        return self._call(Reply.INT, "xgroup", "createconsumer", stream, group, consumer)

    def xgroup_del_consumer(self, stream: str, group: str, consumer: str) -> Command:
        return self._call(Reply.INT, "xgroup", "delconsumer", stream, group, consumer)

    def xreadgroup(self, args: XReadGroupArgs) -> Command:
        cmd_args: list[Any] = ["xreadgroup", "group", args.group, args.consumer]
        if args.count > 0:
            cmd_args += ["count", args.count]
        blocking = _blocks(args.block)
        if blocking:
            cmd_args += ["block", _whole_ms(args.block)]
        if args.no_ack:
            cmd_args.append("noack")
        cmd_args.append("streams")
        key_pos = len(cmd_args)
        cmd_args += args.streams
        return self._call(
            Reply.XSTREAM_SLICE,
            *cmd_args,
            read_timeout=args.block if blocking else None,
            first_key_pos=key_pos,
        )

    def xack(self, stream: str, group: str, *ids: str) -> Command:
        return self._call(Reply.INT, "xack", stream, group, *ids)

    def xpending(self, stream: str, group: str) -> Command:
        return self._call(Reply.XPENDING, "xpending", stream, group)

    def xpending_ext(self, args: XPendingExtArgs) -> Command:
        cmd_args: list[Any] = ["xpending", args.stream, args.group]
        if args.idle != _ZERO:
            cmd_args += ["idle", format_ms(args.idle)]
        cmd_args += [args.start, args.end, args.count]
        if args.consumer:
            cmd_args.append(args.consumer)
        return self._call(Reply.XPENDING_EXT, *cmd_args)

    def xclaim(self, args: XClaimArgs) -> Command:
        return self._call(Reply.XMESSAGE_SLICE, *_xclaim_args(args))

    def xclaim_just_id(self, args: XClaimArgs) -> Command:
        return self._call(Reply.STRING_SLICE, *_xclaim_args(args), "justid")

    def xautoclaim(self, args: XAutoClaimArgs) -> Command:
        return self._call(Reply.XAUTOCLAIM, *_xautoclaim_args(args))

    def xautoclaim_just_id(self, args: XAutoClaimArgs) -> Command:
        return self._call(Reply.XAUTOCLAIM_JUST_ID, *_xautoclaim_args(args), "justid")

    def _xtrim(
        self, key: str, strategy: str, approx: bool, threshold: Any, limit: int
    ) -> Command:
        args: list[Any] = ["xtrim", key, strategy]
        if approx:
            args.append("~")
        args.append(threshold)
        if limit > 0:
            args += ["limit", limit]
        return self._call(Reply.INT, *args)

    def xtrim(self, key: str, max_len: int) -> Command:
        """Deprecated form of xtrim_max_len."""
        return self._xtrim(key, "maxlen", False, max_len, 0)

    def xtrim_approx(self, key: str, max_len: int) -> Command:
        """Deprecated form of xtrim_max_len_approx without a limit."""
        return self._xtrim(key, "maxlen", True, max_len, 0)

    def xtrim_max_len(self, key: str, max_len: int) -> Command:
        return self._xtrim(key, "maxlen", False, max_len, 0)

    def xtrim_max_len_approx(self, key: str, max_len: int, limit: int) -> Command:
        return self._xtrim(key, "maxlen", True, max_len, limit)

    def xtrim_min_id(self, key: str, min_id: str) -> Command:
        return self._xtrim(key, "minid", False, min_id, 0)

    def xtrim_min_id_approx(self, key: str, min_id: str, limit: int) -> Command:
        return self._xtrim(key, "minid", True, min_id, limit)

    def xinfo_consumers(self, key: str, group: str) -> Command:
        return self._call(Reply.XINFO_CONSUMERS, "xinfo", "consumers", key, group)

    def xinfo_groups(self, key: str) -> Command:
        return self._call(Reply.XINFO_GROUPS, "xinfo", "groups", key)

    def xinfo_stream(self, key: str) -> Command:
        return self._call(Reply.XINFO_STREAM, "xinfo", "stream", key)

    def xinfo_stream_full(self, key: str, count: int) -> Command:
        """XINFO STREAM key FULL [COUNT count] (requires server >= 6.0)."""
        args: list[Any] = ["xinfo", "stream", key, "full"]
        if count > 0:
            args += ["count", count]
        return self._call(Reply.XINFO_STREAM_FULL, *args)