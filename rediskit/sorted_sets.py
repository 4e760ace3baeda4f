"""Sorted set commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from rediskit.command import Command, CommandBase, Reply, format_sec


@dataclass
class Z:
    """A sorted set member with its score."""

    score: float = 0.0
    member: Any = None


@dataclass
class ZWithKey(Z):
    """A sorted set member together with the key it was popped from."""

    key: str = ""


@dataclass
class ZStore:
    """Keys, weights and aggregate of ZINTER/ZUNION and their STORE forms.

    ``aggregate`` may be SUM, MIN or MAX.
    """

    keys: list[str] = field(default_factory=list)
    weights: list[float] = field(default_factory=list)
    aggregate: str = ""

    def args(self) -> list[Any]:
        """The keys followed by the WEIGHTS and AGGREGATE options."""
        args: list[Any] = list(self.keys)
        if self.weights:
            args += ["weights", *self.weights]
        if self.aggregate:
            args += ["aggregate", self.aggregate]
        return args


@dataclass
class ZAddArgs:
    """Options of ZADD; GT, LT and NX are mutually exclusive."""

    nx: bool = False
    xx: bool = False
    lt: bool = False
    gt: bool = False
    ch: bool = False
    members: list[Z] = field(default_factory=list)


@dataclass
class ZRangeArgs:
    """Every option of ZRANGE (REV, BYSCORE, BYLEX and LIMIT need server >= 6.2).

    ``start`` and ``stop`` are indexes by default, scores with ``by_score``
    and lexical bounds with ``by_lex``; the two are mutually exclusive.
    """

    key: str = ""
    start: Any = 0
    stop: Any = 0
    by_score: bool = False
    by_lex: bool = False
    rev: bool = False
    offset: int = 0
    count: int = 0

    def args(self) -> list[Any]:
        """The ZRANGE arguments after the command name."""
        if self.rev and (self.by_score or self.by_lex):
            args: list[Any] = [self.key, self.stop, self.start]
        else:
            args = [self.key, self.start, self.stop]
        if self.by_score:
            args.append("byscore")
        elif self.by_lex:
            args.append("bylex")
        if self.rev:
            args.append("rev")
        if self.offset != 0 or self.count != 0:
            args += ["limit", self.offset, self.count]
        return args


@dataclass
class ZRangeBy:
    """Bounds and LIMIT of the ZRANGEBYSCORE/ZRANGEBYLEX family."""

    min: str = ""
    max: str = ""
    offset: int = 0
    count: int = 0

    def _limit(self) -> list[Any]:
        if self.offset != 0 or self.count != 0:
            return ["limit", self.offset, self.count]
        return []


def _zadd_args(key: str, args: ZAddArgs, incr: bool) -> list[Any]:
    a: list[Any] = ["zadd", key]
    if args.nx:
        a.append("nx")
    else:
        if args.xx:
            a.append("xx")
        if args.gt:
            a.append("gt")
        elif args.lt:
            a.append("lt")
    if args.ch:
        a.append("ch")
    if incr:
        a.append("incr")
    for m in args.members:
        a += [m.score, m.member]
    return a


def _single_count(count: tuple[int, ...]) -> list[int]:
    if len(count) > 1:
        raise ValueError("too many arguments")
    return list(count)


class SortedSetCommands(CommandBase):
    """Commands on sorted set values."""

    def _bzpop(self, name: str, timeout: timedelta, keys: tuple[str, ...]) -> Command:
        return self._call(
            Reply.ZWITH_KEY, name, *keys, format_sec(timeout), read_timeout=timeout
        )

    def bzpopmax(self, timeout: timedelta, *keys: str) -> Command:
        return self._bzpop("bzpopmax", timeout, keys)

    def bzpopmin(self, timeout: timedelta, *keys: str) -> Command:
        return self._bzpop("bzpopmin", timeout, keys)

    def _zadd(self, key: str, args: ZAddArgs, members: tuple[Z, ...]) -> Command:
        args.members = list(members)
        return self._call(Reply.INT, *_zadd_args(key, args, False))

    def zadd(self, key: str, *members: Z) -> Command:
        return self._zadd(key, ZAddArgs(), members)

    def zadd_nx(self, key: str, *members: Z) -> Command:
        return self._zadd(key, ZAddArgs(nx=True), members)

    def zadd_xx(self, key: str, *members: Z) -> Command:
        return self._zadd(key, ZAddArgs(xx=True), members)

    def zadd_ch(self, key: str, *members: Z) -> Command:
        return self._zadd(key, ZAddArgs(ch=True), members)

    def zadd_nx_ch(self, key: str, *members: Z) -> Command:
        return self._zadd(key, ZAddArgs(nx=True, ch=True), members)

    def zadd_xx_ch(self, key: str, *members: Z) -> Command:
        return self._zadd(key, ZAddArgs(xx=True, ch=True), members)

    def zadd_args(self, key: str, args: ZAddArgs) -> Command:
        return self._call(Reply.INT, *_zadd_args(key, args, False))

    def zadd_args_incr(self, key: str, args: ZAddArgs) -> Command:
        return self._call(Reply.FLOAT, *_zadd_args(key, args, True))

    def zincr(self, key: str, member: Z) -> Command:
        return self.zadd_args_incr(key, ZAddArgs(members=[member]))

    def zincr_nx(self, key: str, member: Z) -> Command:
        return self.zadd_args_incr(key, ZAddArgs(nx=True, members=[member]))

    def zincr_xx(self, key: str, member: Z) -> Command:
        return self.zadd_args_incr(key, ZAddArgs(xx=True, members=[member]))

    def zcard(self, key: str) -> Command:
        return self._call(Reply.INT, "zcard", key)

    def zcount(self, key: str, minimum: str, maximum: str) -> Command:
        return self._call(Reply.INT, "zcount", key, minimum, maximum)

    def zlexcount(self, key: str, minimum: str, maximum: str) -> Command:
        return self._call(Reply.INT, "zlexcount", key, minimum, maximum)

    def zincr_by(self, key: str, increment: float, member: str) -> Command:
        return self._call(Reply.FLOAT, "zincrby", key, increment, member)

    def zinter(self, store: ZStore) -> Command:
        return self._call(
            Reply.STRING_SLICE, "zinter", len(store.keys), *store.args(), first_key_pos=2
        )

    def zinter_with_scores(self, store: ZStore) -> Command:
        return self._call(
            Reply.ZSLICE,
            "zinter",
            len(store.keys),
            *store.args(),
            "withscores",
            first_key_pos=2,
        )

    def zinter_store(self, destination: str, store: ZStore) -> Command:
        return self._call(
            Reply.INT,
            "zinterstore",
            destination,
            len(store.keys),
            *store.args(),
            first_key_pos=3,
        )

    def zmscore(self, key: str, *members: str) -> Command:
        return self._call(Reply.FLOAT_SLICE, "zmscore", key, *members)

    def zpopmax(self, key: str, *count: int) -> Command:
        return self._call(Reply.ZSLICE, "zpopmax", key, *_single_count(count))

    def zpopmin(self, key: str, *count: int) -> Command:
        return self._call(Reply.ZSLICE, "zpopmin", key, *_single_count(count))

    def zrange(self, key: str, start: int, stop: int) -> Command:
        return self.zrange_args(ZRangeArgs(key=key, start=start, stop=stop))

    def zrange_with_scores(self, key: str, start: int, stop: int) -> Command:
        return self.zrange_args_with_scores(ZRangeArgs(key=key, start=start, stop=stop))

    def _zrange_by(self, name: str, key: str, opt: ZRangeBy, with_scores: bool) -> Command:
        args: list[Any] = [name, key, opt.min, opt.max]
        if with_scores:
            args.append("withscores")
        args += opt._limit()
        return self._call(Reply.STRING_SLICE, *args)

    def zrange_by_score(self, key: str, opt: ZRangeBy) -> Command:
        return self._zrange_by("zrangebyscore", key, opt, False)

    def zrange_by_lex(self, key: str, opt: ZRangeBy) -> Command:
        return self._zrange_by("zrangebylex", key, opt, False)

    def zrange_by_score_with_scores(self, key: str, opt: ZRangeBy) -> Command:
        return self._call(
            Reply.ZSLICE,
            "zrangebyscore",
            key,
            opt.min,
            opt.max,
            "withscores",
            *opt._limit(),
        )

    def zrange_args(self, z: ZRangeArgs) -> Command:
        return self._call(Reply.STRING_SLICE, "zrange", *z.args())

    def zrange_args_with_scores(self, z: ZRangeArgs) -> Command:
        return self._call(Reply.ZSLICE, "zrange", *z.args(), "withscores")

    def zrange_store(self, dst: str, z: ZRangeArgs) -> Command:
        return self._call(Reply.INT, "zrangestore", dst, *z.args())

    def zrank(self, key: str, member: str) -> Command:
        return self._call(Reply.INT, "zrank", key, member)

    def zrem(self, key: str, *members: Any) -> Command:
        from rediskit.command import append_args

        return self._call(Reply.INT, *append_args(["zrem", key], members))

    def zrem_range_by_rank(self, key: str, start: int, stop: int) -> Command:
        return self._call(Reply.INT, "zremrangebyrank", key, start, stop)

    def zrem_range_by_score(self, key: str, minimum: str, maximum: str) -> Command:
        return self._call(Reply.INT, "zremrangebyscore", key, minimum, maximum)

    def zrem_range_by_lex(self, key: str, minimum: str, maximum: str) -> Command:
        return self._call(Reply.INT, "zremrangebylex", key, minimum, maximum)

    def zrevrange(self, key: str, start: int, stop: int) -> Command:
        return self._call(Reply.STRING_SLICE, "zrevrange", key, start, stop)

    def zrevrange_with_scores(self, key: str, start: int, stop: int) -> Command:
        return self._call(Reply.ZSLICE, "zrevrange", key, start, stop, "withscores")

    def _zrevrange_by(self, name: str, key: str, opt: ZRangeBy) -> Command:
        return self._call(Reply.STRING_SLICE, name, key, opt.max, opt.min, *opt._limit())

    def zrevrange_by_score(self, key: str, opt: ZRangeBy) -> Command:
        return self._zrevrange_by("zrevrangebyscore", key, opt)

    def zrevrange_by_lex(self, key: str, opt: ZRangeBy) -> Command:
        return self._zrevrange_by("zrevrangebylex", key, opt)

    def zrevrange_by_score_with_scores(self, key: str, opt: ZRangeBy) -> Command:
        return self._call(
            Reply.ZSLICE,
            "zrevrangebyscore",
            key,
            opt.max,
            opt.min,
            "withscores",
            *opt._limit(),
        )

    def zrevrank(self, key: str, member: str) -> Command:
        return self._call(Reply.INT, "zrevrank", key, member)

    def zscore(self, key: str, member: str) -> Command:
        return self._call(Reply.FLOAT, "zscore", key, member)

    def zunion_store(self, dest: str, store: ZStore) -> Command:
        return self._call(
            Reply.INT,
            "zunionstore",
            dest,
            len(store.keys),
            *store.args(),
            first_key_pos=3,
        )

    def zunion(self, store: ZStore) -> Command:
        return self._call(
            Reply.STRING_SLICE, "zunion", len(store.keys), *store.args(), first_key_pos=2
        )

    def zunion_with_scores(self, store: ZStore) -> Command:
        return self._call(
            Reply.ZSLICE,
            "zunion",
            len(store.keys),
            *store.args(),
            "withscores",
            first_key_pos=2,
        )

    def zrand_member(self, key: str, count: int, with_scores: bool) -> Command:
        """ZRANDMEMBER (requires server >= 6.2); a zero count is passed through."""
        args: list[Any] = ["zrandmember", key, count]
        if with_scores:
            args.append("withscores")
        return self._call(Reply.STRING_SLICE, *args)

    def zdiff(self, *keys: str) -> Command:
        return self._call(Reply.STRING_SLICE, "zdiff", len(keys), *keys, first_key_pos=2)

    def zdiff_with_scores(self, *keys: str) -> Command:
        return self._call(
            Reply.ZSLICE, "zdiff", len(keys), *keys, "withscores", first_key_pos=2
        )

    def zdiff_store(self, destination: str, *keys: str) -> Command:
        return self._call(Reply.INT, "zdiffstore", destination, len(keys), *keys)