"""Hash commands."""

from __future__ import annotations

from typing import Any

from rediskit.command import Command, CommandBase, Reply, append_args


class HashCommands(CommandBase):
    """Commands on hash values."""

    def hdel(self, key: str, *fields: str) -> Command:
        return self._call(Reply.INT, "hdel", key, *fields)

    def hexists(self, key: str, field: str) -> Command:
        return self._call(Reply.BOOL, "hexists", key, field)

    def hget(self, key: str, field: str) -> Command:
        return self._call(Reply.STRING, "hget", key, field)

    def hget_all(self, key: str) -> Command:
        return self._call(Reply.STRING_STRING_MAP, "hgetall", key)

    def hincr_by(self, key: str, field: str, incr: int) -> Command:
        return self._call(Reply.INT, "hincrby", key, field, incr)

    def hincr_by_float(self, key: str, field: str, incr: float) -> Command:
        return self._call(Reply.FLOAT, "hincrbyfloat", key, field, incr)

    def hkeys(self, key: str) -> Command:
        return self._call(Reply.STRING_SLICE, "hkeys", key)

    def hlen(self, key: str) -> Command:
        return self._call(Reply.INT, "hlen", key)

    def hmget(self, key: str, *fields: str) -> Command:
        """Values of the fields; missing fields come back as None."""
        return self._call(Reply.SLICE, "hmget", key, *fields)

    def hset(self, key: str, *values: Any) -> Command:
        """HSET with field/value pairs, a flat sequence or a mapping."""
        return self._call(Reply.INT, *append_args(["hset", key], values))

    def hmset(self, key: str, *values: Any) -> Command:
        """The older HMSET form of HSET."""
        return self._call(Reply.BOOL, *append_args(["hmset", key], values))

    def hset_nx(self, key: str, field: str, value: Any) -> Command:
        return self._call(Reply.BOOL, "hsetnx", key, field, value)

    def hvals(self, key: str) -> Command:
        return self._call(Reply.STRING_SLICE, "hvals", key)

    def hrand_field(self, key: str, count: int, with_values: bool) -> Command:
        """HRANDFIELD (requires server >= 6.2); a zero count is passed through."""
        args: list[Any] = ["hrandfield", key, count]
        if with_values:
            args.append("withvalues")
        return self._call(Reply.STRING_SLICE, *args)