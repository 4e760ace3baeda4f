"""Set and HyperLogLog commands."""

from __future__ import annotations

from typing import Any

from rediskit.command import Command, CommandBase, Reply, append_args


class SetCommands(CommandBase):
    """Commands on set values and HyperLogLogs."""

    def sadd(self, key: str, *members: Any) -> Command:
        """SADD with members, a flat sequence or a mapping."""
        return self._call(Reply.INT, *append_args(["sadd", key], members))

    def scard(self, key: str) -> Command:
        return self._call(Reply.INT, "scard", key)

    def sdiff(self, *keys: str) -> Command:
        return self._call(Reply.STRING_SLICE, "sdiff", *keys)

    def sdiff_store(self, destination: str, *keys: str) -> Command:
        return self._call(Reply.INT, "sdiffstore", destination, *keys)

    def sinter(self, *keys: str) -> Command:
        return self._call(Reply.STRING_SLICE, "sinter", *keys)

    def sinter_store(self, destination: str, *keys: str) -> Command:
        return self._call(Reply.INT, "sinterstore", destination, *keys)

    def sismember(self, key: str, member: Any) -> Command:
        return self._call(Reply.BOOL, "sismember", key, member)

    def smismember(self, key: str, *members: Any) -> Command:
        """SMISMEMBER: membership of each member, in order."""
        return self._call(Reply.BOOL_SLICE, *append_args(["smismember", key], members))

    def smembers(self, key: str) -> Command:
        """SMEMBERS as a list."""
        return self._call(Reply.STRING_SLICE, "smembers", key)

    def smembers_map(self, key: str) -> Command:
        """SMEMBERS as a mapping keyed by member."""
        return self._call(Reply.STRING_STRUCT_MAP, "smembers", key)

    def smove(self, source: str, destination: str, member: Any) -> Command:
        return self._call(Reply.BOOL, "smove", source, destination, member)

    def spop(self, key: str) -> Command:
        return self._call(Reply.STRING, "spop", key)

    def spop_n(self, key: str, count: int) -> Command:
        return self._call(Reply.STRING_SLICE, "spop", key, count)

    def srandmember(self, key: str) -> Command:
        return self._call(Reply.STRING, "srandmember", key)

    def srandmember_n(self, key: str, count: int) -> Command:
        return self._call(Reply.STRING_SLICE, "srandmember", key, count)

    def srem(self, key: str, *members: Any) -> Command:
        return self._call(Reply.INT, *append_args(["srem", key], members))

    def sunion(self, *keys: str) -> Command:
        return self._call(Reply.STRING_SLICE, "sunion", *keys)

    def sunion_store(self, destination: str, *keys: str) -> Command:
        return self._call(Reply.INT, "sunionstore", destination, *keys)

    def pfadd(self, key: str, *elements: Any) -> Command:
        return self._call(Reply.INT, *append_args(["pfadd", key], elements))

    def pfcount(self, *keys: str) -> Command:
        return self._call(Reply.INT, "pfcount", *keys)

    def pfmerge(self, dest: str, *keys: str) -> Command:
        return self._call(Reply.STATUS, "pfmerge", dest, *keys)