"""Bit and bitfield commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rediskit.command import Command, CommandBase, Reply


@dataclass
class BitCount:
    """Byte range of the BITCOUNT command."""

    start: int = 0
    end: int = 0


class BitCommands(CommandBase):
    """Commands on bits of string values."""

    def get_bit(self, key: str, offset: int) -> Command:
        return self._call(Reply.INT, "getbit", key, offset)

    def set_bit(self, key: str, offset: int, value: int) -> Command:
        return self._call(Reply.INT, "setbit", key, offset, value)

    def bit_count(self, key: str, bit_count: BitCount | None) -> Command:
        args: list[Any] = ["bitcount", key]
        if bit_count is not None:
            args += [bit_count.start, bit_count.end]
        return self._call(Reply.INT, *args)

    def _bit_op(self, op: str, dest_key: str, *keys: str) -> Command:
        return self._call(Reply.INT, "bitop", op, dest_key, *keys)

    def bit_op_and(self, dest_key: str, *keys: str) -> Command:
        return self._bit_op("and", dest_key, *keys)

    def bit_op_or(self, dest_key: str, *keys: str) -> Command:
        return self._bit_op("or", dest_key, *keys)

    def bit_op_xor(self, dest_key: str, *keys: str) -> Command:
        return self._bit_op("xor", dest_key, *keys)

    def bit_op_not(self, dest_key: str, key: str) -> Command:
        return self._bit_op("not", dest_key, key)

    def bit_pos(self, key: str, bit: int, *pos: int) -> Command:
        """BITPOS with an optional start and end."""
        if len(pos) > 2:
            raise ValueError("too many arguments")
        return self._call(Reply.INT, "bitpos", key, bit, *pos)

    def bit_field(self, key: str, *args: Any) -> Command:
        return self._call(Reply.INT_SLICE, "bitfield", key, *args)