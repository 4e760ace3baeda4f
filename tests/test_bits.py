import pytest

from rediskit.bits import BitCommands, BitCount
from rediskit.command import Reply


def make():
    seen = []

    def process(cmd):
        seen.append(cmd)
        cmd.value = 1

    return BitCommands(process), seen


def test_get_and_set_bit():
    cmds, seen = make()
    cmd = cmds.set_bit("k", 7, 1)
    assert cmd.args == ["setbit", "k", 7, 1]
    assert cmd.result() == 1
    assert cmds.get_bit("k", 7).args == ["getbit", "k", 7]
    assert len(seen) == 2


def test_bit_count_with_and_without_range():
    cmds, _ = make()
    assert cmds.bit_count("k", None).args == ["bitcount", "k"]
    assert cmds.bit_count("k", BitCount(start=1, end=2)).args == ["bitcount", "k", 1, 2]


@pytest.mark.parametrize(
    "method,op",
    [("bit_op_and", "and"), ("bit_op_or", "or"), ("bit_op_xor", "xor")],
)
def test_bit_ops(method, op):
    cmds, _ = make()
    cmd = getattr(cmds, method)("dest", "a", "b")
    assert cmd.args == ["bitop", op, "dest", "a", "b"]
    assert cmd.reply is Reply.INT


def test_bit_op_not():
    cmds, _ = make()
    assert cmds.bit_op_not("dest", "a").args == ["bitop", "not", "dest", "a"]


def test_bit_pos_positions():
    cmds, _ = make()
    assert cmds.bit_pos("k", 1).args == ["bitpos", "k", 1]
    assert cmds.bit_pos("k", 1, 2).args == ["bitpos", "k", 1, 2]
    assert cmds.bit_pos("k", 0, 2, 4).args == ["bitpos", "k", 0, 2, 4]


def test_bit_pos_too_many():
    cmds, seen = make()
    with pytest.raises(ValueError, match="too many arguments"):
        cmds.bit_pos("k", 1, 1, 2, 3)
    assert seen == []


def test_bit_field():
    cmds, _ = make()
    cmd = cmds.bit_field("k", "incrby", "u2", 100, 1)
    assert cmd.args == ["bitfield", "k", "incrby", "u2", 100, 1]
    assert cmd.reply is Reply.INT_SLICE