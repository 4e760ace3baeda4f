from datetime import datetime, timedelta, timezone

import pytest

from rediskit.command import KEEP_TTL, Reply
from rediskit.strings import SetArgs, StringCommands


def make():
    seen = []

    def process(cmd):
        seen.append(cmd)
        cmd.value = "OK"

    return StringCommands(process), seen


def test_get_builds_command_and_returns_value():
    cmds, seen = make()
    cmd = cmds.get("key")
    assert cmd.args == ["get", "key"]
    assert cmd.reply is Reply.STRING
    assert cmd.result() == "OK"
    assert seen == [cmd]


def test_error_is_stored_and_raised():
    def process(cmd):
        raise KeyError("missing")

    cmd = StringCommands(process).get("key")
    with pytest.raises(KeyError):
        cmd.result()


def test_set_without_expiration():
    cmds, _ = make()
    assert cmds.set("k", "v", timedelta(0)).args == ["set", "k", "v"]


def test_set_seconds_and_millis():
    cmds, _ = make()
    assert cmds.set("k", "v", timedelta(seconds=2)).args == ["set", "k", "v", "ex", 2]
    assert cmds.set("k", "v", timedelta(milliseconds=1500)).args == [
        "set", "k", "v", "px", 1500,
    ]


def test_set_keep_ttl():
    cmds, _ = make()
    assert cmds.set("k", "v", KEEP_TTL).args == ["set", "k", "v", "keepttl"]


def test_set_sub_millisecond_truncates_to_one():
    cmds, _ = make()
    assert cmds.set("k", "v", timedelta(microseconds=500)).args == ["set", "k", "v", "px", 1]


def test_set_nx_variants():
    cmds, _ = make()
    assert cmds.set_nx("k", "v", timedelta(0)).args == ["setnx", "k", "v"]
    assert cmds.set_nx("k", "v", KEEP_TTL).args == ["set", "k", "v", "keepttl", "nx"]
    assert cmds.set_nx("k", "v", timedelta(seconds=3)).args == ["set", "k", "v", "ex", 3, "nx"]
    assert cmds.set_nx("k", "v", timedelta(seconds=3)).reply is Reply.BOOL


def test_set_xx_variants():
    cmds, _ = make()
    assert cmds.set_xx("k", "v", timedelta(0)).args == ["set", "k", "v", "xx"]
    assert cmds.set_xx("k", "v", KEEP_TTL).args == ["set", "k", "v", "keepttl", "xx"]
    assert cmds.set_xx("k", "v", timedelta(milliseconds=10)).args == [
        "set", "k", "v", "px", 10, "xx",
    ]


def test_set_args_full():
    cmds, _ = make()
    when = datetime.fromtimestamp(1_600_000_000, tz=timezone.utc)
    cmd = cmds.set_args(
        "k", "v", SetArgs(mode="nx", expire_at=when, get=True, keep_ttl=True)
    )
    assert cmd.args == ["set", "k", "v", "keepttl", "exat", 1_600_000_000, "nx", "get"]


def test_set_args_defaults():
    cmds, _ = make()
    assert cmds.set_args("k", "v", SetArgs()).args == ["set", "k", "v"]
    assert cmds.set_args("k", "v", SetArgs(ttl=timedelta(seconds=5))).args == [
        "set", "k", "v", "ex", 5,
    ]


def test_set_ex():
    cmds, _ = make()
    assert cmds.set_ex("k", "v", timedelta(seconds=7)).args == ["setex", "k", 7, "v"]


def test_get_ex():
    cmds, _ = make()
    assert cmds.get_ex("k", timedelta(0)).args == ["getex", "k", "persist"]
    assert cmds.get_ex("k", timedelta(seconds=4)).args == ["getex", "k", "ex", 4]
    assert cmds.get_ex("k", timedelta(seconds=-1)).args == ["getex", "k"]


def test_mset_forms_agree():
    cmds, _ = make()
    pairs = cmds.mset("a", "1", "b", "2").args
    assert cmds.mset(["a", "1", "b", "2"]).args == pairs
    assert cmds.mset({"a": "1", "b": "2"}).args == pairs
    assert pairs[0] == "mset"


def test_msetnx_reply_bool():
    cmds, _ = make()
    cmd = cmds.msetnx({"a": "1"})
    assert cmd.args == ["msetnx", "a", "1"]
    assert cmd.reply is Reply.BOOL


def test_mget_and_numeric_commands():
    cmds, _ = make()
    assert cmds.mget("a", "b").args == ["mget", "a", "b"]
    assert cmds.incr_by("k", 5).args == ["incrby", "k", 5]
    assert cmds.decr_by("k", 2).args == ["decrby", "k", 2]
    assert cmds.incr_by_float("k", 1.5).reply is Reply.FLOAT
    assert cmds.get_range("k", 0, -1).args == ["getrange", "k", 0, -1]
    assert cmds.set_range("k", 3, "x").args == ["setrange", "k", 3, "x"]
    assert cmds.strlen("k").args == ["strlen", "k"]
    assert cmds.get_del("k").args == ["getdel", "k"]