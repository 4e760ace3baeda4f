from datetime import timedelta

import pytest

from rediskit.command import Reply
from rediskit.sorted_sets import (
    SortedSetCommands,
    Z,
    ZAddArgs,
    ZRangeArgs,
    ZRangeBy,
    ZStore,
    ZWithKey,
)


def _client():
    seen = []
    return SortedSetCommands(seen.append), seen


def test_zadd_plain():
    client, seen = _client()
    cmd = client.zadd("zs", Z(1.0, "a"), Z(2.5, "b"))
    assert cmd.args == ["zadd", "zs", 1.0, "a", 2.5, "b"]
    assert cmd.reply is Reply.INT
    assert seen == [cmd]


@pytest.mark.parametrize(
    "method, flags",
    [
        ("zadd_nx", ["nx"]),
        ("zadd_xx", ["xx"]),
        ("zadd_ch", ["ch"]),
        ("zadd_nx_ch", ["nx", "ch"]),
        ("zadd_xx_ch", ["xx", "ch"]),
    ],
)
def test_zadd_variants(method, flags):
    client, _ = _client()
    cmd = getattr(client, method)("zs", Z(3.0, "m"))
    assert cmd.args == ["zadd", "zs", *flags, 3.0, "m"]


def test_zadd_args_nx_excludes_gt_lt_and_xx():
    client, _ = _client()
    args = ZAddArgs(nx=True, xx=True, gt=True, lt=True, members=[Z(1.0, "a")])
    assert client.zadd_args("k", args).args == ["zadd", "k", "nx", 1.0, "a"]


def test_zadd_args_gt_wins_over_lt():
    client, _ = _client()
    args = ZAddArgs(xx=True, gt=True, lt=True, ch=True, members=[Z(1.0, "a")])
    assert client.zadd_args("k", args).args == ["zadd", "k", "xx", "gt", "ch", 1.0, "a"]


def test_zadd_args_incr_and_zincr_forms():
    client, _ = _client()
    cmd = client.zadd_args_incr("k", ZAddArgs(lt=True, members=[Z(2.0, "x")]))
    assert cmd.args == ["zadd", "k", "lt", "incr", 2.0, "x"]
    assert cmd.reply is Reply.FLOAT
    assert client.zincr("k", Z(1.0, "x")).args == ["zadd", "k", "incr", 1.0, "x"]
    assert client.zincr_nx("k", Z(1.0, "x")).args == ["zadd", "k", "nx", "incr", 1.0, "x"]
    assert client.zincr_xx("k", Z(1.0, "x")).args == ["zadd", "k", "xx", "incr", 1.0, "x"]


def test_bzpop_appends_timeout_and_sets_read_timeout():
    client, _ = _client()
    timeout = timedelta(seconds=2)
    cmd = client.bzpopmax(timeout, "a", "b")
    assert cmd.args[:3] == ["bzpopmax", "a", "b"]
    assert cmd.args[3] == 2
    assert cmd.read_timeout == timeout
    assert cmd.reply is Reply.ZWITH_KEY
    assert client.bzpopmin(timeout, "c").args == ["bzpopmin", "c", 2]


def test_zstore_args():
    store = ZStore(keys=["a", "b"], weights=[1.0, 2.0], aggregate="max")
    assert store.args() == ["a", "b", "weights", 1.0, 2.0, "aggregate", "max"]
    assert ZStore(keys=["a"]).args() == ["a"]


def test_zinter_and_zunion_key_positions():
    client, _ = _client()
    store = ZStore(keys=["a", "b"], aggregate="sum")
    inter = client.zinter(store)
    assert inter.args == ["zinter", 2, "a", "b", "aggregate", "sum"]
    assert inter.args[inter.first_key_pos] == "a"
    inter_store = client.zinter_store("dst", store)
    assert inter_store.args[inter_store.first_key_pos] == "a"
    assert inter_store.args[:3] == ["zinterstore", "dst", 2]
    union = client.zunion_with_scores(store)
    assert union.args[-1] == "withscores"
    assert union.args[union.first_key_pos] == "a"
    union_store = client.zunion_store("dst", store)
    assert union_store.args[union_store.first_key_pos] == "a"
    assert client.zinter_with_scores(store).reply is Reply.ZSLICE
    assert client.zunion(store).args[0] == "zunion"


def test_zpop_count_limits():
    client, _ = _client()
    assert client.zpopmax("k").args == ["zpopmax", "k"]
    assert client.zpopmin("k", 3).args == ["zpopmin", "k", 3]
    with pytest.raises(ValueError, match="too many arguments"):
        client.zpopmax("k", 1, 2)
    with pytest.raises(ValueError):
        client.zpopmin("k", 1, 2)


def test_zrange_args_rev_by_score_swaps_bounds():
    z = ZRangeArgs(key="k", start="(3", stop=8, by_score=True, rev=True, offset=1, count=2)
    assert z.args() == ["k", 8, "(3", "byscore", "rev", "limit", 1, 2]


def test_zrange_args_plain_and_by_lex():
    assert ZRangeArgs(key="k", start=0, stop=-1).args() == ["k", 0, -1]
    z = ZRangeArgs(key="k", start="[abc", stop="(def", by_lex=True)
    assert z.args() == ["k", "[abc", "(def", "bylex"]
    assert ZRangeArgs(key="k", start=0, stop=5, rev=True).args() == ["k", 0, 5, "rev"]


def test_zrange_commands():
    client, _ = _client()
    assert client.zrange("k", 0, -1).args == ["zrange", "k", 0, -1]
    scored = client.zrange_with_scores("k", 0, -1)
    assert scored.args == ["zrange", "k", 0, -1, "withscores"]
    assert scored.reply is Reply.ZSLICE
    store = client.zrange_store("dst", ZRangeArgs(key="k", start=0, stop=1))
    assert store.args == ["zrangestore", "dst", "k", 0, 1]


def test_zrange_by_score_and_lex():
    client, _ = _client()
    opt = ZRangeBy(min="-inf", max="+inf", offset=0, count=10)
    assert client.zrange_by_score("k", opt).args == [
        "zrangebyscore", "k", "-inf", "+inf", "limit", 0, 10
    ]
    assert client.zrange_by_lex("k", ZRangeBy(min="-", max="+")).args == [
        "zrangebylex", "k", "-", "+"
    ]
    assert client.zrange_by_score_with_scores("k", opt).args == [
        "zrangebyscore", "k", "-inf", "+inf", "withscores", "limit", 0, 10
    ]


def test_zrevrange_by_uses_max_then_min():
    client, _ = _client()
    opt = ZRangeBy(min="1", max="5")
    assert client.zrevrange_by_score("k", opt).args == ["zrevrangebyscore", "k", "5", "1"]
    assert client.zrevrange_by_lex("k", ZRangeBy(min="-", max="+")).args == [
        "zrevrangebylex", "k", "+", "-"
    ]
    assert client.zrevrange_by_score_with_scores("k", opt).args == [
        "zrevrangebyscore", "k", "5", "1", "withscores"
    ]


def test_simple_commands():
    client, _ = _client()
    assert client.zcard("k").args == ["zcard", "k"]
    assert client.zcount("k", "1", "2").args == ["zcount", "k", "1", "2"]
    assert client.zlexcount("k", "-", "+").args == ["zlexcount", "k", "-", "+"]
    assert client.zincr_by("k", 1.5, "m").args == ["zincrby", "k", 1.5, "m"]
    assert client.zmscore("k", "a", "b").args == ["zmscore", "k", "a", "b"]
    assert client.zrank("k", "m").args == ["zrank", "k", "m"]
    assert client.zrevrank("k", "m").args == ["zrevrank", "k", "m"]
    assert client.zscore("k", "m").reply is Reply.FLOAT
    assert client.zrevrange("k", 0, 1).args == ["zrevrange", "k", 0, 1]
    assert client.zrevrange_with_scores("k", 0, 1).args[-1] == "withscores"
    assert client.zrem_range_by_rank("k", 0, 1).args == ["zremrangebyrank", "k", 0, 1]
    assert client.zrem_range_by_score("k", "1", "2").args[0] == "zremrangebyscore"
    assert client.zrem_range_by_lex("k", "-", "+").args[0] == "zremrangebylex"


def test_zrem_flattens_single_sequence():
    client, _ = _client()
    assert client.zrem("k", ["a", "b"]).args == ["zrem", "k", "a", "b"]
    assert client.zrem("k", "a", "b").args == ["zrem", "k", "a", "b"]


def test_zrand_member_and_zdiff():
    client, _ = _client()
    assert client.zrand_member("k", 0, True).args == ["zrandmember", "k", 0, "withscores"]
    diff = client.zdiff("a", "b")
    assert diff.args == ["zdiff", 2, "a", "b"]
    assert diff.args[diff.first_key_pos] == "a"
    assert client.zdiff_with_scores("a", "b").args == ["zdiff", 2, "a", "b", "withscores"]
    store = client.zdiff_store("dst", "a", "b")
    assert store.args == ["zdiffstore", "dst", 2, "a", "b"]
    assert store.args[store.first_key_pos] == "dst"


def test_zwithkey_extends_z():
    item = ZWithKey(score=1.0, member="m", key="k")
    assert isinstance(item, Z)
    assert (item.score, item.member, item.key) == (1.0, "m", "k")