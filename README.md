# rediskit

`rediskit` builds Redis commands. Each method creates a `Command` that
holds the exact argument list the server expects. It passes the command to
a callable you supply and then returns it. That callable sends the command
and fills in its outcome. `rediskit` opens no sockets. You can pair it with
any connection, a pipeline, a recorder in tests, or a fake server.

## Concepts

- `rediskit.command.Command` is one request. It is a dataclass with these
  fields:
  - `args`
  - `reply`, a `Reply` member that names the shape of the expected reply
  - `precision` and `read_timeout`, both optional
  - `first_key_pos`
  - `value`
  - `error`

  `name()` returns the lower-cased command name, for example `"set"`.
  `full_name()` adds the subcommand for `CLUSTER` and `COMMAND`, for
  example `"cluster info"`. `result()` returns `value`, or raises `error`
  if it is set.
- `rediskit.command.CommandBase` takes a *process* callable.
  `execute(command)` calls it. If the callable raises, the exception is
  stored on `command.error` and is not propagated.
- The command families are subclasses of `CommandBase`:

| Module                  | Class               | Option objects                                                   |
|-------------------------|---------------------|------------------------------------------------------------------|
| `rediskit.keys`         | `KeyCommands`       | `Sort`                                                           |
| `rediskit.strings`      | `StringCommands`    | `SetArgs`                                                        |
| `rediskit.bits`         | `BitCommands`       | `BitCount`                                                       |
| `rediskit.hashes`       | `HashCommands`      |                                                                  |
| `rediskit.lists`        | `ListCommands`      | `LPosArgs`                                                       |
| `rediskit.sets`         | `SetCommands`       | (also HyperLogLog: `pfadd`, `pfcount`, `pfmerge`)                |
| `rediskit.streams`      | `StreamCommands`    | `XAddArgs`, `XReadArgs`, `XReadGroupArgs`, `XPendingExtArgs`, `XClaimArgs`, `XAutoClaimArgs` |
| `rediskit.scan`         | `ScanCommands`      |                                                                  |
| `rediskit.sorted_sets`  | `SortedSetCommands` | `Z`, `ZWithKey`, `ZStore`, `ZAddArgs`, `ZRangeArgs`, `ZRangeBy`  |
| `rediskit.server`       | `ServerCommands`    | `GeoLocation`                                                    |

`ServerCommands` covers these areas:

- server administration
- `CLIENT` and `CONFIG`
- scripting with `eval`, `eval_sha` and `SCRIPT`
- pub/sub
- `CLUSTER`
- the geo commands `geo_add`, `geo_pos`, `geo_dist` and `geo_hash`

## Example

All classes share the same constructor, so you can combine the families you
need in one class:

```python
from datetime import timedelta

from rediskit.hashes import HashCommands
from rediskit.keys import KeyCommands
from rediskit.strings import StringCommands


class Client(KeyCommands, StringCommands, HashCommands):
    pass


sent = []

def process(command):
    sent.append(command)

rdb = Client(process)
rdb.ping()
rdb.set("greeting", "hello", timedelta(seconds=10))
rdb.hset("user:1", {"name": "Ada", "lang": "en"})

print([command.args for command in sent])
# [['ping'], ['set', 'greeting', 'hello', 'ex', 10],
#  ['hset', 'user:1', 'name', 'Ada', 'lang', 'en']]
```

Option objects also build their argument lists on their own:

- `Sort(...).args("mylist")` returns the arguments of a `SORT` command.
- `ZStore(...).args()` returns the keys, followed by `WEIGHTS` and
  `AGGREGATE`.
- `ZRangeArgs(...).args()` returns the arguments of `ZRANGE` after the
  command name. If `rev` is set together with `by_score` or `by_lex`, *stop*
  comes before *start*.

## Arguments and expirations

Some variadic methods accept their values in three forms: flat (`"k1", "v1"`),
as a single list, or as a single mapping. A mapping is expanded to key/value
pairs. These methods are:

- `mset` and `msetnx`
- `hset` and `hmset`
- `lpush`, `rpush`, `lpushx` and `rpushx`
- `sadd`, `srem` and `smismember`
- `pfadd`
- `zrem`
- `eval` and `eval_sha`

`rediskit.command.append_args` and `append_arg` implement this flattening.

Durations are `datetime.timedelta` values:

- `set`, `set_nx`, `set_xx`, `get_ex` and `set_args` send a whole number of
  seconds with `EX`. They send any other duration with `PX` in milliseconds.
- `format_ms` and `format_sec` turn a positive duration shorter than their
  unit into `1` and log a warning. They truncate any other duration toward
  zero.
- `use_precise(dur)` reports whether a duration needs milliseconds.
- `rediskit.command.KEEP_TTL` passed as an expiration to `set`, `set_nx` or
  `set_xx` sends `KEEPTTL`.
- A zero expiration in `get_ex` sends `PERSIST`.

## Errors

These calls raise `ValueError` before they build a command:

- `bit_pos` with more than two positions
- `zpopmax` or `zpopmin` with more than one count
- `memory_usage` with more than one sample count

`shutdown`, `shutdown_save` and `shutdown_nosave` treat an `EOFError` from
the process callable as success. If the server replies instead, they store
its reply text as a `RuntimeError` on the command.

## What rediskit does not do

- It has no network connection and no protocol encoder or decoder. The
  `Reply` tag on a command only states the expected reply shape. Sending the
  command and decoding the reply is up to the process callable.
- It provides no ready-made client class that combines all command
  families. Combine the families as in the example above.
- It has no commands that change connection state, such as `AUTH`,
  `SELECT`, `SWAPDB` or `CLIENT SETNAME`.
- It has no pipelines, transactions, connection pooling, or cluster and
  sentinel routing.