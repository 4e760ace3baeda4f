"""Command objects, duration formatting and argument flattening."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

SECOND = timedelta(seconds=1)
MILLISECOND = timedelta(milliseconds=1)

# Passed as an expiration to keep the existing TTL of a key (requires server >= 6.0).
KEEP_TTL = timedelta(microseconds=-1)

_FULL_NAME_COMMANDS = frozenset({"cluster", "command"})


class Reply(enum.Enum):
    """The shape of the reply a command expects."""

    CMD = "cmd"
    STATUS = "status"
    INT = "int"
    BOOL = "bool"
    STRING = "string"
    FLOAT = "float"
    DURATION = "duration"
    TIME = "time"
    SLICE = "slice"
    STRING_SLICE = "string_slice"
    INT_SLICE = "int_slice"
    BOOL_SLICE = "bool_slice"
    FLOAT_SLICE = "float_slice"
    STRING_STRING_MAP = "string_string_map"
    STRING_INT_MAP = "string_int_map"
    STRING_STRUCT_MAP = "string_struct_map"
    SCAN = "scan"
    COMMANDS_INFO = "commands_info"
    XMESSAGE_SLICE = "xmessage_slice"
    XSTREAM_SLICE = "xstream_slice"
    XPENDING = "xpending"
    XPENDING_EXT = "xpending_ext"
    XAUTOCLAIM = "xautoclaim"
    XAUTOCLAIM_JUST_ID = "xautoclaim_just_id"
    XINFO_CONSUMERS = "xinfo_consumers"
    XINFO_GROUPS = "xinfo_groups"
    XINFO_STREAM = "xinfo_stream"
    XINFO_STREAM_FULL = "xinfo_stream_full"
    ZWITH_KEY = "zwith_key"
    ZSLICE = "zslice"
    GEO_LOCATION = "geo_location"
    GEO_POS = "geo_pos"
    CLUSTER_SLOTS = "cluster_slots"
    SLOWLOG = "slowlog"


@dataclass
class Command:
    """A single command: its arguments, the expected reply and its outcome."""

    args: list[Any]
    reply: Reply = Reply.CMD
    precision: timedelta | None = None
    read_timeout: timedelta | None = None
    first_key_pos: int = 1
    value: Any = None
    error: Exception | None = field(default=None, repr=False)

    def name(self) -> str:
        """The lower-cased command name, or "" if the first argument is not a string."""
        if self.args and isinstance(self.args[0], str):
            return self.args[0].lower()
        return ""

    def full_name(self) -> str:
        """The name including the subcommand for container commands such as CLUSTER."""
        name = self.name()
        if name in _FULL_NAME_COMMANDS and len(self.args) > 1:
            sub = self.args[1]
            if isinstance(sub, str):
                return f"{name} {sub}"
        return name

    def result(self) -> Any:
        """Return the reply value, raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value


def _truncate(dur: timedelta, unit: timedelta) -> int:
    micros = dur // timedelta(microseconds=1)
    unit_micros = unit // timedelta(microseconds=1)
    whole = abs(micros) // unit_micros
    return whole if micros >= 0 else -whole


def use_precise(dur: timedelta) -> bool:
    """Whether the duration needs millisecond precision."""
    return dur < SECOND or dur % SECOND != timedelta(0)


def format_ms(dur: timedelta) -> int:
    """Whole milliseconds of a duration, never less than 1 for a positive one."""
    if timedelta(0) < dur < MILLISECOND:
        logger.warning(
            "specified duration is %s, but minimal supported value is %s - truncating to 1ms",
            dur,
            MILLISECOND,
        )
        return 1
    return _truncate(dur, MILLISECOND)


def format_sec(dur: timedelta) -> int:
    """Whole seconds of a duration, never less than 1 for a positive one."""
    if timedelta(0) < dur < SECOND:
        logger.warning(
            "specified duration is %s, but minimal supported value is %s - truncating to 1s",
            dur,
            SECOND,
        )
        return 1
    return _truncate(dur, SECOND)


def append_args(dst: list[Any], src: list[Any] | tuple[Any, ...]) -> list[Any]:
    """Append arguments, flattening a single sequence or mapping argument."""
    if len(src) == 1:
        return append_arg(dst, src[0])
    return [*dst, *src]


def append_arg(dst: list[Any], arg: Any) -> list[Any]:
    """Append one argument; sequences are spread and mappings become key/value pairs."""
    if isinstance(arg, (list, tuple)):
        return [*dst, *arg]
    if isinstance(arg, Mapping):
        return [*dst, *(item for pair in arg.items() for item in pair)]
    return [*dst, arg]


class CommandBase:
    """Runs commands through a processing callable that fills in their outcome."""

    def __init__(self, process: Callable[[Command], Any]) -> None:
        self._process = process

    def execute(self, command: Command) -> Command:
        """Process the command; a raised error is stored on the command."""
        try:
            self._process(command)
        except Exception as exc:  # the command carries its own error
            command.error = exc
        return command

    def _call(self, reply: Reply, *args: Any, **options: Any) -> Command:
        return self.execute(Command(list(args), reply, **options))