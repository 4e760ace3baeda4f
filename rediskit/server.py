"""Server, scripting, pub/sub, cluster and geo commands."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from rediskit.command import Command, CommandBase, Reply, append_args, format_ms


@dataclass
class GeoLocation:
    """A named point on the globe, with the distance and hash a query may return."""

    name: str = ""
    longitude: float = 0.0
    latitude: float = 0.0
    dist: float = 0.0
    geo_hash: int = 0


class ServerCommands(CommandBase):
    """Commands on the server, scripts, pub/sub, the cluster and geo indexes."""

    def bg_rewrite_aof(self) -> Command:
        return self._call(Reply.STATUS, "bgrewriteaof")

    def bg_save(self) -> Command:
        return self._call(Reply.STATUS, "bgsave")

    def client_kill(self, ip_port: str) -> Command:
        return self._call(Reply.STATUS, "client", "kill", ip_port)

    def client_kill_by_filter(self, *filters: str) -> Command:
        """CLIENT KILL <option> [value] ... in the newer filter syntax."""
        return self._call(Reply.INT, "client", "kill", *filters)

    def client_list(self) -> Command:
        return self._call(Reply.STRING, "client", "list")

    def client_pause(self, dur: timedelta) -> Command:
        return self._call(Reply.BOOL, "client", "pause", format_ms(dur))

    def client_id(self) -> Command:
        return self._call(Reply.INT, "client", "id")

    def client_unblock(self, client_id: int) -> Command:
        return self._call(Reply.INT, "client", "unblock", client_id)

    def client_unblock_with_error(self, client_id: int) -> Command:
        return self._call(Reply.INT, "client", "unblock", client_id, "error")

    def config_get(self, parameter: str) -> Command:
        return self._call(Reply.SLICE, "config", "get", parameter)

    def config_reset_stat(self) -> Command:
        return self._call(Reply.STATUS, "config", "resetstat")

    def config_set(self, parameter: str, value: str) -> Command:
        return self._call(Reply.STATUS, "config", "set", parameter, value)

    def config_rewrite(self) -> Command:
        return self._call(Reply.STATUS, "config", "rewrite")

    def dbsize(self) -> Command:
        return self._call(Reply.INT, "dbsize")

    def flush_all(self) -> Command:
        return self._call(Reply.STATUS, "flushall")

    def flush_all_async(self) -> Command:
        return self._call(Reply.STATUS, "flushall", "async")

    def flush_db(self) -> Command:
        return self._call(Reply.STATUS, "flushdb")

    def flush_db_async(self) -> Command:
        return self._call(Reply.STATUS, "flushdb", "async")

    def info(self, *sections: str) -> Command:
        """INFO with an optional section; only the first one given is sent."""
        return self._call(Reply.STRING, "info", *sections[:1])

    def last_save(self) -> Command:
        return self._call(Reply.INT, "lastsave")

    def save(self) -> Command:
        return self._call(Reply.STATUS, "save")

    def _shutdown(self, modifier: str) -> Command:
        args: list[Any] = ["shutdown"]
        if modifier:
            args.append(modifier)
        command = self._call(Reply.STATUS, *args)
        if command.error is not None:
            if isinstance(command.error, EOFError):
                # The server closed the connection: it quit as expected.
                command.error = None
        else:
            # The server did not quit; the reply holds the reason.
            command.error = RuntimeError(command.value)
            command.value = ""
        return command

    def shutdown(self) -> Command:
        return self._shutdown("")

    def shutdown_save(self) -> Command:
        return self._shutdown("save")

    def shutdown_nosave(self) -> Command:
        return self._shutdown("nosave")

    def slave_of(self, host: str, port: str) -> Command:
        return self._call(Reply.STATUS, "slaveof", host, port)

    def slowlog_get(self, num: int) -> Command:
        return self._call(Reply.SLOWLOG, "slowlog", "get", num)

    def time(self) -> Command:
        return self._call(Reply.TIME, "time")

    def debug_object(self, key: str) -> Command:
        return self._call(Reply.STRING, "debug", "object", key)

    def read_only(self) -> Command:
        return self._call(Reply.STATUS, "readonly")

    def read_write(self) -> Command:
        return self._call(Reply.STATUS, "readwrite")

    def memory_usage(self, key: str, *samples: int) -> Command:
        """MEMORY USAGE with an optional single SAMPLES count."""
        args: list[Any] = ["memory", "usage", key]
        if samples:
            if len(samples) != 1:
                raise ValueError("MemoryUsage expects single sample count")
            args += ["SAMPLES", samples[0]]
        return self._call(Reply.INT, *args, first_key_pos=2)

    def _eval(self, name: str, script: str, keys: list[str], args: tuple[Any, ...]) -> Command:
        cmd_args = append_args([name, script, len(keys), *keys], args)
        return self._call(Reply.CMD, *cmd_args, first_key_pos=3)

    def eval(self, script: str, keys: list[str], *args: Any) -> Command:
        return self._eval("eval", script, keys, args)

    def eval_sha(self, sha1: str, keys: list[str], *args: Any) -> Command:
        return self._eval("evalsha", sha1, keys, args)

    def script_exists(self, *hashes: str) -> Command:
        return self._call(Reply.BOOL_SLICE, "script", "exists", *hashes)

    def script_flush(self) -> Command:
        return self._call(Reply.STATUS, "script", "flush")

    def script_kill(self) -> Command:
        return self._call(Reply.STATUS, "script", "kill")

    def script_load(self, script: str) -> Command:
        return self._call(Reply.STRING, "script", "load", script)

    def publish(self, channel: str, message: Any) -> Command:
        """Post the message to the channel."""
        return self._call(Reply.INT, "publish", channel, message)

    def pubsub_channels(self, pattern: str) -> Command:
        """PUBSUB CHANNELS; the pattern "*" is left out as it matches everything."""
        args: list[Any] = ["pubsub", "channels"]
        if pattern != "*":
            args.append(pattern)
        return self._call(Reply.STRING_SLICE, *args)

    def pubsub_numsub(self, *channels: str) -> Command:
        return self._call(Reply.STRING_INT_MAP, "pubsub", "numsub", *channels)

    def pubsub_numpat(self) -> Command:
        return self._call(Reply.INT, "pubsub", "numpat")

    def cluster_slots(self) -> Command:
        return self._call(Reply.CLUSTER_SLOTS, "cluster", "slots")

    def cluster_nodes(self) -> Command:
        return self._call(Reply.STRING, "cluster", "nodes")

    def cluster_meet(self, host: str, port: str) -> Command:
        return self._call(Reply.STATUS, "cluster", "meet", host, port)

    def cluster_forget(self, node_id: str) -> Command:
        return self._call(Reply.STATUS, "cluster", "forget", node_id)

    def cluster_replicate(self, node_id: str) -> Command:
        return self._call(Reply.STATUS, "cluster", "replicate", node_id)

    def cluster_reset_soft(self) -> Command:
        return self._call(Reply.STATUS, "cluster", "reset", "soft")

    def cluster_reset_hard(self) -> Command:
        return self._call(Reply.STATUS, "cluster", "reset", "hard")

    def cluster_info(self) -> Command:
        return self._call(Reply.STRING, "cluster", "info")

    def cluster_key_slot(self, key: str) -> Command:
        return self._call(Reply.INT, "cluster", "keyslot", key)

    def cluster_get_keys_in_slot(self, slot: int, count: int) -> Command:
        return self._call(Reply.STRING_SLICE, "cluster", "getkeysinslot", slot, count)

    def cluster_count_failure_reports(self, node_id: str) -> Command:
        return self._call(Reply.INT, "cluster", "count-failure-reports", node_id)

    def cluster_count_keys_in_slot(self, slot: int) -> Command:
        return self._call(Reply.INT, "cluster", "countkeysinslot", slot)

    def cluster_del_slots(self, *slots: int) -> Command:
        return self._call(Reply.STATUS, "cluster", "delslots", *slots)

    def cluster_del_slots_range(self, min_slot: int, max_slot: int) -> Command:
        """CLUSTER DELSLOTS for every slot from min_slot to max_slot inclusive."""
        return self.cluster_del_slots(*range(min_slot, max_slot + 1))

    def cluster_save_config(self) -> Command:
        return self._call(Reply.STATUS, "cluster", "saveconfig")

    def cluster_slaves(self, node_id: str) -> Command:
        return self._call(Reply.STRING_SLICE, "cluster", "slaves", node_id)

    def cluster_failover(self) -> Command:
        return self._call(Reply.STATUS, "cluster", "failover")

    def cluster_add_slots(self, *slots: int) -> Command:
        return self._call(Reply.STATUS, "cluster", "addslots", *slots)

    def cluster_add_slots_range(self, min_slot: int, max_slot: int) -> Command:
        """CLUSTER ADDSLOTS for every slot from min_slot to max_slot inclusive."""
        return self.cluster_add_slots(*range(min_slot, max_slot + 1))

    def geo_add(self, key: str, *locations: GeoLocation) -> Command:
        args: list[Any] = ["geoadd", key]
        for loc in locations:
            args += [loc.longitude, loc.latitude, loc.name]
        return self._call(Reply.INT, *args)

    def geo_pos(self, key: str, *members: str) -> Command:
        return self._call(Reply.GEO_POS, "geopos", key, *members)

    def geo_dist(self, key: str, member1: str, member2: str, unit: str) -> Command:
        """GEODIST; an empty unit means kilometres."""
        return self._call(Reply.FLOAT, "geodist", key, member1, member2, unit or "km")

    def geo_hash(self, key: str, *members: str) -> Command:
        return self._call(Reply.STRING_SLICE, "geohash", key, *members)