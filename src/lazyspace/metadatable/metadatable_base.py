from collections import abc
from collections.abc import Mapping, MutableMapping
from copy import deepcopy
from typing import Any, Optional, final

# Snapshots are plain dicts so that they can be dumped to JSON next to the
# data that was taken at the sampled points.
Snapshot = dict[str, Any]


def deep_update(
    dest: MutableMapping[str, Any], update: Mapping[str, Any]
) -> MutableMapping[str, Any]:
    """
    Recursively merge one metadata mapping into another.

    Only dives into nested dicts; lists and scalars get replaced completely.
    If the original value is a dictionary and the new value is not, or vice
    versa, the value is also replaced completely. New values are deep copied
    so that later changes by the caller do not leak into ``dest``.
    """
    for k, v_update in update.items():
        v_dest = dest.get(k)
        if isinstance(v_update, abc.Mapping) and isinstance(v_dest, abc.MutableMapping):
            deep_update(v_dest, v_update)
        else:
            dest[k] = deepcopy(v_update)
    return dest


class Metadatable:
    def __init__(self, metadata: Optional["Mapping[str, Any]"] = None):
        self.metadata: dict[str, Any] = {}
        self.load_metadata(metadata or {})

    def load_metadata(self, metadata: "Mapping[str, Any]") -> None:
        """
        Load metadata into this classes metadata dictionary.

        Args:
            metadata: Metadata to load.
        """
        deep_update(self.metadata, metadata)

    @final
    def snapshot(self) -> Snapshot:
        """
        Decorate a snapshot dictionary with metadata.
        DO NOT override this method if you want metadata in the snapshot
        instead, override :meth:`snapshot_base`.

        Returns:
            Base snapshot.
        """

        snap = self.snapshot_base()

        if len(self.metadata):
            snap["metadata"] = self.metadata

        return snap

    def snapshot_base(self) -> Snapshot:
        """
        Override this with the primary information for a subclass.
        """
        return {}
