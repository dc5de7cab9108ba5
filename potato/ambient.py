"""Cluster visibility tests and ambient sound emitters that follow them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def is_cluster_visible(
    bitsets: Sequence[int], bytes_per_cluster: int, from_cluster: int, to_cluster: int
) -> bool:
    """Whether ``to_cluster`` is in the potentially visible set of ``from_cluster``."""
    if from_cluster < 0 or to_cluster < 0:
        raise ValueError(f"cluster indices must be non-negative, got {from_cluster}, {to_cluster}")
    index = from_cluster * bytes_per_cluster + (to_cluster >> 3)
    return bool(bitsets[index] & (1 << (to_cluster & 7)))


@dataclass
class AmbientSound:
    """A looping positional sound placed in a map cluster and area."""

    filename: str
    origin: tuple[float, float, float]
    cluster: int = 0
    area: int = 0
    is_visible: bool = False

    def update_visibility(
        self,
        bitsets: Sequence[int],
        bytes_per_cluster: int,
        player_cluster: int,
        player_area: int,
    ) -> bool:
        """Recompute visibility from the player's cluster and area.

        The sound is audible when its cluster is visible and it shares the
        player's area. Returns ``True`` when visibility changed, in which case the
        sound should be started or stopped to match ``is_visible``.
        """
        visible = is_cluster_visible(bitsets, bytes_per_cluster, player_cluster, self.cluster)
        if visible:
            visible = player_area == self.area
        if visible == self.is_visible:
            return False
        self.is_visible = visible
        return True