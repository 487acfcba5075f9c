from .boundaries import BOUNDARY_OFFSETS, N_BINS, WINDOW_SECONDS, bin_index, boundary_times
from .balances import OwnerBalanceTable
from .deltas import OwnerDeltas, extract_owner_deltas, estimate_volume_lamports
from .snapshot import BoundarySnapshotter
from .types import Bin, Snapshot, WindowReport

__all__ = [
    "BOUNDARY_OFFSETS",
    "N_BINS",
    "WINDOW_SECONDS",
    "bin_index",
    "boundary_times",
    "OwnerBalanceTable",
    "OwnerDeltas",
    "extract_owner_deltas",
    "estimate_volume_lamports",
    "BoundarySnapshotter",
    "Bin",
    "Snapshot",
    "WindowReport",
]
