"""GNSS session state and the records built from it."""

from gnss_decoder.gnss.session import GNSSSession
from gnss_decoder.gnss.store import StateStore
from gnss_decoder.gnss.types import GGAData, RMCData, VTGData, ZDAData

__all__ = [
    "GGAData",
    "GNSSSession",
    "RMCData",
    "StateStore",
    "VTGData",
    "ZDAData",
]
