"""GNSSSession: decode NMEA lines into accumulated receiver state.

A session owns one SentenceDispatcher and one StateStore. Every decoded line
is merged into the store; records such as the position fix are computed from
the store on demand.

Usage::

    session = GNSSSession(types=["GGA", "RMC"])
    session.parse(text)          # many lines at once
    session.feed_line(line)      # or one at a time
    fix = session.position_fix()

A session is not thread-safe. Callers sharing one across threads must
serialize access themselves.
"""

import logging
from typing import cast

from gnss_decoder.gnss.store import StateStore
from gnss_decoder.gnss.types import GGAData, RMCData, VTGData, ZDAData
from gnss_decoder.nmea.dispatcher import LineResult, SentenceDispatcher, TypeSpec
from gnss_decoder.nmea.fields import signed_degrees
from gnss_decoder.nmea.types import Satellite, SentenceType

__all__ = ["GNSSSession"]

logger = logging.getLogger(__name__)


class GNSSSession:
    """Decoder plus accumulated state for one GNSS receiver.

    Args:
        types: Sentence types to decode: a single type or an iterable of
            ``SentenceType`` members or their 3-letter strings
            (default: all supported types). Other sentences are ignored.

    Raises:
        InvalidConfigurationError: If ``types`` names an unsupported type.
    """

    def __init__(self, types: TypeSpec | None = None) -> None:
        self._dispatcher = SentenceDispatcher(types)
        self._store = StateStore()

    @property
    def enabled_types(self) -> tuple[SentenceType, ...]:
        return self._dispatcher.sentence_filter.enabled

    @property
    def state(self) -> StateStore:
        """The live store; mutations are visible to the record builders."""
        return self._store

    # --- decoding -------------------------------------------------------------

    def parse_line(self, line: str | None) -> LineResult | None:
        """Decode one line without touching the session state.

        See ``SentenceDispatcher.parse_line``.
        """
        return self._dispatcher.parse_line(line)

    def feed_line(self, line: str | None) -> LineResult | None:
        """Decode one line and merge its fields into the session state."""
        result = self._dispatcher.parse_line(line)
        if result is not None and result[1] is not None:
            self._store.merge(result[1])
        return result

    def parse(self, lines: str) -> StateStore:
        """Decode every line of ``lines`` and return the merged state.

        Lines are separated by ``\\n`` only; a trailing ``\\r`` is stripped by
        the dispatcher. Later sentences overwrite earlier values for the keys
        they share.
        """
        count = 0
        for line in lines.split("\n"):
            result = self.feed_line(line)
            if result is not None and result[1] is not None:
                count += 1
        logger.debug("Merged %d decoded sentence(s)", count)
        return self._store

    def reset(self) -> None:
        """Forget all accumulated state."""
        self._store.clear()

    # --- record builders ------------------------------------------------------

    def _get(self, key: str):
        return self._store.get(key)

    def latitude(self) -> float | None:
        """Latitude in decimal degrees, negative in the southern hemisphere."""
        return signed_degrees(self._get("lat_raw"), self._get("ns"), negative="S")

    def longitude(self) -> float | None:
        """Longitude in decimal degrees, negative in the western hemisphere."""
        return signed_degrees(self._get("lng_raw"), self._get("ew"), negative="W")

    def position_fix(self) -> GGAData:
        return GGAData(
            utc_time=self._get("utc"),
            latitude_degrees=self.latitude(),
            longitude_degrees=self.longitude(),
            horizontal_dilution_of_precision=self._get("hdr"),
            num_satellites=self._get("sat_cnt"),
        )

    def velocity(self) -> VTGData:
        return VTGData(
            track_true_degrees=self._get("ttmg"),
            track_magnetic_degrees=self._get("mtmg"),
            speed_knots=self._get("gsk"),
            speed_kilometers_per_hour=self._get("gskph"),
        )

    def recommended_minimum(self) -> RMCData:
        return RMCData(
            utc_time=self._get("utc"),
            status=self._get("status"),
            latitude_degrees=self.latitude(),
            longitude_degrees=self.longitude(),
            speed_knots=self._get("gsk"),
            track_true_degrees=self._get("ttmg"),
            date=self._get("date"),
        )

    def time_and_date(self) -> ZDAData:
        return ZDAData(
            utc_time=self._get("utc"),
            day=self._get("day"),
            month=self._get("month"),
            year=self._get("year"),
            zone_hours=self._get("tzone_h"),
            zone_minutes=self._get("tzone_m"),
        )

    def satellites(self) -> list[Satellite]:
        """Satellites of the most recent GSV line."""
        return list(cast(list[Satellite], self._store.get("sat", [])))

    def satellite_ids(self) -> list[int]:
        """IDs of the satellites used in the fix, from the latest GSA."""
        return list(cast(list[int], self._store.get("sat_ids", [])))
