"""Sentence tokenizing, type detection and routing.

A line is decoded in three steps:
    1. Tokenize: drop the line terminator, turn the checksum delimiter '*'
       into a field delimiter and split on ','.
    2. Detect the sentence type from the address field. The address is
       '$' + 2-character talker ID + 3-character sentence type, so
       "$GPGGA" and "$GNGGA" are both GGA.
    3. Route the tokens to the decoder of that type, if the type is both
       supported and enabled.

Example:
    >>> dispatcher = SentenceDispatcher()
    >>> dispatcher.parse_line("$GPGSA,A,3,29,26,05,10,02,27,08,15,,,,,1.8,1.0,1.5*3E")
    (<SentenceType.GSA: 'GSA'>, {'mode': 'A', 'sat_ids': [29, 26, 5, 10, 2, 27, 8, 15]})
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from gnss_decoder.errors import InvalidConfigurationError
from gnss_decoder.nmea.gga import decode_gga
from gnss_decoder.nmea.gsa import decode_gsa
from gnss_decoder.nmea.gsv import decode_gsv
from gnss_decoder.nmea.rmc import decode_rmc
from gnss_decoder.nmea.types import ParsedFields, SentenceType
from gnss_decoder.nmea.vtg import decode_vtg
from gnss_decoder.nmea.zda import decode_zda

__all__ = [
    "DEFAULT_TYPES",
    "SUPPORTED_TYPES",
    "SentenceDispatcher",
    "SentenceFilter",
    "detect_sentence_type",
    "split_sentence",
]

logger = logging.getLogger(__name__)

SUPPORTED_TYPES = tuple(SentenceType)
DEFAULT_TYPES = SUPPORTED_TYPES

# '$' + talker ID + sentence type
_MINIMUM_LINE_LENGTH = 6
_START_MARKER = "$"
_FIELD_DELIMITER = ","
_CHECKSUM_DELIMITER = "*"
_TYPE_SLICE = slice(3, 6)

_DECODERS: dict[SentenceType, Callable[[Sequence[str]], ParsedFields]] = {
    SentenceType.GGA: decode_gga,
    SentenceType.GSA: decode_gsa,
    SentenceType.GSV: decode_gsv,
    SentenceType.RMC: decode_rmc,
    SentenceType.VTG: decode_vtg,
    SentenceType.ZDA: decode_zda,
}

TypeSpec = SentenceType | str | Iterable[SentenceType | str]
LineResult = tuple[SentenceType | str, ParsedFields | None]


def _to_sentence_type(item: object) -> SentenceType | None:
    try:
        return SentenceType(item)
    except (ValueError, TypeError):
        return None


class SentenceFilter:
    """The set of sentence types a dispatcher is allowed to decode.

    Args:
        types: A single type or an iterable of types, each given as a
            ``SentenceType`` or its 3-letter string (default: all six).

    Raises:
        InvalidConfigurationError: If any requested type is not supported.
            The error lists every offending item, not just the first.
    """

    def __init__(self, types: TypeSpec | None = None) -> None:
        if types is None:
            types = DEFAULT_TYPES
        if isinstance(types, str) or not isinstance(types, Iterable):
            types = [types]

        requested = list(types)
        offending = [t for t in requested if _to_sentence_type(t) is None]
        if offending:
            raise InvalidConfigurationError(offending)

        self._enabled = tuple(
            dict.fromkeys(SentenceType(t) for t in requested)
        )

    @property
    def enabled(self) -> tuple[SentenceType, ...]:
        """Enabled types in the order they were configured."""
        return self._enabled

    def is_enabled(self, sentence_type: SentenceType | str) -> bool:
        return sentence_type in self._enabled

    def __repr__(self) -> str:
        names = ", ".join(t.value for t in self._enabled)
        return f"SentenceFilter([{names}])"


def split_sentence(line: str) -> list[str]:
    """Tokenize a raw NMEA line.

    The checksum becomes the last token; it is not verified.

    Example:
        >>> split_sentence("$GPZDA,085120.307,13,06,2019,09,00*10\\r\\n")
        ['$GPZDA', '085120.307', '13', '06', '2019', '09', '00', '10']
    """
    line = line.rstrip("\r\n")
    return line.replace(_CHECKSUM_DELIMITER, _FIELD_DELIMITER).split(
        _FIELD_DELIMITER
    )


def detect_sentence_type(address: str) -> SentenceType | str:
    """Return the sentence type of an address field such as ``"$GPGGA"``.

    Unsupported codes are returned as plain strings (``"$GPGLL"`` -> ``"GLL"``).
    """
    code = address[_TYPE_SLICE]
    sentence_type = _to_sentence_type(code)
    if sentence_type is None:
        return code
    return sentence_type


class SentenceDispatcher:
    """Decodes single NMEA lines, gated by a SentenceFilter.

    Args:
        types: Enabled sentence types, see ``SentenceFilter``.
    """

    def __init__(self, types: TypeSpec | None = None) -> None:
        self._filter = SentenceFilter(types)

    @property
    def sentence_filter(self) -> SentenceFilter:
        return self._filter

    def parse_line(self, line: str | None) -> LineResult | None:
        """Decode one NMEA line.

        Returns:
            None if the line is empty, shorter than 6 characters, or does not
            start with '$'. Otherwise a ``(sentence_type, fields)`` tuple,
            where ``fields`` is None if the type is unsupported or disabled.
        """
        if not line or len(line) < _MINIMUM_LINE_LENGTH:
            return None

        logger.debug("NMEA line: %r", line)

        tokens = split_sentence(line)
        if not tokens[0].startswith(_START_MARKER):
            logger.debug("Rejected line without start marker: %r", line)
            return None

        sentence_type = detect_sentence_type(tokens[0])
        decoder = _DECODERS.get(sentence_type)
        if decoder is None:
            logger.debug("Unsupported sentence type %s", sentence_type)
            return sentence_type, None

        if not self._filter.is_enabled(sentence_type):
            logger.debug("Sentence type %s is disabled", sentence_type)
            return sentence_type, None

        return sentence_type, decoder(tokens)
