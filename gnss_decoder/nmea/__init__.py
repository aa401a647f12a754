"""NMEA 0183 decoders for GGA, GSA, GSV, RMC, VTG and ZDA sentences."""

from gnss_decoder.nmea.dispatcher import (
    DEFAULT_TYPES,
    SUPPORTED_TYPES,
    SentenceDispatcher,
    SentenceFilter,
    detect_sentence_type,
    split_sentence,
)
from gnss_decoder.nmea.fields import signed_degrees, to_decimal_degrees
from gnss_decoder.nmea.gga import GGA_FIELDS, decode_gga
from gnss_decoder.nmea.gsa import decode_gsa
from gnss_decoder.nmea.gsv import decode_gsv
from gnss_decoder.nmea.rmc import RMC_FIELDS, decode_rmc
from gnss_decoder.nmea.types import (
    FieldDescriptor,
    FieldValue,
    ParsedFields,
    Satellite,
    SentenceType,
    ValueKind,
)
from gnss_decoder.nmea.vtg import VTG_FIELDS, decode_vtg
from gnss_decoder.nmea.zda import ZDA_FIELDS, decode_zda

__all__ = [
    "DEFAULT_TYPES",
    "GGA_FIELDS",
    "RMC_FIELDS",
    "SUPPORTED_TYPES",
    "VTG_FIELDS",
    "ZDA_FIELDS",
    "FieldDescriptor",
    "FieldValue",
    "ParsedFields",
    "Satellite",
    "SentenceDispatcher",
    "SentenceFilter",
    "SentenceType",
    "ValueKind",
    "decode_gga",
    "decode_gsa",
    "decode_gsv",
    "decode_rmc",
    "decode_vtg",
    "decode_zda",
    "detect_sentence_type",
    "signed_degrees",
    "split_sentence",
    "to_decimal_degrees",
]
