"""
Codec Module

Pure, stateless translation between Prometheus JSON responses and typed
result values.

- **json_value.py**: JSON parsing/serialization and structure helpers
- **sample_codec.py**: ``[epoch, "value"]`` pairs and sentinel tokens
- **envelope_codec.py**: Envelope decoding and ``data`` shape dispatch
"""

from prometheus_query.codec.envelope_codec import (
    classify_data,
    decode_envelope,
    decode_query_result,
    decode_result_data,
    encode_envelope,
    encode_query_result,
    encode_result_data,
)
from prometheus_query.codec.json_value import dump_json, parse_json
from prometheus_query.codec.sample_codec import (
    decode_sample,
    decode_string_sample,
    encode_sample,
    encode_string_sample,
    format_sample_value,
    parse_sample_value,
)

__all__ = [
    "classify_data",
    "decode_envelope",
    "decode_query_result",
    "decode_result_data",
    "decode_sample",
    "decode_string_sample",
    "dump_json",
    "encode_envelope",
    "encode_query_result",
    "encode_result_data",
    "encode_sample",
    "encode_string_sample",
    "format_sample_value",
    "parse_json",
    "parse_sample_value",
]
