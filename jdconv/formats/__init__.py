"""Record file formats and the JX-8P patch extractor."""

from jdconv.formats.jx8p import JX8PPatch, extract_from_sysex, read_sysex_stream
from jdconv.formats.parameter_block import block_size, pack_parameters, unpack_parameters
from jdconv.formats.records import RecordReader, RecordWriter, record_from_dict, record_to_dict

__all__ = [
    "JX8PPatch",
    "extract_from_sysex",
    "read_sysex_stream",
    "block_size",
    "pack_parameters",
    "unpack_parameters",
    "RecordReader",
    "RecordWriter",
    "record_from_dict",
    "record_to_dict",
]
