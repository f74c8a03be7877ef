"""Cache entries: a packed header describing an encoded formula and its data."""

import struct
from dataclasses import dataclass, field
from typing import Any

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_COUNT_MASK = (1 << 30) - 1
_FIELD24 = (1 << 24) - 1
_FIELD2 = (1 << 2) - 1
_MAX_DIRTY = 3

_FORMATS = {1: "<b", 2: "<H", 4: "<I"}


def _width(code):
    """Byte width of elements encoded with the given octet code."""
    return code if code in (1, 2) else 4


def _decode(data, width, count=None):
    usable = len(data) - len(data) % width
    if count is not None:
        usable = min(usable, count * width)
    return [value for (value,) in struct.iter_unpack(_FORMATS[width], data[:usable])]


def _values_line(values):
    return "".join(f"{value} " for value in values)


class DataInfo:
    """Bit-packed description of a cached formula plus usage statistics.

    The counter is 30 bits wide and the dirty flag saturates in 2 bits.
    Equality compares only the packed description, never the statistics.
    """

    __slots__ = ("_info1", "_info2", "_count", "_dirty")

    def __init__(self, sz_data=0, nb_var=0, nb_lit=0, nb_clause=0,
                 nb_octets_data=0, nb_octets_var=0, nb_octets_distrib=0):
        self._info1 = (nb_var | (nb_lit << 24) | (nb_clause << 48)) & _MASK64
        self._info2 = (nb_octets_data | (nb_octets_var << 2)
                       | (nb_octets_distrib << 4) | (sz_data << 6)) & _MASK32
        self._count = nb_var & _COUNT_MASK
        self._dirty = 0

    @property
    def sz_data(self):
        return self._info2 >> 6

    @sz_data.setter
    def sz_data(self, size):
        self._info2 = ((self._info2 & ((1 << 6) - 1)) | (size << 6)) & _MASK32

    @property
    def nb_octets_data(self):
        return self._info2 & _FIELD2

    @property
    def nb_octets_var(self):
        return (self._info2 >> 2) & _FIELD2

    @property
    def nb_octets_distrib(self):
        return (self._info2 >> 4) & _FIELD2

    @property
    def nb_clause(self):
        return (self._info1 >> 48) & _FIELD24

    @property
    def nb_lit(self):
        return (self._info1 >> 24) & _FIELD24

    @property
    def nb_var(self):
        return self._info1 & _FIELD24

    @property
    def count(self):
        return self._count

    @property
    def dirty(self):
        return self._dirty

    def nb_diff_size(self):
        """Number of distribution entries, derived from the other fields."""
        if not self.nb_octets_distrib:
            return 0
        rest = (self.sz_data - self.nb_lit * self.nb_octets_data
                - self.nb_var * self.nb_octets_var) & _MASK32
        return rest // self.nb_octets_distrib

    def reinit_count(self, value=0):
        self._count = value & _COUNT_MASK

    def inc_count(self, value=1):
        self._count = (self._count + value) & _COUNT_MASK

    def div_count(self):
        self._count >>= 1

    def dec_count(self, value=1):
        self._count = 0 if value > self._count else self._count - value

    def reinit_dirty(self):
        self._dirty = 0

    def inc_dirty(self):
        if self._dirty < _MAX_DIRTY:
            self._dirty += 1

    def dec_dirty(self):
        if self._dirty > 0:
            self._dirty -= 1

    def set_dirty(self, flag):
        self._dirty = 1 if flag else 0

    def __eq__(self, other):
        if not isinstance(other, DataInfo):
            return NotImplemented
        return self._info1 == other._info1 and self._info2 == other._info2

    __hash__ = None

    def __repr__(self):
        return (f"DataInfo(sz_data={self.sz_data}, nb_var={self.nb_var}, "
                f"nb_lit={self.nb_lit}, nb_clause={self.nb_clause}, "
                f"count={self.count}, dirty={self.dirty})")


@dataclass(eq=False)
class CacheBucket:
    """An encoded formula, its header and the value attached to it."""

    data: bytes = b""
    header: DataInfo = field(default_factory=DataInfo)
    value: Any = None

    def set(self, data, nb_var, nb_lit, nb_clause,
            nb_octets_data, nb_octets_var, nb_octets_distrib):
        """Store encoded data and rebuild the header describing it."""
        self.data = bytes(data)
        self.header = DataInfo(len(self.data), nb_var, nb_lit, nb_clause,
                               nb_octets_data, nb_octets_var, nb_octets_distrib)

    def lock(self, value):
        """Attach a value to the bucket and reset its usage counter."""
        self.header.reinit_count()
        self.value = value

    def same_header(self, other):
        return self.header == other.header

    def describe(self):
        """Human-readable dump of the header and the decoded data."""
        h = self.header
        data = self.data
        var_width = _width(h.nb_octets_var)
        distrib_width = _width(h.nb_octets_distrib)
        clause_width = _width(h.nb_octets_data)
        nb_diff = h.nb_diff_size()

        distrib_start = h.nb_var * var_width
        clause_start = distrib_start + nb_diff * distrib_width

        lines = [
            f"Bucket size({h.sz_data}) nbVar({h.nb_var}) nbClause({h.nb_clause}) "
            f"nbLit({h.nb_lit}) nbDiff({nb_diff}) count({h.count}) dirty({h.dirty})",
            f"Var: {h.nb_var}({h.nb_octets_var})",
            _values_line(_decode(data[:distrib_start], var_width, h.nb_var)),
            f"Distribution: {nb_diff}({h.nb_octets_distrib})",
            _values_line(_decode(data[distrib_start:clause_start], distrib_width, nb_diff)),
            f"Clause: {h.nb_clause}({h.nb_octets_data})",
            _values_line(_decode(data[clause_start:h.sz_data], clause_width)),
            "All data: " + "".join(f"{byte:X} " for byte in data[:h.sz_data]),
            "------------------------------------------",
        ]
        return "\n".join(lines) + "\n"