#
# BTClimate - library to decode Bluetooth climate sensor advertisements.
#
# Copyright (C) 2022 by Artur Wroblewski <wrobell@riseup.net>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
Reader of binary data with bounds checking.
"""

import struct

from .error import DataReadError

U8_FMT = struct.Struct('<B')
U16_LE_FMT = struct.Struct('<H')
I16_LE_FMT = struct.Struct('<h')
U32_BE_FMT = struct.Struct('>I')

class ByteReader:
    """
    Read values from a byte buffer, advancing a cursor.

    Each read checks if there is enough data in the buffer and raises
    `DataReadError` if there is not.
    """
    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        """
        Number of bytes left to read.
        """
        return len(self._data) - self._pos

    def skip(self, size: int) -> None:
        self._take(size)

    def read_array(self, size: int) -> bytes:
        return bytes(self._take(size))

    def read_u8(self) -> int:
        return self._unpack(U8_FMT)

    def read_u16_le(self) -> int:
        return self._unpack(U16_LE_FMT)

    def read_i16_le(self) -> int:
        return self._unpack(I16_LE_FMT)

    def read_u32_be(self) -> int:
        return self._unpack(U32_BE_FMT)

    def _unpack(self, fmt: struct.Struct) -> int:
        value, = fmt.unpack(self._take(fmt.size))
        return value  # type: ignore

    def _take(self, size: int) -> memoryview:
        if size < 0:
            raise ValueError('Negative read size: {}'.format(size))

        if size > self.remaining:
            raise DataReadError(
                'Cannot read {} bytes at offset {}, {} bytes left'
                .format(size, self._pos, self.remaining)
            )
        start = self._pos
        self._pos += size
        return self._data[start:self._pos]

# vim: sw=4:et:ai
