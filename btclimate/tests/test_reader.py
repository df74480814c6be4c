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
Tests of byte reader.
"""

from btclimate.error import DataReadError
from btclimate.reader import ByteReader

import pytest

def test_read() -> None:
    """
    Test reading values from a buffer.
    """
    reader = ByteReader(b'\x01\x02\x03\xfe\xff\x01\x02\x03\x04\x05')
    reader.skip(1)
    assert reader.read_u16_le() == 0x0302
    assert reader.read_i16_le() == -2
    assert reader.read_u32_be() == 0x01020304
    assert reader.remaining == 1
    assert reader.read_array(1) == b'\x05'
    assert reader.remaining == 0

@pytest.mark.parametrize('method', ['read_u8', 'read_u16_le', 'read_i16_le', 'read_u32_be'])
def test_read_past_end(method: str) -> None:
    """
    Test if error is raised on read past the end of a buffer.
    """
    reader = ByteReader(b'')
    with pytest.raises(DataReadError):
        getattr(reader, method)()

def test_read_array_past_end() -> None:
    """
    Test if reader position is kept on failed read.
    """
    reader = ByteReader(b'\x01\x02')
    with pytest.raises(DataReadError) as ctx:
        reader.read_array(3)

    assert str(ctx.value) == 'Cannot read 3 bytes at offset 0, 2 bytes left'
    assert reader.remaining == 2

def test_read_negative_size() -> None:
    """
    Test if error is raised for negative read size.
    """
    with pytest.raises(ValueError):
        ByteReader(b'\x01').skip(-1)

# vim: sw=4:et:ai
