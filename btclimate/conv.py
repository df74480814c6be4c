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
Data conversion functions for Govee sensors.

Govee H5072/H5075 (6 bytes)

    byte 0 is a marker, bytes 1-3 are a packed, big-endian 24-bit value,
    byte 4 is battery level, byte 5 is unused

    The packed value is `abs(temperature) * 10000 + humidity * 10`, bit 23
    is temperature sign.

Govee H5074 (7 bytes)

    byte 0 is a marker, bytes 1-2 are little-endian, signed temperature in
    hundredths of degree Celsius, bytes 3-4 are little-endian humidity in
    hundredths of percent, byte 5 is battery level

The integer divisions are truncating and their order matters, i.e.
H5074 humidity is truncated to tenths of percent first, and is divided
again by `ClimateReading.humidity` property.
"""

from .config import TEMP_SIGN_MASK
from .data import ClimateReading
from .reader import ByteReader

def convert_h5075(data: bytes) -> ClimateReading:
    """
    Convert Govee H5072/H5075 manufacturer specific data.

    :param data: Manufacturer specific data without company identifier.
    """
    reader = ByteReader(data)
    reader.skip(1)

    value = reader.read_u32_be()
    battery = value & 0xff
    combined = (value & 0xffffff00) >> 8

    if combined & TEMP_SIGN_MASK:
        # sign-magnitude; truncate the magnitude, then negate
        temperature = -((combined ^ TEMP_SIGN_MASK) // 100)
    else:
        temperature = combined // 100

    # humidity is taken from the value including the sign bit
    humidity = combined % 1000
    return ClimateReading(temperature, humidity, battery)

def convert_h5074(data: bytes) -> ClimateReading:
    """
    Convert Govee H5074 manufacturer specific data.

    :param data: Manufacturer specific data without company identifier.
    """
    reader = ByteReader(data)
    reader.skip(1)

    temperature = reader.read_i16_le()
    humidity = reader.read_u16_le() // 10
    battery = reader.read_u8()
    return ClimateReading(temperature, humidity, battery)

__all__ = ['convert_h5075', 'convert_h5074']

# vim: sw=4:et:ai
