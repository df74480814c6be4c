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
Basic enums, records and types.
"""

import dataclasses as dtc
import enum
import typing as tp

from .config import PAYLOAD_LEN_H5074, PAYLOAD_LEN_H5075

class SensorFormat(enum.IntEnum):
    """
    Layout of sensor manufacturer specific data.

    The value of an enumeration item is the length of the payload, which
    is the only property distinguishing the layouts.
    """
    # Govee H5072/H5075; packed, 24-bit sign-magnitude value
    H5075 = PAYLOAD_LEN_H5075
    # Govee H5074; little-endian temperature and humidity fields
    H5074 = PAYLOAD_LEN_H5074

class IrrelevantReason(enum.Enum):
    """
    Reason of rejecting manufacturer specific data.
    """
    VENDOR = 'vendor'
    LENGTH = 'length'

@dtc.dataclass(frozen=True)
class ClimateReading:
    """
    Climate reading decoded from sensor manufacturer specific data.

    The values are stored as integers. Use `temperature` and `humidity`
    properties to get the values in degrees Celsius and percent.

    :var temperature_hundredths: Temperature in hundredths of degree
        Celsius.
    :var humidity_tenths: Relative humidity in tenths of percent.
    :var battery_percent: Battery level as sent by a sensor, it is not
        validated.
    """
    temperature_hundredths: int
    humidity_tenths: int
    battery_percent: int

    @property
    def temperature(self) -> float:
        """
        Temperature in degrees Celsius.
        """
        return self.temperature_hundredths / 100

    @property
    def humidity(self) -> float:
        """
        Relative humidity in percent.
        """
        return self.humidity_tenths / 10

    @property
    def battery(self) -> int:
        """
        Battery level in percent.
        """
        return self.battery_percent

@dtc.dataclass(frozen=True)
class Irrelevant:
    """
    Manufacturer specific data not understood by the decoder.

    This is expected for most of Bluetooth traffic and should be discarded
    by a caller.
    """
    reason: IrrelevantReason

@dtc.dataclass(frozen=True)
class ParseError:
    """
    Malformed manufacturer specific data of a known sensor.
    """
    message: str

DecodeResult = tp.Union[ClimateReading, Irrelevant, ParseError]

@dtc.dataclass(frozen=True)
class AdStructure:
    """
    Advertising data structure.

    :var type: AD type.
    :var data: AD data.
    """
    type: int
    data: bytes

# vim: sw=4:et:ai
