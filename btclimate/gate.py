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
Decoding of manufacturer specific data of Govee sensors.

The data is accepted by company identifier first, then the layout of the
data is chosen by its length. Both checks reject the data with
`Irrelevant` result, which is not an error.
"""

import typing as tp

from .config import SENSOR_COMPANY_ID
from .conv import convert_h5074, convert_h5075
from .data import ClimateReading, DecodeResult, Irrelevant, \
    IrrelevantReason, ParseError, SensorFormat
from .error import DataReadError

IRRELEVANT_VENDOR = Irrelevant(IrrelevantReason.VENDOR)
IRRELEVANT_LENGTH = Irrelevant(IrrelevantReason.LENGTH)

def is_sensor_vendor(company_id: int) -> bool:
    """
    Check if company identifier is identifier of Govee sensors.
    """
    return company_id == SENSOR_COMPANY_ID

def payload_format(data: bytes) -> tp.Optional[SensorFormat]:
    """
    Get layout of manufacturer specific data.

    Return `None` if data length matches no known layout.
    """
    n = len(data)
    if n == SensorFormat.H5075:
        return SensorFormat.H5075
    elif n == SensorFormat.H5074:
        return SensorFormat.H5074
    else:
        return None

def convert(fmt: SensorFormat, data: bytes) -> ClimateReading:
    """
    Convert manufacturer specific data having given layout.
    """
    if fmt == SensorFormat.H5075:
        return convert_h5075(data)
    else:
        return convert_h5074(data)

def decode(company_id: int, data: bytes) -> DecodeResult:
    """
    Decode manufacturer specific data into climate reading.

    No exception is raised for any input data. `Irrelevant` result is
    returned for data of other vendors or of unknown length. `ParseError`
    result is returned if data cannot be read.

    :param company_id: Company identifier of manufacturer specific data.
    :param data: Manufacturer specific data without company identifier.
    """
    if not is_sensor_vendor(company_id):
        return IRRELEVANT_VENDOR

    fmt = payload_format(data)
    if fmt is None:
        return IRRELEVANT_LENGTH

    try:
        return convert(fmt, data)
    except DataReadError as ex:
        return ParseError(str(ex))

__all__ = ['decode', 'is_sensor_vendor', 'payload_format']

# vim: sw=4:et:ai
