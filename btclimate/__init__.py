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

from .adv import ad_structures, manufacturer_data
from .conv import convert_h5074, convert_h5075
from .data import AdStructure, ClimateReading, DecodeResult, Irrelevant, \
    IrrelevantReason, ParseError, SensorFormat
from .error import *
from .gate import decode, is_sensor_vendor, payload_format
from .reader import ByteReader
from .scan import AddressFilter, BeaconScanCallback
from .util import fmt_addr, parse_addr

__version__ = '0.1.0'

__all__ = [
    # decoding
    'decode', 'is_sensor_vendor', 'payload_format',
    'convert_h5075', 'convert_h5074',

    # basic data
    'ClimateReading', 'DecodeResult', 'Irrelevant', 'IrrelevantReason',
    'ParseError', 'SensorFormat', 'AdStructure',

    # advertising data
    'ad_structures', 'manufacturer_data', 'ByteReader',
    'AddressFilter', 'BeaconScanCallback', 'fmt_addr', 'parse_addr',

    # errors
    'BTClimateError', 'DataReadError', 'ConfigurationError',
]

# vim: sw=4:et:ai
