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
Tests of decoding manufacturer specific data.
"""

import dataclasses as dtc

from btclimate import gate
from btclimate.data import ClimateReading, Irrelevant, IrrelevantReason, \
    ParseError, SensorFormat
from btclimate.gate import decode, is_sensor_vendor, payload_format

import pytest

H5075_PAYLOAD = b'\x00\x03\x7c\x8a\x37\x00'
H5074_PAYLOAD = b'\x00\x1b\x09\xf1\x18\x64\x02'

DECODE_DATA = [
    [H5075_PAYLOAD, ClimateReading(2284, 490, 55)],
    [b'\x00\x03\x51\x9e\x64\x00', ClimateReading(2175, 502, 100)],
    [H5074_PAYLOAD, ClimateReading(2331, 638, 100)],
    [b'\x00\x23\xf9\x33\x1a\x5e\x02', ClimateReading(-1757, 670, 94)],
    [b'\x00\x03\x7c\x8a\xff\x00', ClimateReading(2284, 490, 255)],
]

@pytest.mark.parametrize('data, expected', DECODE_DATA)
def test_decode(data: bytes, expected: ClimateReading) -> None:
    """
    Test decoding manufacturer specific data of Govee sensors.
    """
    assert decode(0xec88, data) == expected

@pytest.mark.parametrize('company_id', [0x0000, 0x004c, 0x0969, 0x88ec, 0xec89, 0xffff])
@pytest.mark.parametrize('data', [b'', H5075_PAYLOAD, H5074_PAYLOAD, b'\xff' * 20])
def test_decode_vendor(company_id: int, data: bytes) -> None:
    """
    Test if data of other vendors is irrelevant.
    """
    assert not is_sensor_vendor(company_id)
    assert decode(company_id, data) == Irrelevant(IrrelevantReason.VENDOR)

@pytest.mark.parametrize('size', [0, 1, 2, 3, 4, 5, 8, 9, 16, 31])
def test_decode_length(size: int) -> None:
    """
    Test if data of unknown length is irrelevant.
    """
    data = bytes(range(size))
    assert payload_format(data) is None
    assert decode(0xec88, data) == Irrelevant(IrrelevantReason.LENGTH)

def test_payload_format() -> None:
    """
    Test choosing layout of data by its length only.
    """
    assert payload_format(b'\xff' * 6) == SensorFormat.H5075
    assert payload_format(b'\xff' * 7) == SensorFormat.H5074

@pytest.mark.parametrize('data', [H5075_PAYLOAD, H5074_PAYLOAD])
def test_decode_idempotent(data: bytes) -> None:
    """
    Test if decoding the same data twice gives the same result.
    """
    assert decode(0xec88, data) == decode(0xec88, data)

def test_decode_parse_error(monkeypatch) -> None:  # type: ignore
    """
    Test if read error is returned as parse error.
    """
    monkeypatch.setattr(gate, 'payload_format', lambda data: SensorFormat.H5074)
    result = decode(0xec88, b'\x00\x01')
    assert isinstance(result, ParseError)
    assert 'Cannot read 2 bytes at offset 1' in result.message

def test_decode_any_data() -> None:
    """
    Test if no exception is raised for data of any length.
    """
    for size in range(64):
        data = bytes((i * 37) % 256 for i in range(size))
        result = decode(0xec88, data)
        assert isinstance(result, (ClimateReading, Irrelevant))

def test_reading_immutable() -> None:
    """
    Test if climate reading cannot be modified.
    """
    reading = decode(0xec88, H5075_PAYLOAD)
    with pytest.raises(dtc.FrozenInstanceError):
        reading.battery_percent = 1  # type: ignore

# vim: sw=4:et:ai
