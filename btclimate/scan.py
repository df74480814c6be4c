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
Receiving climate readings from Bluetooth advertising data.

A scanner of Bluetooth devices calls `BeaconScanCallback` object for each
received advertisement, i.e.

    callback = BeaconScanCallback(
        AddressFilter.from_strings('A4:C1:38:59:BE:24'),
        consumer=lambda addr, reading: print(addr, reading.temperature),
    )
    callback(address, data)

"""

import dataclasses as dtc
import logging
import typing as tp

from .adv import manufacturer_data
from .data import ClimateReading, ParseError
from .error import DataReadError
from .gate import decode
from .util import fmt_addr, parse_addr

logger = logging.getLogger(__name__)

Consumer = tp.Callable[[str, ClimateReading], None]

@dtc.dataclass(frozen=True)
class AddressFilter:
    """
    Allow-list of Bluetooth device addresses.

    :var addresses: Raw, little-endian Bluetooth device addresses.
    """
    addresses: frozenset[bytes]

    @classmethod
    def from_strings(cls, *addresses: str) -> 'AddressFilter':
        """
        Create filter from Bluetooth device addresses, i.e.
        `A4:C1:38:59:BE:24`.
        """
        return cls(frozenset(parse_addr(v) for v in addresses))

    def matches(self, address: bytes) -> bool:
        return bytes(address) in self.addresses

class BeaconScanCallback:
    """
    Decode climate readings from advertising data of Govee sensors.

    :var address_filter: Optional allow-list of device addresses.
    :var consumer: Optional function receiving device address and climate
        reading.
    """
    def __init__(
            self,
            address_filter: tp.Optional[AddressFilter]=None,
            consumer: tp.Optional[Consumer]=None,
        ) -> None:

        self.address_filter = address_filter
        self.consumer = consumer

    def __call__(self, address: bytes, data: bytes) -> list[ClimateReading]:
        """
        Process advertising data received from a device.

        Return list of decoded climate readings.

        :param address: Raw, little-endian device address.
        :param data: Advertising data.
        """
        if self.address_filter is not None and not self.address_filter.matches(address):
            return []

        addr = fmt_addr(address)
        try:
            items = list(manufacturer_data(data))
        except DataReadError as ex:
            logger.debug('{}: malformed advertising data: {}'.format(addr, ex))
            return []

        readings = []
        for company_id, payload in items:
            result = decode(company_id, payload)
            if isinstance(result, ClimateReading):
                logger.info(
                    '{} - temp: {}, humidity: {}, battery: {}'.format(
                        addr,
                        result.temperature,
                        result.humidity,
                        result.battery,
                    )
                )
                readings.append(result)
                if self.consumer:
                    self.consumer(addr, result)
            elif isinstance(result, ParseError):
                logger.debug('{}: cannot parse data: {}'.format(addr, result.message))
            else:
                logger.debug(
                    '{}: ignored data, company id 0x{:04x}, length {}, {}'
                    .format(addr, company_id, len(payload), result.reason.value)
                )
        return readings

__all__ = ['AddressFilter', 'BeaconScanCallback']

# vim: sw=4:et:ai
