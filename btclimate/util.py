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
BTClimate utility functions.
"""

from .error import ConfigurationError

ADDRESS_LEN = 6

def fmt_addr(addr: bytes) -> str:
    """
    Format raw Bluetooth device address, i.e. `A4:C1:38:59:BE:24`.

    The raw address is in little-endian byte order, as received over the
    air.
    """
    if len(addr) != ADDRESS_LEN:
        raise ValueError('Invalid device address length: {}'.format(len(addr)))
    return ':'.join('{:02X}'.format(b) for b in reversed(addr))

def parse_addr(addr: str) -> bytes:
    """
    Convert Bluetooth device address, i.e. `A4:C1:38:59:BE:24`, to raw,
    little-endian address.
    """
    items = addr.split(':')
    if len(items) != ADDRESS_LEN or not all(len(v) == 2 for v in items):
        raise ConfigurationError('Invalid device address: {}'.format(addr))

    try:
        return bytes(int(v, 16) for v in reversed(items))
    except ValueError as ex:
        raise ConfigurationError('Invalid device address: {}'.format(addr)) from ex

# vim: sw=4:et:ai
