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
Bluetooth advertising data structures.
"""

from collections.abc import Iterator

from .config import AD_TYPE_MANUFACTURER_DATA
from .data import AdStructure
from .error import DataReadError
from .reader import ByteReader

def ad_structures(data: bytes) -> Iterator[AdStructure]:
    """
    Iterate over structures of advertising data.

    Zero length of a structure ends advertising data. `DataReadError` is
    raised if a structure is longer than the remaining data.

    :param data: Advertising data.
    """
    reader = ByteReader(data)
    while reader.remaining:
        size = reader.read_u8()
        if size == 0:
            break

        ad_type = reader.read_u8()
        yield AdStructure(ad_type, reader.read_array(size - 1))

def manufacturer_data(data: bytes) -> Iterator[tuple[int, bytes]]:
    """
    Iterate over company identifier and payload of manufacturer specific
    data found in advertising data.

    Manufacturer specific data structures shorter than company identifier
    are skipped.

    :param data: Advertising data.
    """
    items = (ad for ad in ad_structures(data) if ad.type == AD_TYPE_MANUFACTURER_DATA)
    for ad in items:
        reader = ByteReader(ad.data)
        try:
            company_id = reader.read_u16_le()
        except DataReadError:
            continue
        yield company_id, reader.read_array(reader.remaining)

__all__ = ['ad_structures', 'manufacturer_data']

# vim: sw=4:et:ai
