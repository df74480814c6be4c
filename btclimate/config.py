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

# Bluetooth SIG company identifier used by Govee sensors in manufacturer
# specific data
SENSOR_COMPANY_ID = 0xec88

# payload lengths of the known frame layouts
PAYLOAD_LEN_H5075 = 6
PAYLOAD_LEN_H5074 = 7

# sign flag of temperature in the packed, 24-bit value of H5072/H5075
# frames
TEMP_SIGN_MASK = 0x800000

# AD type of manufacturer specific data
AD_TYPE_MANUFACTURER_DATA = 0xff

# vim: sw=4:et:ai
