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
BTClimate errors.
"""

class BTClimateError(Exception):
    """
    Base class for BTClimate errors.
    """

class DataReadError(BTClimateError):
    """
    Error raised when data cannot be read from a byte buffer, i.e. a read
    runs past the end of the buffer.
    """

class ConfigurationError(BTClimateError):
    """
    Error raised on invalid configuration value, i.e. malformed device
    address.
    """

__all__ = ['BTClimateError', 'DataReadError', 'ConfigurationError']

# vim: sw=4:et:ai
