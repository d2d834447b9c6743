# This file is part of metainfo.
#
# metainfo is free software: you can redistribute it and/or modify it under the
# terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.
#
# metainfo is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with metainfo.  If not, see <https://www.gnu.org/licenses/>.

# flake8: noqa

"""
Decode torrent metainfo into typed structures
"""

__version__ = '0.1.0'

from ._errors import *
from ._metainfo import File, Info, Metainfo
