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

import argparse
import sys

from . import __version__
from . import _errors as error
from ._debug import enable_debugging
from ._metainfo import Metainfo


def _format(metainfo):
    info = metainfo.info
    lines = [
        ('Name', info.name),
        ('Announce', metainfo.announce),
        ('Created By', metainfo.created_by),
        ('Info Hash', metainfo.infohash),
        ('Piece Size', info.piece_length),
        ('Piece Count', info.num_pieces),
    ]
    if info.length is not None:
        lines.append(('Size', info.length))
    if info.files is not None:
        for file in info.files:
            lines.append(('File', f'{"/".join(file.path)} ({file.length} bytes)'))
    width = max(len(label) for label, _ in lines)
    return '\n'.join(f'{label:>{width}}  {value}' for label, value in lines)

def main(args=None):
    parser = argparse.ArgumentParser(prog='metainfo',
                                     description='Show the content of a torrent file')
    parser.add_argument('torrent', help='path to torrent file')
    parser.add_argument('--debug', metavar='FILE', nargs='?', const='', default=None,
                        help='write debugging messages to FILE or stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    args = parser.parse_args(args)

    if args.debug is not None:
        enable_debugging(args.debug or None)

    try:
        metainfo = Metainfo.read(args.torrent)
    except error.MetainfoError as e:
        print(f'{parser.prog}: {e}', file=sys.stderr)
        return 1
    else:
        print(_format(metainfo))
        return 0


if __name__ == '__main__':
    sys.exit(main())
