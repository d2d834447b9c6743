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

import logging

import flatbencode as bencode

from . import _errors as error
from . import _utils as utils
from ._debug import pretty_bytes

_debug = logging.getLogger('metainfo').debug


class _Immutable():
    # Subclasses list the names of their constructor arguments in _fields
    _fields = ()

    def _values(self):
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other):
        if isinstance(other, type(self)):
            return self._values() == other._values()
        else:
            return NotImplemented

    def __hash__(self):
        return hash((type(self),) + self._values())

    def __repr__(self):
        args = ', '.join(f'{name}={value!r}'
                         for name, value in zip(self._fields, self._values()))
        return f'{type(self).__name__}({args})'


class File(_Immutable):
    """
    File in a multi-file torrent

    :param int length: File size in bytes
    :param path: Path components, root first
    """

    _fields = ('length', 'path')

    def __init__(self, length, path):
        self._length = length
        self._path = tuple(path)

    @property
    def length(self):
        """File size in bytes"""
        return self._length

    @property
    def path(self):
        """Tuple of path components, root first"""
        return self._path

    @classmethod
    def from_bencode(cls, value, keychain=()):
        """
        Create instance from decoded bencoded dictionary

        :raises MetainfoError: if `value` is not a dictionary or any field is
            missing or has the wrong type
        """
        dct = utils.to_dict(value, keychain)
        return cls(
            length=utils.required(dct, 'length', utils.to_int(64), keychain),
            path=utils.required(dct, 'path', utils.list_of(utils.to_str), keychain),
        )


class Info(_Immutable):
    """
    Content of the "info" dictionary

    Single-file torrents specify :attr:`length`, multi-file torrents specify
    :attr:`files`.  Neither is enforced.

    :param int piece_length: Number of bytes per piece
    :param pieces: Sequence of 20-byte SHA1 piece hashes
    :param str name: File name or directory name
    :param length: Size of the single file in bytes or ``None``
    :param files: Sequence of :class:`File` instances or ``None``
    """

    _fields = ('piece_length', 'pieces', 'name', 'length', 'files')

    def __init__(self, piece_length, pieces, name, length=None, files=None):
        self._piece_length = piece_length
        self._pieces = tuple(bytes(piece) for piece in pieces)
        self._name = name
        self._length = length
        self._files = tuple(files) if files is not None else None

    @property
    def piece_length(self):
        """Number of bytes per piece"""
        return self._piece_length

    @property
    def pieces(self):
        """Tuple of SHA1 piece hashes"""
        return self._pieces

    @property
    def num_pieces(self):
        """Number of piece hashes"""
        return len(self._pieces)

    @property
    def name(self):
        return self._name

    @property
    def length(self):
        """Size of the single file in bytes or ``None``"""
        return self._length

    @property
    def files(self):
        """Tuple of :class:`File` instances or ``None``"""
        return self._files

    @property
    def is_singlefile(self):
        return self._length is not None and self._files is None

    @property
    def is_multifile(self):
        return self._length is None and self._files is not None

    @property
    def mode(self):
        """
        "singlefile" or "multifile" or ``None`` if both or neither of
        :attr:`length` and :attr:`files` are set
        """
        if self.is_singlefile:
            return 'singlefile'
        elif self.is_multifile:
            return 'multifile'
        return None

    @classmethod
    def from_bencode(cls, value, keychain=()):
        """
        Create instance from decoded bencoded dictionary

        :raises MetainfoError: if `value` is not a dictionary or any field is
            missing or has the wrong type
        """
        dct = utils.to_dict(value, keychain)
        pieces_raw = utils.raw_bytes(dct, 'pieces', keychain)
        if len(pieces_raw) % utils.PIECE_HASH_SIZE != 0:
            _debug(f'Length of pieces is not divisible by {utils.PIECE_HASH_SIZE}: '
                   f'{len(pieces_raw)}: {pretty_bytes(pieces_raw)}')
        return cls(
            pieces=utils.chunks(pieces_raw, utils.PIECE_HASH_SIZE),
            piece_length=utils.required(dct, 'piece length', utils.to_int(32), keychain),
            name=utils.required(dct, 'name', utils.to_str, keychain),
            length=utils.optional(dct, 'length', utils.to_int(64), keychain),
            files=utils.optional(dct, 'files', utils.list_of(File.from_bencode), keychain),
        )


class Metainfo(_Immutable):
    """
    Decoded torrent metainfo

    :param str announce: Tracker URL
    :param info: :class:`Info` instance
    :param bytes info_hash: SHA1 digest of the bencoded "info" dictionary
    :param str created_by: Application that created the torrent
    """

    _fields = ('announce', 'info', 'info_hash', 'created_by')

    # Maximum number of bytes that read_stream() reads.  This limit exists
    # because we don't want to read gigabytes before raising an error.
    MAX_METAINFO_SIZE = int(10e6)  # 10MB

    def __init__(self, announce, info, info_hash, created_by=''):
        self._announce = announce
        self._info = info
        self._info_hash = bytes(info_hash)
        self._created_by = created_by

    @property
    def announce(self):
        """Tracker URL"""
        return self._announce

    @property
    def info(self):
        """:class:`Info` instance"""
        return self._info

    @property
    def info_hash(self):
        """
        20-byte SHA1 digest of the "info" dictionary

        The digest is calculated from the bencoded "info" dictionary as it was
        read, not from :attr:`info`.
        """
        return self._info_hash

    @property
    def infohash(self):
        """:attr:`info_hash` as hexadecimal string"""
        return self._info_hash.hex()

    @property
    def created_by(self):
        """Application that created the torrent or empty string"""
        return self._created_by

    @classmethod
    def from_bencode(cls, value, keychain=()):
        """
        Create instance from decoded bencoded dictionary

        :raises MetainfoError: if `value` is not a dictionary or any field is
            missing or has the wrong type
        """
        dct = utils.to_dict(value, keychain)
        # Hash the raw "info" value before it is converted
        info_hash = utils.infohash(utils.raw_bencoded(dct, 'info', keychain))
        _debug(f'Info hash: {info_hash.hex()}')
        return cls(
            info_hash=info_hash,
            announce=utils.required(dct, 'announce', utils.to_str, keychain),
            info=utils.required(dct, 'info', Info.from_bencode, keychain),
            created_by=utils.required_with_default(dct, 'created by', utils.to_str, '', keychain),
        )

    @classmethod
    def parse(cls, content):
        """
        Decode bencoded torrent metainfo

        :param bytes content: Bencoded dictionary

        :raises BdecodeError: if `content` is not a valid bencoded byte sequence
        :raises MetainfoError: if the decoded metainfo is invalid

        :return: New :class:`Metainfo` instance
        """
        _debug(f'Decoding {len(content)} bytes: {pretty_bytes(content)}')
        try:
            metainfo_enc = bencode.decode(content)
        except (bencode.DecodingError, ValueError) as e:
            raise error.BdecodeError() from e
        metainfo = cls.from_bencode(metainfo_enc)
        _debug(f'Decoded {metainfo!r}')
        return metainfo

    @classmethod
    def read_stream(cls, stream):
        """
        Read torrent metainfo from file-like object

        :param stream: Readable file-like object (e.g. :class:`io.BytesIO`)

        :raises ReadError: if reading from `stream` fails
        :raises BdecodeError: if `stream` does not produce a valid bencoded byte
            sequence
        :raises MetainfoError: if the read metainfo is invalid

        :return: New :class:`Metainfo` instance
        """
        try:
            content = stream.read(cls.MAX_METAINFO_SIZE)
        except OSError as e:
            raise error.ReadError(e.errno) from e
        else:
            return cls.parse(content)

    @classmethod
    def read(cls, filepath):
        """
        Read torrent metainfo from file

        :param filepath: Path of the torrent file

        :raises ReadError: if reading from `filepath` fails
        :raises BdecodeError: if `filepath` does not contain a valid bencoded byte
            sequence
        :raises MetainfoError: if the read metainfo is invalid

        :return: New :class:`Metainfo` instance
        """
        try:
            with open(filepath, 'rb') as f:
                return cls.read_stream(f)
        except (OSError, error.ReadError) as e:
            raise error.ReadError(e.errno, filepath) from e
        except error.BdecodeError as e:
            raise error.BdecodeError(filepath) from e
