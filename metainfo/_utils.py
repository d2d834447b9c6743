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

import hashlib
import logging
from collections import abc

import flatbencode as bencode

from . import _errors as error

_debug = logging.getLogger('metainfo').debug

# Size of a SHA1 digest and of each piece hash in ['info']['pieces']
PIECE_HASH_SIZE = 20


def infohash(data):
    """Return the 20-byte SHA1 digest of bencoded `data`"""
    return hashlib.sha1(data).digest()

def chunks(data, size):
    """Split `data` into consecutive slices of `size` bytes (the last may be shorter)"""
    return tuple(bytes(data[i:i + size]) for i in range(0, len(data), size))


_MISSING = object()

def _lookup(dct, key):
    # Keys in bencoded dictionaries are byte strings
    return dct.get(key.encode('ascii'), _MISSING)

def raw(dct, key, keychain=()):
    """
    Return unconverted value of `key` in `dct`

    :param dct: Decoded bencoded dictionary
    :param str key: Field name
    :param keychain: Keys that lead from the root of the document to `dct`

    :raises MissingFieldError: if `key` does not exist
    """
    value = _lookup(dct, key)
    if value is _MISSING:
        raise error.MissingFieldError(key, keychain)
    return value

def raw_bytes(dct, key, keychain=()):
    """
    Return copy of the byte string value of `key` in `dct`

    :raises MissingFieldError: if `key` does not exist
    :raises NotAByteStringError: if the value is not a byte string
    """
    value = raw(dct, key, keychain)
    if not isinstance(value, (bytes, bytearray)):
        raise error.NotAByteStringError(tuple(keychain) + (key,), value)
    return bytes(value)

def raw_bencoded(dct, key, keychain=()):
    """
    Return value of `key` in `dct` as bencoded :class:`bytes`

    The value may be of any kind.  This is what hashes must be calculated from.

    :raises MissingFieldError: if `key` does not exist
    """
    return bencode.encode(raw(dct, key, keychain))

def required(dct, key, convert, keychain=()):
    """
    Return converted value of `key` in `dct`

    :param callable convert: Gets the value and its keychain and returns the
        converted value

    :raises MissingFieldError: if `key` does not exist
    :raises FieldTypeError: if `convert` fails
    """
    value = raw(dct, key, keychain)
    return convert(value, tuple(keychain) + (key,))

def required_with_default(dct, key, convert, default, keychain=()):
    """Same as :func:`required`, but return `default` if `key` does not exist"""
    value = _lookup(dct, key)
    if value is _MISSING:
        return default
    return convert(value, tuple(keychain) + (key,))

def optional(dct, key, convert, keychain=()):
    """Same as :func:`required`, but return `None` if `key` does not exist"""
    return required_with_default(dct, key, convert, None, keychain)


def to_int(bits):
    """Return converter for unsigned integers that fit into `bits` bits"""
    maximum = 2 ** bits - 1
    expected = f'unsigned {bits}-bit int'

    def convert(value, keychain=()):
        if (not isinstance(value, int) or isinstance(value, bool)
            or not 0 <= value <= maximum):
            raise error.NotANumberError(keychain, value, expected=expected)
        return value

    return convert

def to_str(value, keychain=()):
    """Convert UTF-8 encoded byte string to :class:`str`"""
    if not isinstance(value, (bytes, bytearray)):
        raise error.NotAStringError(keychain, value)
    try:
        return bytes(value).decode('utf-8')
    except UnicodeDecodeError as e:
        raise error.NotAStringError(keychain, value) from e

def to_dict(value, keychain=()):
    """Return `value` if it is a dictionary"""
    if not isinstance(value, abc.Mapping):
        raise error.NotADictError(keychain, value)
    return value

def list_of(convert):
    """
    Return converter for lists

    Each item is converted with `convert`.  Any failure is reported as
    :class:`NotAListError`, the original exception is its ``__cause__``.
    """
    def convert_list(value, keychain=()):
        if not isinstance(value, list):
            raise error.NotAListError(keychain, value)
        items = []
        for i, item in enumerate(value):
            try:
                items.append(convert(item, tuple(keychain) + (i,)))
            except error.MetainfoError as e:
                _debug(f'Invalid list item: {e!r}')
                raise error.NotAListError(keychain, value, index=i) from e
        return tuple(items)

    return convert_list
