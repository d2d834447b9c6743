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

import errno
import logging
import os

_debug = logging.getLogger('metainfo').debug


def _keychain_str(keychain):
    return ''.join(f'[{key!r}]' for key in keychain)

def _value_str(value, maxlen=50):
    value_str = repr(value)
    if len(value_str) > maxlen:
        return value_str[:maxlen - 3] + '...'
    return value_str


class MetainfoError(Exception):
    """Base exception for all exceptions raised by metainfo"""
    def __init__(self, msg, *posargs, **kwargs):
        super().__init__(msg)
        self.posargs = posargs
        self.kwargs = kwargs

    def as_oserror(self):
        """
        Collapse this exception into a generic :class:`OSError`

        The returned exception has ``errno.EINVAL`` as its error number
        and this exception as its ``__cause__``.
        """
        _debug(f'error detail = {self!r}')
        exc = OSError(errno.EINVAL, 'Invalid data to use bencode')
        exc.__cause__ = self
        return exc


class ReadError(MetainfoError):
    """Unreadable file or stream"""
    def __init__(self, errno, path=None):
        self._errno = errno
        self._path = path
        msg = os.strerror(errno) if errno else 'Unable to read'
        if path is None:
            super().__init__(f'{msg}', errno)
        else:
            super().__init__(f'{path}: {msg}', errno, path)

    @property
    def path(self):
        """Path of the offending file or ``None``"""
        return self._path

    @property
    def errno(self):
        """POSIX error number from errno.h"""
        return self._errno


class BdecodeError(MetainfoError):
    """Failed to decode bencoded byte sequence"""
    def __init__(self, filepath=None):
        self._filepath = filepath
        if filepath is None:
            super().__init__('Invalid metainfo format')
        else:
            super().__init__(f'{filepath}: Invalid torrent file format', filepath)

    @property
    def filepath(self):
        """Path of the offending torrent file or ``None``"""
        return self._filepath


class MissingFieldError(MetainfoError):
    """Required field does not exist"""
    def __init__(self, field, keychain=()):
        self._field = field
        self._keychain = tuple(keychain)
        if self._keychain:
            super().__init__(f'Missing {field!r} in {_keychain_str(self._keychain)}',
                             field, keychain=self._keychain)
        else:
            super().__init__(f'Missing {field!r}', field, keychain=self._keychain)

    @property
    def field(self):
        """Name of the missing field"""
        return self._field

    @property
    def keychain(self):
        """Sequence of keys that lead to the dictionary that lacks :attr:`field`"""
        return self._keychain


class FieldTypeError(MetainfoError):
    """Value has the wrong type"""

    expected = 'something else'

    def __init__(self, keychain, value, expected=None):
        self._keychain = tuple(keychain)
        self._value = value
        if expected is not None:
            self.expected = expected
        where = _keychain_str(self._keychain) or 'Metainfo'
        super().__init__(f'{where} must be {self.expected}, '
                         f'not {type(value).__name__}: {_value_str(value)}',
                         self._keychain, value)

    @property
    def keychain(self):
        """Sequence of keys that lead to :attr:`value`"""
        return self._keychain

    @property
    def value(self):
        """The offending value"""
        return self._value


class NotADictError(FieldTypeError):
    """Value is not a dictionary"""
    expected = 'dict'


class NotAByteStringError(FieldTypeError):
    """Value is not a byte string"""
    expected = 'bytes'


class NotANumberError(FieldTypeError):
    """Value is not an integer or out of range"""
    expected = 'int'


class NotAStringError(FieldTypeError):
    """Value is not a UTF-8 encoded byte string"""
    expected = 'UTF-8 string'


class NotAListError(FieldTypeError):
    """Value is not a list or contains an invalid item"""
    expected = 'list'

    def __init__(self, keychain, value, index=None):
        self._index = index
        if index is None:
            super().__init__(keychain, value)
        else:
            keychain = tuple(keychain)
            self._keychain = keychain
            self._value = value
            where = _keychain_str(keychain) or 'Metainfo'
            MetainfoError.__init__(self, f'{where} must be list of valid items, '
                                   f'invalid item at index {index}',
                                   keychain, value, index=index)

    @property
    def index(self):
        """Index of the first invalid item or ``None``"""
        return self._index
