import errno
import logging

import pytest

import metainfo


def test_all_errors_are_metainfo_errors():
    for cls in (metainfo.ReadError, metainfo.BdecodeError, metainfo.MissingFieldError,
                metainfo.NotADictError, metainfo.NotAByteStringError, metainfo.NotANumberError,
                metainfo.NotAStringError, metainfo.NotAListError):
        assert issubclass(cls, metainfo.MetainfoError)

def test_type_errors_share_base_class():
    for cls in (metainfo.NotADictError, metainfo.NotAByteStringError, metainfo.NotANumberError,
                metainfo.NotAStringError, metainfo.NotAListError):
        assert issubclass(cls, metainfo.FieldTypeError)
    assert not issubclass(metainfo.MissingFieldError, metainfo.FieldTypeError)


def test_ReadError_with_path():
    exc = metainfo.ReadError(errno.ENOENT, 'path/to/file')
    assert str(exc) == 'path/to/file: No such file or directory'
    assert exc.path == 'path/to/file'
    assert exc.errno == errno.ENOENT

def test_ReadError_without_path():
    exc = metainfo.ReadError(errno.EACCES)
    assert str(exc) == 'Permission denied'
    assert exc.path is None

def test_ReadError_without_errno():
    assert str(metainfo.ReadError(None)) == 'Unable to read'


def test_BdecodeError_with_filepath():
    exc = metainfo.BdecodeError('path/to/file')
    assert str(exc) == 'path/to/file: Invalid torrent file format'
    assert exc.filepath == 'path/to/file'

def test_BdecodeError_without_filepath():
    exc = metainfo.BdecodeError()
    assert str(exc) == 'Invalid metainfo format'
    assert exc.filepath is None


def test_MissingFieldError_at_top_level():
    exc = metainfo.MissingFieldError('announce')
    assert str(exc) == "Missing 'announce'"
    assert exc.field == 'announce'
    assert exc.keychain == ()

def test_MissingFieldError_in_nested_dictionary():
    exc = metainfo.MissingFieldError('path', ['info', 'files', 0])
    assert str(exc) == "Missing 'path' in ['info']['files'][0]"
    assert exc.keychain == ('info', 'files', 0)


@pytest.mark.parametrize(
    argnames='cls, exp_type',
    argvalues=(
        (metainfo.NotADictError, 'dict'),
        (metainfo.NotAByteStringError, 'bytes'),
        (metainfo.NotANumberError, 'int'),
        (metainfo.NotAStringError, 'UTF-8 string'),
        (metainfo.NotAListError, 'list'),
    ),
)
def test_FieldTypeError_message(cls, exp_type):
    exc = cls(('info', 'name'), 123)
    assert str(exc) == f"['info']['name'] must be {exp_type}, not int: 123"
    assert exc.keychain == ('info', 'name')
    assert exc.value == 123

def test_FieldTypeError_at_top_level():
    assert str(metainfo.NotADictError((), [])) == 'Metainfo must be dict, not list: []'

def test_FieldTypeError_with_custom_expected_type():
    exc = metainfo.NotANumberError(('length',), -1, expected='unsigned 64-bit int')
    assert str(exc) == "['length'] must be unsigned 64-bit int, not int: -1"
    assert metainfo.NotANumberError.expected == 'int'

def test_FieldTypeError_shortens_long_values():
    exc = metainfo.NotAStringError(('name',), b'x' * 1000)
    assert str(exc) == "['name'] must be UTF-8 string, not bytes: b'" + 'x' * 45 + '...'

def test_NotAListError_with_index():
    exc = metainfo.NotAListError(('info', 'files'), [1, 2], index=1)
    assert str(exc) == "['info']['files'] must be list of valid items, invalid item at index 1"
    assert exc.index == 1
    assert exc.keychain == ('info', 'files')
    assert exc.value == [1, 2]


def test_as_oserror(caplog):
    caplog.set_level(logging.DEBUG, logger='metainfo')
    exc = metainfo.MissingFieldError('announce')
    oserror = exc.as_oserror()
    assert isinstance(oserror, OSError)
    assert oserror.errno == errno.EINVAL
    assert oserror.strerror == 'Invalid data to use bencode'
    assert oserror.__cause__ is exc
    assert 'error detail = MissingFieldError(' in caplog.text

def test_as_oserror_can_be_raised():
    exc = metainfo.NotAListError(('files',), b'foo')
    with pytest.raises(OSError) as excinfo:
        raise exc.as_oserror()
    assert excinfo.value.__cause__ is exc
