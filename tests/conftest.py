from collections import OrderedDict

import flatbencode as bencode
import pytest


@pytest.fixture
def valid_singlefile_metainfo():
    return OrderedDict([
        (b'announce', b'http://localhost'),
        (b'created by', b'The creator'),
        (b'info', OrderedDict([
            (b'length', 500000),
            (b'name', b'Torrent for testing'),
            (b'piece length', 32768),
            (b'pieces', b'\x00' * 20 * 16),
        ]))
    ])

@pytest.fixture
def valid_multifile_metainfo():
    return OrderedDict([
        (b'announce', b'http://localhost'),
        (b'created by', b'The creator'),
        (b'info', OrderedDict([
            (b'files', [OrderedDict([(b'length', 123), (b'path', [b'A file'])]),
                        OrderedDict([(b'length', 456), (b'path', [b'Another file'])]),
                        OrderedDict([(b'length', 789), (b'path', [b'A', b'third', b'file in a subdir'])])]),
            (b'name', b'Torrent for testing'),
            (b'piece length', 32768),
            (b'pieces', b'\x00' * 20),
        ]))
    ])


@pytest.fixture
def create_torrent_file(tmp_path):
    def create_torrent_file(metainfo, filename='test.torrent'):
        filepath = tmp_path / filename
        filepath.write_bytes(bencode.encode(metainfo))
        return filepath
    return create_torrent_file
