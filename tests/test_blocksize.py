"""Tests for the filesystem block size lookup."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from scandisk import blocksize
from scandisk.blocksize import DEFAULT_BLOCK_SIZE, block_size_of


@pytest.fixture(autouse=True)
def posix_platform(monkeypatch):
    monkeypatch.setattr(blocksize.sys, "platform", "linux")


class TestBlockSizeOf:
    @patch("scandisk.blocksize.os.statvfs")
    def test_uses_statvfs_bsize(self, mock_statvfs):
        mock_statvfs.return_value = SimpleNamespace(f_bsize=1024)
        assert block_size_of("/data") == 1024
        mock_statvfs.assert_called_once_with("/data")

    @patch("scandisk.blocksize.os.statvfs", side_effect=OSError("no such device"))
    def test_failure_falls_back_to_default(self, _mock_statvfs):
        assert block_size_of("/gone") == DEFAULT_BLOCK_SIZE == 4096

    @patch("scandisk.blocksize.os.statvfs")
    def test_zero_falls_back_to_default(self, mock_statvfs):
        mock_statvfs.return_value = SimpleNamespace(f_bsize=0)
        assert block_size_of("/odd") == DEFAULT_BLOCK_SIZE

    def test_real_directory(self, tmp_path):
        assert block_size_of(str(tmp_path)) > 0
