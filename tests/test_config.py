import os

import imagedrop.config
from imagedrop.config import Config

ENV_VARS = ('HOST', 'PORT', 'LOG_LEVEL', 'UPLOAD_DIR', 'MAX_UPLOAD_SIZE')


def _clear(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    config = Config()

    package_dir = os.path.dirname(os.path.abspath(imagedrop.config.__file__))
    assert config.port == 3000
    assert config.host == '0.0.0.0'
    assert config.log_level == 'INFO'
    assert config.max_upload_size == 5 * 1024 * 1024
    assert config.storage_path == os.path.join(package_dir, 'uploads')
    assert isinstance(config.clock(), int)


def test_environment(monkeypatch, tmp_path):
    _clear(monkeypatch)
    monkeypatch.setenv('PORT', '8080')
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    monkeypatch.setenv('UPLOAD_DIR', str(tmp_path))
    monkeypatch.setenv('MAX_UPLOAD_SIZE', '1024')

    config = Config()
    assert config.port == 8080
    assert config.log_level == 'DEBUG'
    assert config.storage_path == str(tmp_path)
    assert config.max_upload_size == 1024


def test_relative_upload_dir(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv('UPLOAD_DIR', 'media/images')

    config = Config()
    assert config.storage_path.endswith(os.path.join('media', 'images'))
    assert os.path.isabs(config.storage_path)
