import falcon.testing
import pytest

from imagedrop.app import create_app
from imagedrop.config import Config
from imagedrop.uploads import current_millis

BOUNDARY = 'imagedrop-test-boundary'


@pytest.fixture()
def predictable_clock():
    fixtures = (
        1600000000000,
        1600000000001,
        1600000000002,
    )

    def clock():
        try:
            return next(fixtures_it)
        except StopIteration:
            return current_millis()

    fixtures_it = iter(fixtures)
    return clock


@pytest.fixture
def storage_path(tmp_path):
    return str(tmp_path / 'uploads')


@pytest.fixture
def config(storage_path, predictable_clock):
    config = Config()
    config.storage_path = storage_path
    config.max_upload_size = Config.DEFAULT_MAX_UPLOAD_SIZE
    config.clock = predictable_clock
    return config


@pytest.fixture
def client(config):
    app = create_app(config)
    return falcon.testing.TestClient(app)


@pytest.fixture
def multipart():
    """Build a multipart/form-data body.

    Each part is ``(name, filename, content_type, data)``; pass ``None`` as
    the filename for a plain text field.
    """

    def build(*parts):
        body = b''
        for name, filename, content_type, data in parts:
            disposition = f'form-data; name="{name}"'
            if filename is not None:
                disposition += f'; filename="{filename}"'

            body += f'--{BOUNDARY}\r\n'.encode()
            body += f'Content-Disposition: {disposition}\r\n'.encode()
            if content_type is not None:
                body += f'Content-Type: {content_type}\r\n'.encode()
            body += b'\r\n' + data + b'\r\n'
        body += f'--{BOUNDARY}--\r\n'.encode()

        headers = {
            'Content-Type': f'multipart/form-data; boundary={BOUNDARY}',
        }
        return body, headers

    return build


@pytest.fixture
def upload(client, multipart):
    def upload_one(filename='a.png', content_type='image/png',
                   data=b'0123456789', field='image'):
        body, headers = multipart((field, filename, content_type, data))
        return client.simulate_post('/upload', body=body, headers=headers)

    return upload_one
