import falcon
import falcon.asgi

from .config import Config
from .errors import handle_uncaught, serialize_http_error
from .images import Health, ImageList, ImageMetadata, Images, Upload
from .middleware import RequestLogger
from .store import Store


def create_app(config=None):
    config = config or Config()
    store = Store(config)
    store.ensure_directory()

    app = falcon.asgi.App(middleware=[RequestLogger()], cors_enable=True)
    app.add_route('/', Health())
    app.add_route('/upload', Upload(config, store))
    app.add_route('/images-list', ImageList(store))
    app.add_route('/image/{filename}', ImageMetadata(store))
    app.add_route('/images/{filename}', Images(store))

    app.add_error_handler(Exception, handle_uncaught)
    app.set_error_serializer(serialize_http_error)

    return app
