import mimetypes
import urllib.parse

import falcon

from .errors import NotFound, StorageUnavailable, ValidationError
from .uploads import generate_filename, validate_content_type

# Same unreserved set as JavaScript's encodeURIComponent().
_URL_SAFE = "-_.!~*'()"


def image_url(req, filename):
    quoted = urllib.parse.quote(filename, safe=_URL_SAFE)
    return f'{req.scheme}://{req.netloc}/images/{quoted}'


class Health:

    async def on_get(self, req, resp):
        resp.media = {'ok': True, 'message': 'Image upload API running'}


class Upload:
    FIELD_NAME = 'image'

    def __init__(self, config, store):
        self.config = config
        self.store = store

    async def on_post(self, req, resp):
        stored = None

        if (req.content_type or '').startswith(falcon.MEDIA_MULTIPART):
            form = await req.get_media()
            try:
                async for part in form:
                    # Plain form fields carry no filename and are ignored.
                    if part.filename is None:
                        continue
                    if part.name != self.FIELD_NAME or stored is not None:
                        raise ValidationError('Unexpected field')

                    validate_content_type(part.content_type)
                    filename = generate_filename(
                        part.filename, self.config.clock())
                    stored = await self.store.save(filename, part.stream)
            except Exception:
                if stored is not None:
                    await self.store.remove(stored)
                raise

        if stored is None:
            raise ValidationError('No image uploaded')

        resp.status = falcon.HTTP_201
        resp.media = {
            'message': 'Image uploaded successfully',
            'filename': stored,
            'url': image_url(req, stored),
        }


class ImageList:

    def __init__(self, store):
        self.store = store

    async def on_get(self, req, resp):
        try:
            filenames = await self.store.list_images()
        except StorageUnavailable as ex:
            resp.status = falcon.HTTP_500
            resp.media = {'error': ex.message}
            return

        resp.media = [
            {'filename': filename, 'url': image_url(req, filename)}
            for filename in filenames
        ]


class ImageMetadata:

    def __init__(self, store):
        self.store = store

    async def on_get(self, req, resp, filename):
        try:
            stats = await self.store.stat(filename)
        except NotFound as ex:
            resp.status = falcon.HTTP_404
            resp.media = {'error': ex.message}
            return

        resp.media = {
            'filename': filename,
            'size': stats['size'],
            'modifiedAt': stats['modified'],
            'url': image_url(req, filename),
        }


class Images:

    def __init__(self, store):
        self.store = store

    async def on_get(self, req, resp, filename):
        try:
            path, size = await self.store.locate(filename)
        except NotFound as ex:
            resp.status = falcon.HTTP_404
            resp.media = {'error': ex.message}
            return

        content_type, _ = mimetypes.guess_type(filename)
        resp.content_type = content_type or 'application/octet-stream'
        resp.content_length = size
        resp.stream = self.store.read_chunks(path)
