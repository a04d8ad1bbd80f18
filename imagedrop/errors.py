import logging

import falcon

logger = logging.getLogger(__name__)


class ImageDropError(Exception):
    message = 'Bad request'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(ImageDropError):
    message = 'Only image files allowed'


class PayloadTooLarge(ImageDropError):
    message = 'File too large'


class NotFound(ImageDropError):
    message = 'File not found'


class StorageUnavailable(ImageDropError):
    message = 'Failed to read uploads'


class StartupFailure(ImageDropError):
    message = 'Storage directory is not usable'


async def handle_uncaught(req, resp, ex, params):
    # Anything a responder did not turn into a response itself ends up here.
    if isinstance(ex, ImageDropError):
        logger.warning('%s %s failed: %s', req.method, req.path, ex)
    else:
        logger.error('%s %s failed', req.method, req.path, exc_info=ex)

    resp.status = falcon.HTTP_400
    resp.media = {'error': str(ex) or 'Bad request'}


def serialize_http_error(req, resp, exception):
    resp.content_type = falcon.MEDIA_JSON
    resp.media = {'error': exception.description or exception.title}
