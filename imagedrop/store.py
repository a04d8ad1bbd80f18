import contextlib
import datetime
import logging
import os
import os.path
import stat

import aiofiles
import aiofiles.os

from .errors import (NotFound, PayloadTooLarge, StartupFailure,
                     StorageUnavailable)

logger = logging.getLogger(__name__)


class Store:
    CHUNK_SIZE = 64 * 1024

    def __init__(self, config):
        self.config = config

    @property
    def path(self):
        return self.config.storage_path

    def ensure_directory(self):
        try:
            os.makedirs(self.path, exist_ok=True)
        except OSError as ex:
            raise StartupFailure(
                f'cannot create storage directory {self.path}: {ex}')

        if not os.access(self.path, os.W_OK | os.X_OK):
            raise StartupFailure(
                f'storage directory {self.path} is not writable')

    def _resolve(self, filename):
        if (not filename or filename in ('.', '..')
                or os.path.basename(filename) != filename
                or (os.path.altsep and os.path.altsep in filename)):
            raise NotFound()
        return os.path.join(self.path, filename)

    async def save(self, filename, stream):
        """Stream an upload into the storage directory.

        ``stream`` is any object with an ``async read(size)`` method that
        returns ``b''`` once exhausted. Content beyond the configured maximum
        upload size aborts the write and removes whatever was written.
        """
        path = os.path.join(self.path, filename)
        limit = self.config.max_upload_size
        written = 0

        try:
            async with aiofiles.open(path, 'wb') as output:
                while True:
                    chunk = await stream.read(self.CHUNK_SIZE)
                    if not chunk:
                        break

                    written += len(chunk)
                    if written > limit:
                        raise PayloadTooLarge()

                    await output.write(chunk)
        except Exception as ex:
            with contextlib.suppress(FileNotFoundError):
                await aiofiles.os.remove(path)
            if isinstance(ex, PayloadTooLarge):
                logger.info('rejected %s: exceeds %d bytes', filename, limit)
            raise

        logger.info('stored %s (%d bytes)', filename, written)
        return filename

    async def remove(self, filename):
        with contextlib.suppress(FileNotFoundError):
            await aiofiles.os.remove(os.path.join(self.path, filename))

    async def list_images(self):
        try:
            return await aiofiles.os.listdir(self.path)
        except OSError as ex:
            logger.error('cannot list %s: %s', self.path, ex)
            raise StorageUnavailable()

    async def stat(self, filename):
        path = self._resolve(filename)
        try:
            stats = await aiofiles.os.stat(path)
        except OSError:
            raise NotFound()

        modified = datetime.datetime.fromtimestamp(
            stats.st_mtime, tz=datetime.timezone.utc)
        return {
            'size': stats.st_size,
            'modified': modified.isoformat(timespec='milliseconds').replace(
                '+00:00', 'Z'),
        }

    async def locate(self, filename):
        """Return the path and size of a stored regular file."""
        path = self._resolve(filename)
        try:
            stats = await aiofiles.os.stat(path)
        except OSError:
            raise NotFound()

        if not stat.S_ISREG(stats.st_mode):
            raise NotFound()
        return path, stats.st_size

    async def read_chunks(self, path):
        async with aiofiles.open(path, 'rb') as source:
            while True:
                chunk = await source.read(self.CHUNK_SIZE)
                if not chunk:
                    break
                yield chunk
