"""Naming and admission rules for incoming uploads."""

import os.path
import re
import time

from .errors import ValidationError

DEFAULT_BASENAME = 'image'
DEFAULT_EXTENSION = '.png'

_WHITESPACE = re.compile(r'\s+')


def current_millis():
    return int(time.time() * 1000)


def generate_filename(original_filename, timestamp):
    """Derive a storage name for an upload.

    The result has the form ``<base>-<timestamp><ext>``, where ``base`` is the
    client-supplied name without its directory part and extension, with every
    run of whitespace collapsed into a single hyphen. A missing or empty
    original name yields ``image``; a missing extension yields ``.png``.

    Two uploads sharing a base name within the same millisecond get the same
    name, and the later one overwrites the earlier.
    """
    name = os.path.basename((original_filename or '').rstrip('/'))
    base, ext = os.path.splitext(name)
    if not original_filename:
        base = DEFAULT_BASENAME

    base = _WHITESPACE.sub('-', base)
    return f'{base}-{timestamp}{ext or DEFAULT_EXTENSION}'


def validate_content_type(content_type):
    if not (content_type or '').startswith('image/'):
        raise ValidationError('Only image files allowed')
