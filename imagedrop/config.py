import os

from dotenv import load_dotenv

from .uploads import current_millis

load_dotenv()


class Config:
    DEFAULT_UPLOAD_DIR = 'uploads'
    DEFAULT_MAX_UPLOAD_SIZE = 5 * 1024 * 1024

    def __init__(self):
        self.host = os.environ.get('HOST') or '0.0.0.0'
        self.port = int(os.environ.get('PORT') or 3000)
        self.log_level = (os.environ.get('LOG_LEVEL') or 'INFO').upper()

        upload_dir = os.environ.get('UPLOAD_DIR') or self.DEFAULT_UPLOAD_DIR
        self.storage_path = os.path.join(
            os.path.dirname(os.path.abspath(__file__)), upload_dir)

        self.max_upload_size = int(
            os.environ.get('MAX_UPLOAD_SIZE') or self.DEFAULT_MAX_UPLOAD_SIZE)

        self.clock = current_millis
