import logging
import sys

import uvicorn

from .app import create_app
from .config import Config
from .errors import StartupFailure
from .logging_config import setup_logging

logger = logging.getLogger('imagedrop')


def main():
    config = Config()
    setup_logging(config.log_level)

    try:
        app = create_app(config)
    except StartupFailure as ex:
        logger.error('cannot start: %s', ex)
        sys.exit(1)

    logger.info('serving %s at http://%s:%d',
                config.storage_path, config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port,
                log_level=config.log_level.lower())


if __name__ == '__main__':
    main()
