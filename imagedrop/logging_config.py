import logging
import sys


def setup_logging(level='INFO'):
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - [%(levelname)s] - %(message)s',
        stream=sys.stdout,
    )
