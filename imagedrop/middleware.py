import logging

logger = logging.getLogger(__name__)


class RequestLogger:

    async def process_request(self, req, resp):
        logger.debug('%s %s', req.method, req.relative_uri)

    async def process_response(self, req, resp, resource, req_succeeded):
        logger.info('%s %s -> %s', req.method, req.relative_uri, resp.status)
