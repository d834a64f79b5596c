"""Run the URL shortener HTTP server

Usage:
    SECRET_KEY=<64 hex chars> python -m cryptshortener

Each request is served by its own thread. Configuration errors (bad secret key,
bad rate limit settings) are fatal and stop the process before it serves any
request.
"""

import logging

from cryptshortener.server import create_app
from cryptshortener.utils import initialize_logging, load_config


logger = logging.getLogger('cryptshortener')


def main() -> None:
    initialize_logging()

    config = load_config()
    app = create_app(config)

    host, port = config['server']['host'], config['server']['port']
    logger.info('URL Shortener service starting.', extra={'host': host, 'port': port, 'baseUrl': config['base_url']})
    app.run(host=host, port=port, threaded=True)


if __name__ == '__main__':
    main()
