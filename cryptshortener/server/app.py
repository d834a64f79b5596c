"""HTTP request handlers and application factory

The handlers translate HTTP requests into calls against the core components:
RateLimiter, CryptoEngine, generate_shortcode() and the short URL DAO.

HTTP surface:
    GET /shorten?url=<url>  -> 200 "The shortened url is: <base url>/<shortcode>"
    GET /<shortcode>        -> 302 redirect to the original URL
    GET /_health            -> 200 {"status": "healthy", "urls_stored": <n>}
    any path, any method    -> 429 when the client exceeds its rate limit
                               (checked before all other logic)

Example:
    >>> from cryptshortener.server import create_app
    >>> app = create_app(load_config())
    >>> app.run(host='0.0.0.0', port=8080, threaded=True)
"""

import logging
from dataclasses import dataclass

from flask import Blueprint, Flask, current_app, jsonify, request

from cryptshortener.crypto import CryptoEngine
from cryptshortener.models import ShortURLModel
from cryptshortener.ratelimit import RateLimiter
from cryptshortener.types import AppConfiguration
from cryptshortener.dao.base import ShortURLBaseDAO, CounterBaseDAO
from cryptshortener.dao.memory import ShortURLMemoryDAO, CounterMemoryDAO
from cryptshortener.dao.redis import CounterRedisDAO
from cryptshortener.dao.exceptions import ShortURLNotFoundError
from cryptshortener.exceptions import CorruptPayloadError
from cryptshortener.utils import generate_shortcode, get_short_url, guarantee_500_response, app_prefix, redis_config, secret_key
from cryptshortener.server.responses import response_200, response_302, response_400, response_404, response_429, response_500
from cryptshortener.server.constants import (
    ALLOWED_URL_SCHEMES,
    CORRUPT_PAYLOAD,
    INVALID_URL_SCHEME,
    INVALID_URL_SCHEME_MESSAGE,
    MISSING_URL,
    MISSING_URL_MESSAGE,
    RATE_LIMIT_EXCEEDED,
    RATE_LIMIT_EXCEEDED_MESSAGE,
    REDIRECT_SUCCESS,
    SHORT_URL_NOT_FOUND,
    SHORT_URL_NOT_FOUND_MESSAGE,
    SHORTENED_URL_MESSAGE,
    URL_SHORTENED,
)


logger = logging.getLogger(__name__)

EXTENSION_NAME = 'cryptshortener'

bp = Blueprint('shortener', __name__)


@dataclass(frozen=True)
class ShortenerServices:
    """Core components shared by every request handler of one application"""

    engine: CryptoEngine
    short_urls: ShortURLBaseDAO
    rate_limiter: RateLimiter
    base_url: str


def services() -> ShortenerServices:
    return current_app.extensions[EXTENSION_NAME]


def client_key() -> str:
    """Rate limiting key: the client address as observed by this server"""
    return request.remote_addr or 'unknown'


def enforce_rate_limit():
    """Reject the request with 429 once the client exceeds its rate limit

    Registered as a before_request hook on the application, so it also runs
    for unknown paths and methods, before routing errors are raised.
    """
    key = client_key()
    if not services().rate_limiter.allow(key):
        logger.info(
            'Rate limit exceeded. Responding with 429.',
            extra={'clientKey': key, 'event': RATE_LIMIT_EXCEEDED},
        )
        return response_429(RATE_LIMIT_EXCEEDED_MESSAGE, error_code=RATE_LIMIT_EXCEEDED)
    return None


@bp.route('/shorten', methods=['GET'])
@guarantee_500_response
def shorten_url():
    """Handle incoming requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract original URL from query string
    - Step 2: Validate the URL scheme
    - Step 3: Encrypt the original URL
    - Step 4: Generate shortcode for new link
    - Step 5: Store shortcode and encrypted URL mapping (via DAO)
    - Step 6: Respond to user with 200 success

    (Admission by the rate limiter happens before this handler runs.)

    HTTP responses:
        200: Successful URL shortening
            body: "The shortened url is: <short url>"
        400: Bad client request
            body: missing url parameter or unsupported scheme
        500: Internal server error
    """
    shortener = services()

    # 1- Extract original URL from query string
    target_url = request.args.get('url')
    if not target_url:
        logger.warning('Missing URL parameter in request. Responding with 400.', extra={'event': MISSING_URL})
        return response_400(MISSING_URL_MESSAGE, error_code=MISSING_URL)

    # 2- Validate the URL scheme
    if not target_url.startswith(ALLOWED_URL_SCHEMES):
        logger.warning('Invalid URL format. Responding with 400.', extra={'url': target_url, 'event': INVALID_URL_SCHEME})
        return response_400(INVALID_URL_SCHEME_MESSAGE, error_code=INVALID_URL_SCHEME)

    # 3- Encrypt the original URL
    payload = shortener.engine.encrypt(target_url)

    # 4- Generate shortcode for the new link
    # NOTE: collisions are not detected, a colliding shortcode overwrites the older link
    shortcode = generate_shortcode()

    # 5- Store shortcode and encrypted URL mapping
    shortener.short_urls.put(ShortURLModel(shortcode=shortcode, payload=payload))
    short_url = get_short_url(shortcode, shortener.base_url)

    # 6- Return successful response to user
    logger.info(
        'URL shortened successfully. Responding with 200.',
        extra={'shortcode': shortcode, 'shortUrl': short_url, 'event': URL_SHORTENED},
    )
    return response_200(SHORTENED_URL_MESSAGE.format(short_url=short_url))


@bp.route('/<shortcode>', methods=['GET'])
@guarantee_500_response
def redirect_url(shortcode: str):
    """Handle incoming requests to redirect short URLs

    This handler follows this procedure to redirect URLs:
    - Step 1: Look up the encrypted URL by shortcode
    - Step 2: Decrypt the original URL
    - Step 3: Redirect client to original URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: original URL
        404: Unknown shortcode
        500: Stored payload can't be decrypted
    """
    shortener = services()

    # 1- Look up the encrypted URL by shortcode
    try:
        short_url = shortener.short_urls.get(shortcode)
    except ShortURLNotFoundError:
        logger.warning(
            'Short ID not found. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(SHORT_URL_NOT_FOUND_MESSAGE, error_code=SHORT_URL_NOT_FOUND)

    # 2- Decrypt the original URL
    try:
        target_url = shortener.engine.decrypt(short_url.payload)
    except CorruptPayloadError:
        logger.exception(
            'Stored payload for short URL is corrupt. Responding with 500.',
            extra={'shortcode': shortcode, 'event': CORRUPT_PAYLOAD},
        )
        return response_500(error_code=CORRUPT_PAYLOAD)

    # 3- Redirect client to original URL
    logger.info(
        'Redirecting client to original URL. Responding with 302.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=target_url)


@bp.route('/_health', methods=['GET'])  # '_' is outside the shortcode alphabet
def health():
    return jsonify({'status': 'healthy', 'urls_stored': services().short_urls.count()})


def not_found(error):
    return response_404(SHORT_URL_NOT_FOUND_MESSAGE, error_code=SHORT_URL_NOT_FOUND)


def build_counters(config: AppConfiguration) -> CounterBaseDAO:
    """Build the rate limiting counter DAO selected by `rate_limit.backend`"""
    backend = config['rate_limit']['backend']
    if backend == 'memory':
        logger.warning('Using in-process rate limit counters. Limits are not shared between server instances.')
        return CounterMemoryDAO()

    counters = CounterRedisDAO(**redis_config(config), prefix=app_prefix(), healthcheck=False)
    if not counters._healthcheck(raise_error=False):
        logger.warning('Redis counter service is unreachable. Requests will be denied until it is back.')
    return counters


def create_app(
    config: AppConfiguration,
    *,
    engine: CryptoEngine | None = None,
    short_urls: ShortURLBaseDAO | None = None,
    rate_limiter: RateLimiter | None = None,
) -> Flask:
    """Build the Flask application and its core components

    Components are constructed once here and shared by every request. Any of
    them may be injected instead, e.g. in tests.

    Args:
        config (AppConfiguration):
            Configuration returned by load_config().
        engine (CryptoEngine | None):
            Crypto engine. Defaults to one keyed with secret_key().
        short_urls (ShortURLBaseDAO | None):
            Short URL store. Defaults to a new ShortURLMemoryDAO.
        rate_limiter (RateLimiter | None):
            Rate limiter. Defaults to one built from config['rate_limit'].

    Returns:
        Flask: the WSGI application.

    Raises:
        ConfigurationError:
            If the secret key or rate limit configuration is invalid.
    """
    if engine is None:
        engine = CryptoEngine(secret_key())
    if short_urls is None:
        short_urls = ShortURLMemoryDAO()
    if rate_limiter is None:
        rate_limiter = RateLimiter(
            build_counters(config),
            limit=config['rate_limit']['limit'],
            window=config['rate_limit']['window'],
        )

    app = Flask(__name__)
    app.extensions[EXTENSION_NAME] = ShortenerServices(
        engine=engine,
        short_urls=short_urls,
        rate_limiter=rate_limiter,
        base_url=config['base_url'],
    )
    app.before_request(enforce_rate_limit)
    app.register_blueprint(bp)
    app.register_error_handler(404, not_found)
    return app
