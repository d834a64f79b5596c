from cryptshortener.utils.config import app_env, app_name, project_root, app_prefix, load_config, redis_config, secret_key
from cryptshortener.utils.helpers import get_short_url, require_environment, guarantee_500_response
from cryptshortener.utils.shortener import generate_shortcode
from cryptshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'redis_config',
    'secret_key',
    'get_short_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
