from cryptshortener.dao.base.short_url_base_dao import ShortURLBaseDAO
from cryptshortener.dao.base.counter_base_dao import CounterBaseDAO


__all__ = [
    'ShortURLBaseDAO',
    'CounterBaseDAO',
]
