from cryptshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO
from cryptshortener.dao.memory.counter_memory_dao import CounterMemoryDAO


__all__ = [
    'ShortURLMemoryDAO',
    'CounterMemoryDAO',
]
