from .base import RestBaseRepository
from .employee import RestEmployeeRepository
from .util import RetryPolicy, StaticTokenProvider, TokenProvider

__all__ = ['RestBaseRepository', 'RestEmployeeRepository', 'RetryPolicy', 'StaticTokenProvider', 'TokenProvider']
