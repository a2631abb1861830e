from .employee import EmployeeRepository
from .errors import UpstreamError, UpstreamUnavailableError

__all__ = ['EmployeeRepository', 'UpstreamError', 'UpstreamUnavailableError']
