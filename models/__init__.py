from .employee import Employee, EmployeeInput
from .envelope import Envelope

__all__ = ['Employee', 'EmployeeInput', 'Envelope']
