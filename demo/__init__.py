from .data import credentials, employees

__all__ = ['credentials', 'employees']
