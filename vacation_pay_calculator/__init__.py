"""
Vacation pay calculator: Russian statutory vacation pay over a holiday calendar.
"""

__version__ = "0.1.0"
