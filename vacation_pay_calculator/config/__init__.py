"""
Configuration loading.
"""

from vacation_pay_calculator.config.manager import ConfigManager, configure_logging

__all__ = ["ConfigManager", "configure_logging"]
