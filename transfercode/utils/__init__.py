"""Transfer Code Diagnostics - Utilities"""

from transfercode.utils.log_setup import setup_logging

__all__ = ["setup_logging"]
