"""
UI package for presenting edited output in the terminal.
"""

from .hexdump import render_hexdump

__all__ = ['render_hexdump']
