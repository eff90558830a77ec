"""Forward coin daemon block notifications to a pool's CLI listener."""

__version__ = '0.1.0'
