"""TaskSync: mirror GitHub issues into project tasks"""

__version__ = "1.0.0"
