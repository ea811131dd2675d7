"""cmdshell package: interactive option shell with directory listing and help.

Product metadata below is shown by the help text and used for the terminal title.
"""

__title__ = "cmdshell"
__version__ = "1.0.0"
__copyright__ = "Copyright (c) 2026 cmdshell contributors"
__description__ = "Interactive command shell demo with option-style directives."

__all__: list[str] = []
