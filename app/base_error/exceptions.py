"""Exceptions raised by the package itself.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""


class FactoryConfigurationError(TypeError):
    """Raised when an error factory is built with a wrong argument count."""
