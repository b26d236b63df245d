"""pkgexport - CMake package export descriptor generator."""

__version__ = "0.1.0"
