"""boilerkit: drop Axios and Socket.IO client boilerplate into a frontend project."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("boilerkit")
except PackageNotFoundError:
    __version__ = "0.0.0"
