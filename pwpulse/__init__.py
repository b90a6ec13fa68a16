"""Sample specs, volumes, property lists, time values, UTF-8 helpers and a small JSON parser."""

__version__ = "0.1.0"

__all__ = ["cvolume", "json", "proplist", "sample", "timeval", "utf8", "util", "volume"]