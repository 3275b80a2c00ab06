"""Value types, object storage and Unicode identifier classification for an ECMAScript interpreter."""

__version__ = "0.0.1"