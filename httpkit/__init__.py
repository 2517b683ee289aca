"""Types for HTTP versions and request URIs: schemes, authorities, ports, paths and queries."""

__version__ = "1.3.1"