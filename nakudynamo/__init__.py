"""Download, verify, unpack and run DynamoDB Local with a bundled Java runtime."""

__version__ = "0.1.0"