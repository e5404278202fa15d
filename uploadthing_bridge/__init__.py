"""UploadThing bridge: CLI scripts and HTTP facade for the UploadThing file API."""

__version__ = "0.1.0"
