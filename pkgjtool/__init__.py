"""Game package catalog tools: zRIF decoding, raw inflate, SHA-256/HMAC, file helpers and browsing logic."""

__version__ = "0.1.0"