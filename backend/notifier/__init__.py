"""Notifier — welcome direct-message delivery with provider error classification."""
