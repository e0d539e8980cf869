"""Output file writers."""

from projkt.adapters.writer.safe_writer import SafeWriter


__all__ = ["SafeWriter"]
