"""Interactive picker adapters."""

from projkt.adapters.picker.rich_picker import RichPicker, fuzzy_filter


__all__ = ["RichPicker", "fuzzy_filter"]
