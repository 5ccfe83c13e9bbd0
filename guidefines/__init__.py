"""Define tables and style-flag JSON files for GUI layout editing."""

__version__ = "0.1.0"
__all__ = ["define_manager", "flag_values", "flag_semantics", "flag_rules", "flag_manager"]