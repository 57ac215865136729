from .num_utils import is_close_to_int, parse_number, read_fraction

__all__ = ["is_close_to_int", "parse_number", "read_fraction"]
