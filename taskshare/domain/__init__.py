"""Domain layer: enums and exceptions. No I/O, no framework imports."""
