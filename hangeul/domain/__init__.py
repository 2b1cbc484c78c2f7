"""Pure codec logic: no I/O, no logging."""
