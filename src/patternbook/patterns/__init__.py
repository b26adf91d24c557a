"""
Built-in pattern modules.

Each module is self-contained: its toy classes, a demo() returning the
demo transcript, check_* functions, and a module-level ENTRY that the
registry picks up. Nothing here is shared between patterns.
"""
