"""sinklog routing — filters log calls by priority and fans them out to sinks.

The ``Dispatcher`` sends each qualifying call to the global sink and to
every registered handler whose threshold it meets.  Sinks are plain
``(str) -> None`` callables.
"""
