"""
Example log builder.

Builds the postfix token sequence for `1 + 2`, as a compiler front-end
would emit it.
"""
from rpnlog.log import OrderedStringLog


def build_example_log() -> OrderedStringLog:
    log = OrderedStringLog()
    log.append("PUSH 1")
    log.append("PUSH 2")
    log.append("ADD")
    return log
