import re

# One unified-logfile entry; groups keep positional order: timestamp, domain, level, message
LOG_PATTERN = re.compile(
    r"""^\[(?P<timestamp>[^\]]+)\]\s*
    \[(?P<domain>\w+)\]\s*
    (?P<level>DEBUG|INFO|WARN|ERROR):\s*
    (?P<message>.*)$""",
    re.IGNORECASE | re.VERBOSE,
)
