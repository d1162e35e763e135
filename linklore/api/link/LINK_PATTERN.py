import re

# A component is a non-empty run of anything but the five syntax characters
_COMPONENT = r"([^|\[\]#^]+)"

# Pattern for !?[[base|alias#anchor^block]] with each slot after base optional
# and the slots in that fixed order
LINK_PATTERN = re.compile(
    r"(!)?"
    r"\[\[" + _COMPONENT + r"(?:\|" + _COMPONENT + r")?"
    r"(?:#" + _COMPONENT + r")?"
    r"(?:\^" + _COMPONENT + r")?"
    r"\]\]"
)
