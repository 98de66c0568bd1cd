"""Spanish DNI / NIE format check.

One leading character in X, Y, Z or a digit, seven digits, and a control
letter that is never I, O or U. Only the shape is checked, not the control
letter itself.
"""

import re

NATIONAL_ID_PATTERN = re.compile(r"[XYZ0-9][0-9]{7}[A-HJ-NP-TV-Z]", re.IGNORECASE | re.ASCII)


def is_valid_national_id(value: str) -> bool:
    return NATIONAL_ID_PATTERN.fullmatch(value) is not None
