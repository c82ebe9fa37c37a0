"""Flag emoji encoding and decoding."""

from countryemoji.flags.flagcodec import (
    code_to_flag,
    flag_to_code,
    is_flag_shape,
)

__all__ = [
    "code_to_flag",
    "flag_to_code",
    "is_flag_shape",
]
