"""Merge global and user code sets into one working set."""

import logging
from dataclasses import dataclass, field

from ..storage import LineStore
from .models import CODES_SECTION, GeckoCode
from .parser import read_codes

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Outcome of combining global and local codes.

    Attributes:
        codes: The working set, globals first, then surviving local codes.
        discarded: Local codes dropped because their name was already taken.
    """

    codes: list[GeckoCode] = field(default_factory=list)
    discarded: list[GeckoCode] = field(default_factory=list)


def combine_codes(
    global_codes: list[GeckoCode],
    local_codes: list[GeckoCode],
) -> MergeResult:
    """Combine parsed code lists; global codes always win a name collision.

    A local code is kept only if no code already in the working set has
    its name. Activation flags are left untouched.
    """
    result = MergeResult(codes=list(global_codes))
    taken = {code.name for code in result.codes}

    for code in local_codes:
        if code.name in taken:
            result.discarded.append(code)
            continue
        result.codes.append(code)
        taken.add(code.name)

    return result


def merge_sources(
    global_source: LineStore,
    local_source: LineStore,
    section: str = CODES_SECTION,
) -> MergeResult:
    """Parse both sources and combine them, logging discarded user codes."""
    result = combine_codes(
        read_codes(global_source, is_local=False, section=section),
        read_codes(local_source, is_local=True, section=section),
    )
    for code in result.discarded:
        logger.info("Ignoring user code %r: a global code has the same name", code.name)
    return result


def merge_codes(
    global_source: LineStore,
    local_source: LineStore,
    section: str = CODES_SECTION,
) -> list[GeckoCode]:
    """Parse both sources and merge them into a working set.

    NOTE: This does not read any activation markers; apply
    ``mark_enabled``/``mark_default_enabled`` afterwards.
    """
    return merge_sources(global_source, local_source, section=section).codes
