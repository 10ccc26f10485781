"""
RecruitTrack Parser Package.

Example:
    from recruit.parser import RecruitParser

    command = RecruitParser().parse_command("add-tags 1 t/python")
"""

from recruit.parser.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    ArgumentMultimap,
    ArgumentTokenizer,
    Prefix,
)
from recruit.parser.recruit_parser import RecruitParser

__all__ = [
    "PREFIX_ADDRESS",
    "PREFIX_EMAIL",
    "PREFIX_NAME",
    "PREFIX_PHONE",
    "PREFIX_TAG",
    "ArgumentMultimap",
    "ArgumentTokenizer",
    "Prefix",
    "RecruitParser",
]
