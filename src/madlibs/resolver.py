"""
Placeholder resolution for story templates.

Placeholders are bracketed tokens such as ``<name>``. Each distinct token is
asked for exactly once, then every occurrence is replaced in a single pass.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"<[^>]+>")


@dataclass(frozen=True)
class ResolvedStory:
    template: str
    replacements: Dict[str, str]
    text: str


def find_placeholders(template: str) -> List[str]:
    """
    Find the distinct placeholder tokens in a template.

    Args:
        template: Story template text

    Returns:
        Tokens (brackets included) in order of first appearance
    """
    seen = {}
    for match in PLACEHOLDER_PATTERN.finditer(template):
        seen.setdefault(match.group(0), None)
    return list(seen)


def collect_replacements(placeholders: List[str], ask: Callable[[str], str]) -> Dict[str, str]:
    """
    Ask for a replacement for each placeholder.

    Args:
        placeholders: Distinct tokens to ask for
        ask: Callable returning the user's reply for a token

    Returns:
        Mapping of token to reply, with surrounding whitespace removed
    """
    replacements: Dict[str, str] = {}
    for placeholder in placeholders:
        replacements[placeholder] = ask(placeholder).strip()
    return replacements


def apply_replacements(template: str, replacements: Dict[str, str]) -> str:
    """
    Substitute every known placeholder in the template.

    Tokens without a replacement are left as they are.
    """
    return PLACEHOLDER_PATTERN.sub(
        lambda match: replacements.get(match.group(0), match.group(0)),
        template
    )


def resolve_template(template: str, ask: Callable[[str], str]) -> ResolvedStory:
    """
    Fill in all placeholders of a template.

    Args:
        template: Story template text
        ask: Callable returning the user's reply for a token

    Returns:
        ResolvedStory with the replacement map and the final text
    """
    placeholders = find_placeholders(template)
    logger.debug(f"Template has {len(placeholders)} distinct placeholders")
    replacements = collect_replacements(placeholders, ask)
    return ResolvedStory(
        template=template,
        replacements=replacements,
        text=apply_replacements(template, replacements)
    )
