"""
Normalize a decklist file from the command line.

Prints the MTGO-style decklist to stdout and validation findings to the log.
Pending suggestions are listed instead of output unless --accept-suggestions
is given.

    python -m pauperlist.jobs.normalize_deck deck.txt
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pauperlist.models.failure import KnownError
from pauperlist.services.autocorrect import get_autocorrect_whitelist
from pauperlist.services.card_resolver import CardResolver
from pauperlist.services.rate_limit import get_shared_queue
from pauperlist.services.scryfall_client import ScryfallClient
from pauperlist.services.session import NormalizationSession

logger = logging.getLogger(__name__)


async def run_normalize(text: str, accept_suggestions: bool = False) -> str | None:
    """
    Normalize decklist text against Scryfall.

    Args:
        text: Raw decklist text
        accept_suggestions: Accept every fuzzy suggestion without asking

    Returns:
        Formatted decklist, or None if suggestions were left pending
    """
    async with ScryfallClient() as client:
        resolver = CardResolver(
            client, queue=get_shared_queue(), corrections=get_autocorrect_whitelist()
        )
        session = NormalizationSession(text, resolver)
        outcome = await session.run()

    for issue in outcome.validation.errors:
        logger.error("%s", issue.message)
    for issue in outcome.validation.warnings:
        logger.warning("%s", issue.message)
    for correction in outcome.auto_corrections:
        logger.info("Corrected %s -> %s", correction.searched_name, correction.suggested_name)

    if outcome.output is not None:
        return outcome.output

    if not accept_suggestions:
        for suggestion in outcome.suggestions:
            logger.warning(
                "Did you mean %r instead of %r?",
                suggestion.suggested_name,
                suggestion.searched_name,
            )
        return None

    for suggestion in outcome.suggestions:
        logger.info("Accepting %s -> %s", suggestion.searched_name, suggestion.suggested_name)
        session.accept_suggestion(suggestion.searched_name)
    return session.render()


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    parser = argparse.ArgumentParser(description="Normalize a Pauper decklist")
    parser.add_argument("path", type=Path, help="Decklist text file")
    parser.add_argument(
        "--accept-suggestions",
        action="store_true",
        help="Use Scryfall's suggested name for every misspelled card",
    )
    args = parser.parse_args()

    try:
        output = asyncio.run(
            run_normalize(args.path.read_text(encoding="utf-8"), args.accept_suggestions)
        )
    except KnownError as e:
        logger.error("%s", e.message)
        sys.exit(1)

    if output is None:
        sys.exit(2)
    print(output)


if __name__ == "__main__":
    main()
