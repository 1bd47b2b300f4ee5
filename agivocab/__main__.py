"""Main entry point for agivocab package."""

import sys

from loguru import logger

from agivocab.cli import create_fix_escapes_parser, create_parser
from agivocab.core import (
    AgiVocabError,
    AmbiguousVocabularyError,
    load_config,
)
from agivocab.messages import fix_messages_file
from agivocab.processing import run_pipeline
from agivocab.resolution import log_duplicate_words
from agivocab.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("agivocab - Extended Word Table Generator")
        logger.info("=" * 60)
        logger.info("")


def _print_config_summary(config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Vocabulary: {config.vocabulary}")
        logger.info(f"  Output: {config.output or 'stdout'}")
        if config.reports:
            logger.info(f"  Reports: {config.reports}")
        logger.info(f"  Encoding: {config.encoding}")
        if config.debug_words:
            logger.info(f"  Debug words: {', '.join(config.debug_words)}")
        logger.info("")


def _run_pipeline_with_error_handling(config) -> int:
    """Run pipeline, turning known failures into an exit status."""
    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * 60)
        return 0
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except AmbiguousVocabularyError as e:
        log_duplicate_words(e.duplicates)
        logger.error(f"✗ {e}")
        return 1
    except AgiVocabError as e:
        logger.error(f"✗ {e}")
        return 1


def main() -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    _print_startup_banner(config.verbose)
    _print_config_summary(config)

    sys.exit(_run_pipeline_with_error_handling(config))


def fix_escapes_main() -> None:
    """Entry point for restoring escape sequences in messages.json."""
    parser = create_fix_escapes_parser()
    args = parser.parse_args()

    # A dry run is only useful if it reports what it would change
    setup_logger(verbose=args.verbose or args.dry_run)

    prefix = "[DRY RUN] " if args.dry_run else ""
    logger.info(f"{prefix}Fixing escape sequences in: {args.messages}")

    try:
        result = fix_messages_file(args.messages, dry_run=args.dry_run)
    except AgiVocabError as e:
        logger.error(f"✗ {e}")
        sys.exit(1)

    logger.info(f"Messages checked: {result.checked}")
    if result.fixed == 0:
        logger.info("✓ No issues found! All escape sequences are correct.")
    elif args.dry_run:
        logger.info(f"{result.fixed} messages would be fixed (run without --dry-run to apply)")
    else:
        logger.info(f"✓ Fixed {result.fixed} messages with escape sequence issues")


if __name__ == "__main__":
    main()
