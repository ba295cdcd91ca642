"""Command-line interface for ConsultLens."""

import argparse
import json
import logging
import sys

from .core.config import settings
from .core.constants import FileConstants, FrequencyConstants
from .core.errors import ConsultLensError
from .core.frequency import intensity_band
from .core.keywords import load_keyword_config
from .core.models import StanceLabel
from .services.loader import load_comments_from_file, load_sample_comments
from .services.pipeline import CommentAnalyzer
from .utils.data_prep import prepare_export, export_to_json, frequencies_to_frame, export_to_csv

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _load_comments(args):
    """Comments from the sample set or the file given on the command line."""
    if args.sample or not args.file:
        comments = load_sample_comments()
        print(f"Loaded {len(comments)} sample comments for analysis")
        return comments
    comments = load_comments_from_file(args.file, limit=args.limit_comments)
    print(f"Processed {len(comments)} comments for analysis")
    return comments


def _build_analyzer(args) -> CommentAnalyzer:
    overrides = {}
    if getattr(args, "deterministic", False):
        overrides["deterministic"] = True
    run_settings = settings.model_copy(update=overrides) if overrides else settings
    if getattr(args, "keywords", None):
        config = load_keyword_config(args.keywords, required=True)
    else:
        config = load_keyword_config(run_settings.keywords_file)
    return CommentAnalyzer(config=config, settings=run_settings)


def positive_int(value):
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _print_summary(summary):
    if summary is None:
        print("No summary available")
        return

    counts = summary.sentiment_counts
    print(f"\nExecutive Summary ({summary.total_comments} comments)")
    print(f"Overall sentiment: {summary.overall_sentiment.value.capitalize()}")
    print(f"Positive: {counts.positive}  Neutral: {counts.neutral}  Negative: {counts.negative}")

    for title, tags in (
        ("Key themes", summary.themes),
        ("Main concerns", summary.concerns),
        ("Suggestions", summary.suggestions),
    ):
        print(f"\n{title}:")
        if tags:
            for tag in tags:
                print(f"  - {tag}")
        else:
            print("  (none identified)")


def cmd_analyze(args):
    """Analyze command."""
    comments = _load_comments(args)
    result = _build_analyzer(args).analyze(comments)

    distribution = result.stance_distribution
    print(f"\nAnalyzing {len(result.comments)} stakeholder comments")
    for label in StanceLabel:
        print(f"  {label.value.capitalize():<13} {distribution.count(label)} ({distribution.percentage(label):.1f}%)")

    print("\nPer-comment stance:")
    for i, item in enumerate(result.classifications, 1):
        print(f"  {i}. [{item.stance.value}, {item.confidence * 100:.1f}%] {item.comment[:100]}")

    _print_summary(result.summary)

    if result.word_frequencies:
        print("\nTop keywords:")
        for item in result.word_frequencies[:FrequencyConstants.TOP_KEYWORDS_DISPLAY]:
            print(f"  {item.word}: {item.frequency} mentions")

    if args.out:
        export_to_json(prepare_export(result), args.out)
        print(f"\nResults exported to {args.out}")


def cmd_words(args):
    """Word frequency command."""
    comments = _load_comments(args)
    result = _build_analyzer(args).analyze(comments)
    words = result.word_frequencies[:args.limit]

    if not words:
        print("No word cloud available")
        return

    max_freq = words[0].frequency
    print(f"\nWord frequency analysis ({len(words)} words)")
    for i, item in enumerate(words, 1):
        print(f"  {i:>2}. {item.word:<20} {item.frequency:>4}  size={item.size:<3} {intensity_band(item.frequency, max_freq)}")

    if args.csv:
        export_to_csv(frequencies_to_frame(words), args.csv)
        print(f"\nWord table exported to {args.csv}")


def cmd_summary(args):
    """Summary command."""
    comments = _load_comments(args)
    result = _build_analyzer(args).analyze(comments)
    _print_summary(result.summary)


def cmd_export(args):
    """Export command."""
    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return 1
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        return 1

    if args.pretty:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        output_file = args.output or args.input_file.replace('.json', '_export.json')
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        print(f"Exported to {output_file}")
    return 0


def _add_input_args(parser):
    parser.add_argument('file', nargs='?', help='CSV or TXT file with one comment per line')
    parser.add_argument('--sample', action='store_true', help='Use the bundled sample comments')
    parser.add_argument('--limit-comments', type=positive_int, default=None, help='Maximum comments to read from the file')
    parser.add_argument('--keywords', help='YAML file overriding keyword tables')
    parser.add_argument('--deterministic', action='store_true', help='Fixed confidence for tied classifications')


def build_parser():
    """Argument parser with all subcommands."""
    parser = argparse.ArgumentParser(description="ConsultLens - Stakeholder Comment Analysis")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Classify, rank words and summarize comments')
    _add_input_args(analyze_parser)
    analyze_parser.add_argument('--out', help='Output JSON file')

    # Words command
    words_parser = subparsers.add_parser('words', help='Word frequency ranking')
    _add_input_args(words_parser)
    words_parser.add_argument('--limit', type=positive_int, default=FrequencyConstants.CLOUD_WORDS_DISPLAY, help='Number of words to show')
    words_parser.add_argument('--csv', help='Write the ranking to a CSV file')

    # Summary command
    summary_parser = subparsers.add_parser('summary', help='Executive summary of comments')
    _add_input_args(summary_parser)

    # Export command
    export_parser = subparsers.add_parser('export', help='Export analysis results')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'words':
            cmd_words(args)
        elif args.command == 'summary':
            cmd_summary(args)
        elif args.command == 'export':
            return cmd_export(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130
    except (ConsultLensError, OSError) as e:
        logger.error(f"Command failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
