"""
lexisent - Command Line Entry Point

Scores the sentiment of a single utterance or of a file holding one
utterance per line.
"""

import argparse
import json
import logging
import sys
from colorama import init, Fore
from dotenv import load_dotenv

from lexisent.config import load_config
from lexisent.lexicon import LexiconType
from lexisent.sentiment import SentimentAnalyzer, format_summary, score_file, summarize_scores

# Load environment variables
load_dotenv()

# Initialize colorama for colored terminal output
init(autoreset=True)

LABEL_COLORS = {
    'POSITIVE': Fore.GREEN,
    'NEGATIVE': Fore.RED,
    'NEUTRAL': Fore.YELLOW,
    'UNSUPPORTED': Fore.MAGENTA,
}


def print_banner():
    """Print application banner."""
    print(Fore.CYAN + "=" * 70)
    print(Fore.CYAN + "  LEXISENT")
    print(Fore.CYAN + "  Lexicon-based Sentiment Scorer")
    print(Fore.CYAN + "=" * 70)
    print()


def format_result_report(result) -> str:
    """Human readable report for a single result."""
    lines = [
        f"Language:    {result.language}",
        f"Lexicon:     {result.type}",
        f"Label:       {result.label}",
        f"Score:       {result.score:.3f}",
        f"Comparative: {result.comparative:.3f}",
        f"Words/Hits:  {result.num_words}/{result.num_hits}",
    ]
    if result.is_supported:
        lines.insert(4, f"Range:       {result.range:.3f}")
        for ws in result.word_scores:
            lines.append(f"  {ws.word:<20} {ws.score:+.3f}")
    return "\n".join(lines)


def main():
    """Main application entry point."""
    parser = argparse.ArgumentParser(
        description='lexisent - Score sentiment polarity with a lexicon'
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--text',
        type=str,
        help='Utterance to score'
    )
    source.add_argument(
        '--file',
        type=str,
        help='Text file with one utterance per line'
    )

    parser.add_argument(
        '--language',
        type=str,
        default=None,
        help='Language code (default: from config, else en)'
    )

    parser.add_argument(
        '--type',
        type=str,
        default=None,
        choices=[t.value for t in LexiconType],
        help='Lexicon type (default: per language)'
    )

    parser.add_argument(
        '--no-stemmer',
        action='store_true',
        help='Disable the stemmed fallback lookup'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration file (default: config.yaml if present)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as JSON'
    )

    parser.add_argument(
        '--csv',
        type=str,
        default=None,
        help='Write batch results to this CSV file (with --file)'
    )

    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only log warnings and errors'
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"{Fore.RED}Configuration error: {e}")
        sys.exit(1)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    overrides = {}
    if args.language:
        overrides['language'] = args.language
    if args.type:
        overrides['lexicon_type'] = args.type
    if args.no_stemmer:
        overrides['use_stemmer'] = False

    try:
        analyzer = SentimentAnalyzer.from_config(config, **overrides)
    except ValueError as e:
        print(f"{Fore.RED}Configuration error: {e}")
        sys.exit(1)

    if args.text is not None:
        result = analyzer.get_sentiment(args.text)
        if args.json:
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
            return
        print_banner()
        color = LABEL_COLORS.get(result.label, '')
        print(color + format_result_report(result))
        return

    try:
        df = score_file(analyzer, args.file)
    except FileNotFoundError as e:
        print(f"{Fore.RED}Input file not found: {e}")
        sys.exit(1)

    summary = summarize_scores(df)

    if args.csv:
        df.to_csv(args.csv, index=False)
        print(f"{Fore.GREEN}Results saved to {args.csv}")

    if args.json:
        print(json.dumps(summary, indent=2, ensure_ascii=False))
        return

    print_banner()
    print(format_summary(summary))
    if not analyzer.is_supported:
        print(f"\n{Fore.MAGENTA}No {analyzer.lexicon_type.value} vocabulary for '{analyzer.language}'")


if __name__ == '__main__':
    main()
