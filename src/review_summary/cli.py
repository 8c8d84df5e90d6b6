"""CLI entry point - argparse parsing and flow"""

import argparse
import sys
import time

from review_summary import __version__
from review_summary.config import Config
from review_summary.errors import SummaryError
from review_summary.models import PROVIDERS, TONES
from review_summary.summarizer import ReviewSummarizer
from review_summary.utils import (
    _Colors as _C,
    log_step, log_info, log_success, log_warn, log_error, split_reviews,
)


def _read_reviews(paths: list[str]) -> list[str]:
    """Reviews from files, or stdin when no file is given"""
    if not paths:
        return split_reviews(sys.stdin.read())

    reviews: list[str] = []
    for path in paths:
        with open(path, "r", encoding="utf-8") as f:
            reviews.extend(split_reviews(f.read()))
    return reviews


def _build_config_from_args(args: argparse.Namespace) -> Config:
    config = Config(
        provider=args.provider or "",
        max_characters=args.max_characters,
        tone=args.tone,
        language=args.lang,
        temperature=args.temperature,
    )
    if args.api_key:
        if config.provider == "openai":
            config.openai_api_key = args.api_key
        else:
            config.gemini_api_key = args.api_key
    if args.model:
        if config.provider == "openai":
            config.openai_model = args.model
        else:
            config.gemini_model = args.model
    return config


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="review-summary",
        description="Summarize customer reviews with Gemini or OpenAI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Reviews are separated by blank lines.

Examples:
  %(prog)s reviews.txt
  %(prog)s reviews.txt -p openai -t professional -m 300
  cat reviews.txt | %(prog)s -x "Holiday season"
  %(prog)s reviews.txt --print-prompt
        """,
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Text files with reviews (default: read stdin)",
    )
    parser.add_argument(
        "-p", "--provider",
        default=None,
        choices=list(PROVIDERS),
        help="AI backend (default: $REVIEW_SUMMARY_PROVIDER or gemini)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key (or set GEMINI_API_KEY / OPENAI_API_KEY)",
    )
    parser.add_argument(
        "-m", "--max-characters",
        type=int,
        default=None,
        help="Maximum summary length in characters (default: 250)",
    )
    parser.add_argument(
        "-t", "--tone",
        default=None,
        choices=list(TONES),
        help="Summary tone (default: friendly)",
    )
    parser.add_argument(
        "-l", "--lang",
        default=None,
        help="Output language tag (default: es)",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Model id for the selected provider",
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=None,
        help="Sampling temperature (default: 0.7)",
    )
    parser.add_argument(
        "-x", "--context",
        default=None,
        help="Extra context appended to the prompt",
    )
    parser.add_argument(
        "--print-prompt",
        action="store_true",
        help="Print the rendered prompt and exit without calling the API",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    from dotenv import load_dotenv
    load_dotenv()

    args = _parse_args(argv)
    config = _build_config_from_args(args)

    try:
        reviews = _read_reviews(args.files)
    except OSError as e:
        log_error(str(e))
        sys.exit(2)
    if not reviews:
        log_error("No reviews found in input")
        sys.exit(2)

    try:
        provider = config.to_provider()
    except ValueError as e:
        log_error(str(e))
        sys.exit(2)
    summarizer = ReviewSummarizer(provider)

    if args.print_prompt:
        print(summarizer.build_prompt(reviews, args.context))
        return

    if not provider.api_key and provider.name in PROVIDERS:
        log_warn(f"No API key found for {provider.name}.")
        log_info("Set GEMINI_API_KEY / OPENAI_API_KEY or use --api-key")
        sys.exit(2)

    log_step("🤖", f"Summarizing {len(reviews)} reviews with {provider.name}...")
    t0 = time.time()
    try:
        summary = summarizer.generate_summary(reviews, args.context)
    except SummaryError as e:
        log_error(str(e))
        sys.exit(1)

    log_success(f"Summary generated in {time.time() - t0:.1f}s")
    log_info(f"{len(summary)} characters (limit {provider.options.max_characters})")
    log_step("📋", "Summary:")
    print(summary)
    print(f"\n{_C.GREEN}{_C.BOLD}  ✦ Done ✦{_C.RESET}", file=sys.stderr)


if __name__ == "__main__":
    main()
