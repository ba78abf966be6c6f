"""Command-line interface for snapgram."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from .clipboard import copy_to_clipboard
from .config import FONT_SIZE_MAX, FONT_SIZE_MIN, SCALE_MAX, SCALE_MIN, SnapgramConfig
from .exceptions import SnapgramError
from .export import CardExporter
from .language_detection import LanguageTag
from .pipeline import AUTO, SnippetPipeline
from .rendering import THEMES, get_theme, highlight_terminal

# Configure logging - default to WARNING to reduce verbosity
logging.basicConfig(
    level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def read_source(path: str | None) -> str:
    """Read the snippet from a file, or from stdin when path is None or ``-``."""
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def split_output(output: str | None) -> tuple[Path | None, str | None]:
    """Turn ``--output`` into (directory, filename); a directory means "pick a name"."""
    if not output:
        return None, None
    target = Path(output).expanduser()
    if target.is_dir() or output.endswith(("/", "\\")):
        return target, None
    return target.parent, target.name


def main(
    source: str,
    config: SnapgramConfig,
    language: str = AUTO,
    detect_only: bool = False,
    explain: bool = False,
    format_code: bool = True,
    preview: bool = False,
    title: str | None = None,
    output: str | None = None,
    share: bool = False,
    copy: bool = False,
) -> int:
    """
    Turn a snippet into a card.

    Args:
        source: Snippet text
        config: Resolved configuration
        language: Language name, or ``auto`` to detect it
        detect_only: Print the language and stop
        explain: Print the detected language and the rule that matched, then stop;
            ``language`` is not consulted
        format_code: Pretty-print before rendering
        preview: Print the highlighted snippet to the terminal
        title: Optional title shown in the card's window bar
        output: File or directory to save the card to
        share: Open the card with the system viewer after saving it
        copy: Copy the formatted snippet to the clipboard once the card is saved

    Returns:
        Exit code: 0 for success, 1 for failure
    """
    pipeline = SnippetPipeline(config)

    if explain:
        result = pipeline.detector.explain(source)
        print(f"{result.language.value}\t{result.rule or 'fallback'}")
        return 0

    try:
        snippet = pipeline.prepare(source, language, format_code=format_code)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if detect_only:
        print(snippet.language.value)
        return 0

    if preview:
        style = pipeline.card_options().card_theme.style
        sys.stdout.write(highlight_terminal(snippet.code, snippet.language, style=style))

    try:
        card = pipeline.render(snippet, pipeline.card_options(title=title))
        png = card.to_png()

        output_dir, filename = split_output(output)
        export_config = config.export
        if output_dir is not None:
            export_config = replace(export_config, output_dir=output_dir)
        exporter = CardExporter(export_config)

        if share:
            result = exporter.share(png, filename)
            if result.method == "download":
                print("Sharing is not available here, saved the card instead", file=sys.stderr)
            path = result.path
        else:
            path = exporter.download(png, filename)
    except (SnapgramError, OSError) as e:
        logger.error(f"Snippet export failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    width, height = card.logical_size
    print(f"Language: {snippet.language.value}{' (detected)' if snippet.detected else ''}")
    print(f"Card: {width}x{height} @{card.scale}x")
    print(f"Saved: {path}")

    if copy:
        try:
            tool = copy_to_clipboard(snippet.code)
        except (SnapgramError, OSError) as e:
            logger.error(f"Clipboard copy failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Copied formatted code to clipboard ({tool})", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snapgram",
        description="Code Snapgram - turn a code snippet into a shareable PNG card",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Detect the language and save a card in the current directory
  snapgram snippet.ts

  # Read from stdin, force the language and pick a theme
  cat main.cpp | snapgram --language cpp --theme candy

  # Just print the detected language
  snapgram --detect-only snippet.txt

  # Bigger text, three times the resolution, open it when done
  snapgram app.js --font-size 20 --scale 3 --share

Environment variables:
  SNAPGRAM_FONT_SIZE, SNAPGRAM_THEME, SNAPGRAM_SCALE, SNAPGRAM_PADDING,
  SNAPGRAM_FONT_NAME, SNAPGRAM_LINE_NUMBERS, SNAPGRAM_OUTPUT_DIR,
  SNAPGRAM_FILENAME_PREFIX, SNAPGRAM_INDENT_WIDTH, SNAPGRAM_FORMAT
        """,
    )

    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="File containing the snippet (default: read stdin)",
    )
    parser.add_argument(
        "--language",
        "-l",
        default=AUTO,
        help=f"Language of the snippet, or 'auto' (choices: auto, {', '.join(t.value for t in LanguageTag)})",
    )

    # Detection only
    parser.add_argument(
        "--detect-only",
        action="store_true",
        help="Print the detected language and exit",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the detected language and the rule that matched, then exit (not with --language)",
    )

    # Formatting
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Render the snippet exactly as given",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print the highlighted snippet to the terminal",
    )

    # Card appearance
    parser.add_argument(
        "--font-size",
        type=int,
        default=None,
        help=f"Font size in pixels, {FONT_SIZE_MIN}-{FONT_SIZE_MAX} (default: 14)",
    )
    parser.add_argument(
        "--theme",
        choices=sorted(THEMES),
        default=None,
        help="Card theme (default: midnight)",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=None,
        help=f"Resolution multiplier, {SCALE_MIN}-{SCALE_MAX} (default: 2)",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Title shown in the card's window bar",
    )
    parser.add_argument(
        "--line-numbers",
        action="store_true",
        help="Show line numbers",
    )

    # Export
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Output file or directory (default: SNAPGRAM_OUTPUT_DIR or current directory)",
    )
    parser.add_argument(
        "--share",
        action="store_true",
        help="Open the card with the system viewer after saving it",
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        help="Copy the formatted snippet to the clipboard after the card is saved",
    )

    # Verbosity
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def cli(argv: Sequence[str] | None = None):
    """Command-line interface for snapgram."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set logging level based on verbose flag
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
        logging.getLogger("snapgram").setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.WARNING)

    if args.detect_only and args.explain:
        parser.error("--detect-only and --explain are mutually exclusive")
    if args.explain and args.language.strip().lower() != AUTO:
        parser.error("--explain reports automatic detection and cannot be combined with --language")

    try:
        config = SnapgramConfig.from_env()
        card_overrides = {
            key: value
            for key, value in (
                ("font_size", args.font_size),
                ("theme", args.theme),
                ("scale", args.scale),
            )
            if value is not None
        }
        if args.line_numbers:
            card_overrides["line_numbers"] = True
        if card_overrides:
            config.card = replace(config.card, **card_overrides)
        get_theme(config.card.theme)
    except ValueError as e:
        parser.error(str(e))

    try:
        source = read_source(args.file)
    except OSError as e:
        parser.error(f"Cannot read {args.file}: {e}")

    try:
        exit_code = main(
            source=source,
            config=config,
            language=args.language,
            detect_only=args.detect_only,
            explain=args.explain,
            format_code=not args.no_format,
            preview=args.preview,
            title=args.title,
            output=args.output,
            share=args.share,
            copy=args.copy,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
