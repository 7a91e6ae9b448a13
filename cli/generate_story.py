#!/usr/bin/env python3
"""
CLI for generating a bedtime story without running the API.

Usage:
    python cli/generate_story.py Ava --animal owl --theme courage
    python cli/generate_story.py Leo --animal fox --theme sharing --output leo_fox.md
    python cli/generate_story.py Mia --animal penguin --theme empathy --stdout
"""

import argparse
import asyncio
import re
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.api.dependencies import build_story_generator  # noqa: E402
from backend.api.models.requests import validate_story_request  # noqa: E402
from backend.core.errors import GenerationError, StoryValidationError  # noqa: E402
from backend.core.types import Animal, Theme  # noqa: E402


def main():
    parser = argparse.ArgumentParser(
        description="Generate a personalized bedtime story",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python cli/generate_story.py Ava --animal owl --theme courage
    python cli/generate_story.py "Sam" --animal bear --theme honesty --stdout
        """,
    )

    parser.add_argument(
        "child_name",
        type=str,
        help="Name of the child the story is about",
    )

    parser.add_argument(
        "--animal", "-a",
        choices=[a.value for a in Animal],
        required=True,
        help="Animal companion",
    )

    parser.add_argument(
        "--theme", "-t",
        choices=[t.value for t in Theme],
        required=True,
        help="Lesson the story teaches",
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file name (saved to output/ directory). Auto-generated if not specified.",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print to terminal instead of saving to file",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress information",
    )

    args = parser.parse_args()

    try:
        request = validate_story_request(
            {"childName": args.child_name, "animal": args.animal, "theme": args.theme}
        )
    except StoryValidationError as e:
        for error in e.errors:
            print(f"{error.field}: {error.message}", file=sys.stderr)
        sys.exit(2)

    try:
        generator = build_story_generator()
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(f"Generating a {request.theme.value} story for {request.child_name} and a {request.animal.value}...")

    try:
        story = asyncio.run(
            generator.generate(request.child_name, request.animal, request.theme)
        )
    except GenerationError as e:
        print(f"Story generation failed: {e}", file=sys.stderr)
        sys.exit(1)

    formatted = f"# {story.title}\n\n{story.content}\n"

    if args.stdout:
        print(formatted)
    else:
        output_dir = Path(__file__).parent.parent / "output"
        output_dir.mkdir(exist_ok=True)

        if args.output:
            filename = args.output if args.output.endswith(".md") else f"{args.output}.md"
        else:
            # Auto-generate filename from child, animal and timestamp
            slug = re.sub(r"[^a-z0-9]+", "_", f"{request.child_name}_{request.animal.value}".lower())
            slug = slug[:30].strip("_")
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"{slug}_{timestamp}.md"

        output_path = output_dir / filename
        output_path.write_text(formatted)
        print(f"Story saved to: {output_path}")

    if args.verbose:
        print("\n--- Generation Summary ---")
        print(f"Title: {story.title}")
        print(f"Word count: {len(story.content.split())}")


if __name__ == "__main__":
    main()
