#!/usr/bin/env python3
"""Utility script to test ReformattingService with a local transcript file.

This script:
1. Reads raw_transcript.txt from the project root
2. Reformats it with a custom prompt using the real OpenAI API
3. Saves the result to formatted_result.md

Only OPENAI_API_KEY is needed; no database is used because the prompt is
passed directly instead of looked up by template id.
"""
import asyncio
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add parent directory to path to import services
sys.path.insert(0, str(Path(__file__).parent.parent))

from services.errors import TranscriptFormatterError
from services.reformatting_service import ReformattingService
from services.default_templates import DEFAULT_TEMPLATES


async def main():
    """Main execution function."""
    input_file = Path(__file__).parent.parent / "raw_transcript.txt"
    output_file = Path(__file__).parent.parent / "formatted_result.md"
    prompt = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_TEMPLATES[0]["prompt"]

    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}")
        sys.exit(1)

    print(f"Reading transcript from: {input_file}")
    raw_transcript = input_file.read_text(encoding="utf-8")
    print(f"Transcript length: {len(raw_transcript)} characters")
    print("Processing with ReformattingService...")

    try:
        service = ReformattingService()
        formatted = await service.format_transcript(raw_transcript, custom_prompt=prompt)
    except TranscriptFormatterError as e:
        print(f"Error processing transcript: {e}")
        sys.exit(1)

    output_file.write_text(formatted, encoding="utf-8")
    print("✓ Processing complete!")
    print(f"✓ Results saved to: {output_file}")
    print(f"Formatted transcript length: {len(formatted)} characters")


if __name__ == "__main__":
    asyncio.run(main())
