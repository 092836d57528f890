#!/usr/bin/env python3
"""
Black Box Verification Script for a running deployment.

Fetches a transcript, lists templates, asks for suggestions and reformats
the transcript with the first template, printing what each step returned.

Usage:
    python scripts/verify_deployment.py <BASE_URL> [VIDEO_ID]

Example:
    python scripts/verify_deployment.py http://localhost:8000 dQw4w9WgXcQ
"""
import asyncio
import sys
from datetime import datetime

import httpx

DEFAULT_VIDEO_ID = "dQw4w9WgXcQ"


def log(message: str):
    """Log with timestamp."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{timestamp}] {message}")


def check(response: httpx.Response, step: str) -> dict | list:
    """Exit with the error body if a step failed."""
    if response.status_code != 200:
        log(f"✗ {step} failed: status={response.status_code}, body={response.text}")
        sys.exit(1)
    log(f"✓ {step}")
    return response.json()


async def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/verify_deployment.py <BASE_URL> [VIDEO_ID]")
        sys.exit(1)

    base_url = sys.argv[1].rstrip("/")
    video_id = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_VIDEO_ID

    log("=" * 60)
    log("BLACK BOX VERIFICATION")
    log("=" * 60)
    log(f"Target URL: {base_url}")
    log(f"Video id: {video_id}")

    async with httpx.AsyncClient(base_url=base_url, timeout=300) as client:
        check(await client.get("/health"), "Health check")

        data = check(await client.get(f"/api/transcript/{video_id}"), "Fetch transcript")
        transcript = data["transcript"]
        log(f"  Transcript length: {len(transcript)} chars")

        templates = check(await client.get("/api/templates"), "List templates")
        log(f"  Templates: {[t['name'] for t in templates]}")

        suggestions = check(
            await client.post("/api/suggest-templates", json={"transcript": transcript}),
            "Suggest templates"
        )
        log(f"  Suggestions: {[(s['name'], s['score']) for s in suggestions]}")

        template_id = (suggestions or templates)[0]["id"]
        result = check(
            await client.post(
                "/api/process-transcript",
                json={"transcript": transcript, "templateId": template_id}
            ),
            "Process transcript"
        )
        log(f"  Formatted length: {len(result['formattedTranscript'])} chars")
        log(f"  Preview: {result['formattedTranscript'][:200]!r}")

    log("=" * 60)
    log("VERIFICATION PASSED")


if __name__ == "__main__":
    asyncio.run(main())
