#!/usr/bin/env python3
"""Open the comment overlay for a subject and print its thread."""

import argparse
import asyncio
import sys

import logfire

from buzz.application.overlay import CommentOverlay
from buzz.config import Settings
from buzz.domain.model import Comment
from buzz.domain.value import SubjectId
from buzz.util.di.container import create_container
from buzz.util.logging import setup_logging
from buzz.util.observability import configure_logfire, instrument_httpx


def print_thread(comments: tuple[Comment, ...] | list[Comment], depth: int = 0) -> None:
    """Print comments with replies indented under their parent."""
    for comment in comments:
        indent = "  " * depth
        print(f"{indent}{comment.author.display_name}: {comment.content}")
        print_thread(comment.replies, depth + 1)


async def show(subject_id: SubjectId) -> int:
    container = create_container()
    try:
        async with container() as request_container:
            overlay = await request_container.get(CommentOverlay)
            overlay.set_visible(True, subject_id)
            session = overlay.session
            await overlay.wait_idle()

            if session is None or session.last_error is not None:
                message = session.last_error.message if session else "no session"
                print(f"Could not load comments: {message}", file=sys.stderr)
                return 1

            if not session.comments:
                print("No comments yet")
            print_thread(session.comments)

            overlay.set_visible(False)
            await overlay.wait_idle()
            return 0
    finally:
        await container.close()


def main() -> int:
    """Configure observability and print the comments of one subject."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("subject_id", help="Post ID whose comments to show")
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    try:
        return asyncio.run(show(SubjectId(args.subject_id)))
    except Exception as e:
        logfire.error(
            "Showing comments failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
