# scripts/ask.py

import argparse
import logging
import uuid
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from blog_rag.config import get_settings
from blog_rag.constants import DEFAULT_QUESTION
from blog_rag.controller import ConversationController, StepEvent
from blog_rag.retrieval.index import build_retrieval_service
from blog_rag.serialization import to_json, write_artifact


def print_step(event: StepEvent) -> None:
    print(f"Output from node: '{event.node}'")
    print(to_json({"type": event.message_type, "content": event.content, "tool_calls": event.tool_calls}))
    print("---\n")


def main():
    parser = argparse.ArgumentParser(description="Ask a question about the indexed blog posts.")
    parser.add_argument(
        "--question",
        default=DEFAULT_QUESTION,
        help="Question to answer",
    )
    parser.add_argument(
        "--max-rewrites",
        type=int,
        default=None,
        help="Override BLOG_RAG_MAX_REWRITES for this run",
    )
    parser.add_argument(
        "--run-id",
        default=None,
        help="Run id for artifacts (default: random)",
    )
    parser.add_argument(
        "--artifacts-dir",
        default="artifacts/runs",
        help="Directory for input/history artifacts",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level",
    )

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = get_settings()
    if args.max_rewrites is not None:
        settings = settings.with_overrides(max_rewrites=args.max_rewrites)

    print(f"Indexing {len(settings.blog_urls)} blog post(s)...")
    retrieval = build_retrieval_service(settings)

    controller = ConversationController.from_settings(settings, retrieval=retrieval)

    run_id = args.run_id or f"run-{uuid.uuid4().hex[:10]}"
    artifacts_dir = Path(args.artifacts_dir)
    write_artifact(artifacts_dir, run_id, "input.json", {"question": args.question, "settings": settings})

    history = controller.run(args.question, on_step=print_step)

    write_artifact(artifacts_dir, run_id, "history.json", history)
    print(f"Final answer:\n{history[-1].content}")
    print(f"Artifacts written to: {artifacts_dir / run_id}")


if __name__ == "__main__":
    main()
