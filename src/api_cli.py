"""
CLI entrypoint for the API server and store seeding.

Usage:
  insights-api serve --host 0.0.0.0 --port 8000
  insights-api seed
"""

from __future__ import annotations

import argparse


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("src.api:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def _seed(args: argparse.Namespace) -> int:
    from src.data_store import open_store, seed_store

    store = open_store(backend=args.backend)
    try:
        seeded = seed_store(store)
    finally:
        store.close()
    for collection, done in seeded.items():
        print(f"{collection}: {'seeded' if done else 'already populated'}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="AI FinTech Insights catalog service")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    serve.set_defaults(func=_serve)

    seed = sub.add_parser("seed", help="Populate empty collections with seed data")
    seed.add_argument("--backend", choices=["sqlite", "memory"], default=None)
    seed.set_defaults(func=_seed)

    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 2
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
