"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from titletotags import AuthenticationError, ConfigError, HarnessError, ProviderError


def main(argv: list[str] | None = None) -> int:
    import titletotags.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "parse":
            return cli._run_parse(args)
        if args.command == "init":
            return cli._run_init(args)
        if args.command == "run":
            cli.asyncio.run(cli._run_cleanup(args))
            return 0
        if args.command == "harness":
            return cli._run_harness(args)
        print(f"error: unsupported command: {args.command}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except HarnessError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
