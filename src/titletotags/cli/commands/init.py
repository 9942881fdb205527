"""Init command handlers."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def run_init(args: argparse.Namespace) -> int:
    """Run the init wizard or defaults mode."""
    output = Path(args.output)

    if output.exists():
        if args.defaults:
            print(f"error: {output} already exists (use a different --output path)", file=sys.stderr)
            return 2
        try:
            import questionary

            if not questionary.confirm(f"{output} already exists. Overwrite?", default=False).ask():
                print("Aborted.")
                return 2
        except KeyboardInterrupt:
            print("\nAborted.")
            return 2

    if args.defaults:
        return run_init_defaults(output, organization=args.organization, project=args.project)
    return run_init_interactive(output, organization=args.organization, project=args.project)


def run_init_defaults(output: Path, *, organization: str | None, project: str | None) -> int:
    """Generate config from flags and defaults, no prompts."""
    import titletotags.cli as cli

    try:
        config = cli.scaffold_config(
            organization=organization or "ORGANIZATION",
            project=project or "PROJECT",
            include_defaults=True,
        )
    except cli.ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3

    cli.write_config(config, output)
    print(f"Config written to {output}")
    if organization is None or project is None:
        print("\nEdit organization and project, then run:")
    else:
        print("\nSet AZURE_DEVOPS_PAT, then run:")
    print(f"  titletotags run --config {output} --dry-run")
    return 0


def run_init_interactive(output: Path, *, organization: str | None, project: str | None) -> int:
    """Run the interactive wizard using questionary."""
    import titletotags.cli as cli

    try:
        import questionary
    except ImportError:  # pragma: no cover
        print("error: questionary is required for interactive init (pip install questionary)", file=sys.stderr)
        return 1

    try:
        if organization is None:
            organization = questionary.text(
                "Azure DevOps organization:", validate=lambda value: bool(value.strip()) or "Required"
            ).ask()
            if organization is None:
                raise KeyboardInterrupt
        if project is None:
            project = questionary.text(
                "Project:", validate=lambda value: bool(value.strip()) or "Required"
            ).ask()
            if project is None:
                raise KeyboardInterrupt

        auth = questionary.select(
            "Authentication strategy:",
            choices=[
                questionary.Choice("AZURE_DEVOPS_PAT environment variable (default)", value="env"),
                questionary.Choice("Prompt for a token on each run", value="prompt"),
                questionary.Choice("Store a token in the config file", value="token"),
            ],
            default="env",
        ).ask()
        if auth is None:
            raise KeyboardInterrupt

        token: str | None = None
        if auth == "token":
            token = questionary.password("Personal access token:").ask()
            if token is None:
                raise KeyboardInterrupt

        work_item_type = questionary.text("Work item type:", default="Bug").ask()
        if work_item_type is None:
            raise KeyboardInterrupt
        area_path = questionary.text("Area path filter (optional):", default="").ask()
        if area_path is None:
            raise KeyboardInterrupt
    except KeyboardInterrupt:
        print("\nAborted.")
        return 2

    try:
        config = cli.scaffold_config(
            organization=organization.strip(),
            project=project.strip(),
            auth=auth,
            token=token,
            work_item_type=work_item_type.strip() or "Bug",
            area_path=area_path.strip() or None,
        )
    except cli.ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3

    cli.write_config(config, output)
    print(f"Config written to {output}")
    print(f"\nNext: titletotags run --config {output} --dry-run")
    return 0


__all__ = ["run_init", "run_init_defaults", "run_init_interactive"]
