"""clawstart CLI entry point."""

import sys
from pathlib import Path

from loguru import logger

from clawstart.utils.logger import setup_logging


def _parse_onboard_args(args: list[str], default_config: str) -> tuple[str, bool | None, bool]:
    """Parse onboard args: [config_path] [--quickstart|--advanced] [--no-skip]."""
    quickstart: bool | None = None
    if "--quickstart" in args:
        quickstart = True
    elif "--advanced" in args:
        quickstart = False
    include_skip = "--no-skip" not in args
    positional = [arg for arg in args if not arg.startswith("--")]
    config_path = positional[0] if positional else default_config
    return config_path, quickstart, include_skip


def _print_main_usage() -> None:
    print("clawstart commands:")
    print("  clawstart onboard [config] [--quickstart|--advanced] [--no-skip]")
    print("  clawstart skills [config]     # starter skills and whether they are included")
    print("  clawstart help")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    default_config = str(Path.cwd() / "config.local.yaml")
    args = sys.argv[1:] if argv is None else argv

    if not args or args[0] in {"-h", "--help", "help"}:
        _print_main_usage()
        return 0

    setup_logging("WARNING")

    if args[0] in {"onboard", "setup", "init"}:
        from clawstart.setup import run_onboard
        config_path, quickstart, include_skip = _parse_onboard_args(args[1:], default_config)
        try:
            run_onboard(config_path, quickstart=quickstart, include_skip=include_skip)
        except KeyboardInterrupt:
            logger.warning("Onboarding interrupted")
            print("\nOnboarding cancelled.")
            return 130
        except EOFError:
            logger.warning("Input closed during onboarding")
            print("\nOnboarding cancelled.")
            return 1
        except PermissionError as e:
            from clawstart.setup import console
            console.print(f"[red]{e}[/red]")
            return 1
        return 0

    if args[0] == "skills":
        from clawstart.setup import run_skills_report
        run_skills_report(args[1] if len(args) > 1 else default_config)
        return 0

    print(f"Unknown command: {args[0]}")
    _print_main_usage()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
