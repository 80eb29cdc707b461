"""
CLI — prints the SOLID principles demonstrations.

Usage:
    # Run every demonstration, non-interactively:
    python -m solid_examples.cli

    # Only the Open/Closed and Dependency Inversion demos:
    python -m solid_examples.cli --principle ocp --principle dip

    # Wait for Enter before starting and before exiting:
    python -m solid_examples.cli --pause

    # Show what the composition root wires up:
    python -m solid_examples.cli --log-level INFO

Narrative goes to stdout; log records go to stderr.
"""

import argparse
import logging

from pydantic import BaseModel, field_validator

from solid_examples.domain.models import Principle
from solid_examples.runner import SolidDemoRunner
from solid_examples.services.factory import ServiceContainer

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class RunOptions(BaseModel):
    """Validated command-line options."""

    principles: list[Principle] = list(Principle)
    pause: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunOptions":
        fields = {"pause": args.pause, "log_level": args.log_level}
        if args.principle:
            # Keep first-seen order but drop repeats.
            fields["principles"] = list(dict.fromkeys(args.principle))
        return cls(**fields)


def print_banner() -> None:
    print("🎓 SOLID PRINCIPLES LEARNING DEMO")
    print("==================================")
    print()
    print("This program demonstrates the five SOLID principles:")
    for number, principle in enumerate(Principle, start=1):
        print(f"{number}. {principle.name[0]} - {principle.display_name}")
    print()
    print("Each principle will be demonstrated with:")
    print("❌ Bad examples (violations)")
    print("✅ Good examples (correct implementations)")
    print()


def print_summary() -> None:
    print()
    print("🎉 DEMONSTRATION COMPLETE!")
    print("==========================")
    print()
    print("Key takeaways:")
    print("• SOLID principles help create maintainable, testable, and flexible code")
    print("• Each principle addresses a specific problem in software design")
    print("• Applying these principles leads to better architecture")
    print("• These principles work together to create robust systems")
    print()
    print("For more information, read the docstrings in each module:")
    print("• solid_examples.services.users - Single Responsibility Principle")
    print("• solid_examples.domain.discounts - Open/Closed Principle")
    print("• solid_examples.domain.shapes - Liskov Substitution Principle")
    print("• solid_examples.domain.workers - Interface Segregation Principle")
    print("• solid_examples.services.orders - Dependency Inversion Principle")
    print()


def run(options: RunOptions) -> None:
    logging.basicConfig(
        level=options.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)

    print_banner()
    if options.pause:
        input("Press Enter to start the demonstrations...")
    else:
        print("Starting the demonstrations...")
    print()

    # The one place concrete services are chosen.
    services = ServiceContainer()
    logger.info("Running demos: %s", ", ".join(p.name for p in options.principles))
    SolidDemoRunner(services).run(options.principles)

    print_summary()
    if options.pause:
        input("Press Enter to exit...")
    else:
        print("Done.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print bad vs. good examples of the SOLID principles")
    parser.add_argument(
        "--principle",
        action="append",
        choices=[p.value for p in Principle],
        help="Only demonstrate this principle (repeatable; default: all)",
    )
    parser.add_argument("--pause", action="store_true", help="Wait for Enter before starting and before exiting")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for stderr (default: WARNING)",
    )
    parser.add_argument("--list", action="store_true", help="List the principles and exit")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.list:
        for principle in Principle:
            print(f"{principle.value}  {principle.display_name}")
        return
    run(RunOptions.from_args(args))


if __name__ == "__main__":
    main()
