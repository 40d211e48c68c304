import argparse
import json
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from importlib.metadata import version

import humanize
from rich.console import Console
from rich.table import Table

from .config import ProviderConfig
from .logger import logger
from .reporter import generate_report
from .schemas.machine_type import GCPMachineType
from .walkers.machine_type import read_machine_type


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="machinescope",
        description="machinescope: GCE Machine Type Lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Look up one machine type (project/zone from GOOGLE_PROJECT / GOOGLE_ZONE)
  machinescope n1-standard-4

  # Compare several machine types in a specific zone
  machinescope --project my-project --zone us-central1-a e2-medium n2-standard-8

  # Dump state as JSON
  machinescope --zone us-west1-b a2-highgpu-1g --json

  # Write an HTML spec sheet
  machinescope --zone us-central1-a n1-standard-4 --html machine_types.html
""",
    )
    try:
        ver = version("machinescope")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"machinescope v{ver}")

    parser.add_argument(
        "machine_types",
        nargs="+",
        metavar="MACHINE_TYPE",
        help="Machine type name(s) to look up (e.g. n1-standard-4)",
    )
    parser.add_argument("--project", help="GCP Project ID (default: from environment)")
    parser.add_argument("--zone", help="Compute zone (default: from environment)")
    parser.add_argument(
        "--module-name",
        help="Module name appended to the API user agent",
    )
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument("--html", help="Output report to an HTML file")
    parser.add_argument("--pdf", help="Output report to a PDF file")
    parser.add_argument(
        "--concurrency",
        type=int,
        default=5,
        help="Number of machine types to look up in parallel (default: 5)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def lookup_all(
    config: ProviderConfig, args: argparse.Namespace
) -> tuple[list[GCPMachineType], int]:
    """
    Reads every requested machine type. Results keep input order.
    Returns (results, failure_count).
    """
    results: list[GCPMachineType] = []
    failures = 0

    workers = max(1, min(args.concurrency, len(args.machine_types)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(
                read_machine_type,
                config,
                name,
                project=args.project,
                zone=args.zone,
                module_name=args.module_name,
            )
            for name in args.machine_types
        ]
        for name, future in zip(args.machine_types, futures):
            try:
                results.append(future.result())
            except Exception as e:
                logger.error(f"Lookup of {name} failed: {e}")
                failures += 1

    return results, failures


def render_table(machine_types: list[GCPMachineType]) -> Table:
    table = Table(title="Machine Types")
    table.add_column("Name", style="cyan")
    table.add_column("Zone")
    table.add_column("vCPUs", justify="right")
    table.add_column("Memory", justify="right")
    table.add_column("Shared CPU")
    table.add_column("Scratch Disks")
    table.add_column("Accelerators")
    table.add_column("ID", style="dim")

    for mt in machine_types:
        scratch = ", ".join(f"{d.disk_gb} GB" for d in mt.scratch_disks) or "-"
        accs = (
            ", ".join(
                f"{a.guest_accelerator_count}x {a.guest_accelerator_type}"
                for a in mt.accelerators
            )
            or "-"
        )
        table.add_row(
            mt.name,
            mt.zone,
            str(mt.guest_cpus),
            humanize.naturalsize(mt.memory_mb * 1024 * 1024, binary=True),
            "yes" if mt.is_shared_cpu else "no",
            scratch,
            accs,
            mt.id,
        )
    return table


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.concurrency < 1:
        parser.error("--concurrency must be at least 1")

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    # Use stderr for logs/progress if stdout is piped for JSON
    log_console = Console(stderr=True, quiet=args.json)
    out_console = Console(quiet=args.json)

    config = ProviderConfig.from_env(project=args.project, zone=args.zone)
    log_console.print(
        f"[bold green]machinescope[/bold green] looking up "
        f"{len(args.machine_types)} machine type(s)..."
    )

    results, failures = lookup_all(config, args)

    if args.json:
        print(json.dumps([mt.to_state() for mt in results], indent=2))
    elif results:
        out_console.print(render_table(results))

    try:
        if args.html:
            generate_report(results, args.html, output_format="html")
            log_console.print(f"Report written to [bold]{args.html}[/bold]")
        if args.pdf:
            generate_report(results, args.pdf, output_format="pdf")
            log_console.print(f"Report written to [bold]{args.pdf}[/bold]")
    except OSError as e:
        logger.error(f"Report Failed: {e}")
        return 1

    return 1 if failures else 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[bold red]Operation cancelled by user.[/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    run()
