#!/usr/bin/env python3
"""
Main entry point for the Agent Reputation Scanner.

Commands:
1. scan    - Full (or quick) scan of a single address, printed as a report
2. batch   - Quick scan of every address in a file, saved as JSON
3. version - Print the scanner version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from reputation_scanner import __version__
from reputation_scanner.batch import FixedDelayThrottle, read_address_file, run_batch
from reputation_scanner.config import (
    SUPPORTED_NETWORKS,
    ScannerSettings,
    fetch_patterns,
    load_patterns_file,
    load_settings,
)
from reputation_scanner.core import ReputationScanner
from reputation_scanner.core.models import ReputationReport
from reputation_scanner.reporting import format_batch_line, format_report, save_json_results

# Load environment variables
load_dotenv(override=True)

logger = logging.getLogger(__name__)

PROG = "scan-reputation"
RISK_ORDER = ["low", "medium", "high", "critical"]


def print_usage():
    print("🔍 Agent Reputation Scanner")
    print("============================")
    print("")
    print("Usage:")
    print(f"  {PROG} scan 0x... [network]  - Scan single address")
    print(f"  {PROG} batch addresses.txt   - Batch scan from file")
    print(f"  {PROG} version               - Show version")
    print("")
    print(f"Networks: {', '.join(SUPPORTED_NETWORKS)}")
    print("")
    print("Checks performed:")
    print("  • Address format validation")
    print("  • Contract verification status")
    print("  • Account age/activity")
    print("  • Transaction patterns")
    print("  • Known malicious associations")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to JSON config file (env: REPUTATION_SCANNER_CONFIG, '
             'default: ~/.config/agent-reputation-scanner/config.json)'
    )
    common.add_argument(
        '--patterns-file',
        type=Path,
        default=None,
        help='Extra deny-list patterns, one per line or a JSON list'
    )
    common.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Per-check timeout in seconds (env: REPUTATION_CHECK_TIMEOUT, default: 10)'
    )
    common.add_argument(
        '--fail-on',
        choices=RISK_ORDER,
        default=None,
        help='Exit with status 1 when a report reaches this risk level or worse'
    )
    common.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Enable debug mode to log to file (default: False)'
    )

    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Heuristic reputation scoring for blockchain addresses',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (can also be set in .env file):
  <NETWORK>_API_KEY           Explorer API key per network (e.g. ETHEREUM_API_KEY)
  REPUTATION_SCANNER_CONFIG   Path to JSON config file
  REPUTATION_CHECK_TIMEOUT    Per-check timeout in seconds
  REPUTATION_BATCH_DELAY      Delay between batch scans in seconds (default: 0.2)
  REPUTATION_PATTERNS_URL     URL of an extra deny-list

Priority: Command-line arguments > Environment variables > Config file > Defaults
        """
    )
    subparsers = parser.add_subparsers(dest='command')

    scan = subparsers.add_parser('scan', parents=[common], help='Scan single address')
    scan.add_argument('address', help='Address to scan (0x...)')
    scan.add_argument('network', nargs='?', default=None, help='Network (default: ethereum)')
    scan.add_argument('--quick', action='store_true', help='Only run format and known-pattern checks')
    scan.add_argument('--json', action='store_true', help='Print the report as JSON')
    scan.add_argument('--output', type=Path, default=None, help='Also save the report as JSON')

    batch = subparsers.add_parser('batch', parents=[common], help='Batch scan from file')
    batch.add_argument('file', type=Path, help='File with one address per line')
    batch.add_argument('--network', default=None, help='Network for all addresses (default: ethereum)')
    batch.add_argument('--full', action='store_true', help='Run full scans instead of quick scans')
    batch.add_argument('--delay', type=float, default=None, help='Seconds between scans (default: 0.2)')
    batch.add_argument(
        '--output',
        type=Path,
        default=None,
        help='JSON results file (default: reputation-results.json)'
    )

    subparsers.add_parser('version', help='Show version')
    return parser


def configure_logging(debug: bool):
    if debug:
        # Create output directory for log file
        output_dir = Path("output")
        output_dir.mkdir(exist_ok=True)

        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(output_dir / 'scan_reputation.log')
            ]
        )
    else:
        # Keep the console for the rendered report only
        logging.basicConfig(
            level=logging.CRITICAL,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.NullHandler()
            ]
        )


def resolve_settings(args: argparse.Namespace) -> ScannerSettings:
    """Load settings and extend the deny-list from --patterns-file and patterns_url."""
    settings = load_settings(args.config)

    if args.patterns_file:
        settings = settings.with_patterns(load_patterns_file(args.patterns_file))

    if settings.patterns_url:
        settings = settings.with_patterns(fetch_patterns(settings.patterns_url))

    if args.timeout is not None:
        # 0 disables the per-check timeout
        settings = ScannerSettings(**{**settings.model_dump(), 'check_timeout': args.timeout or None})

    return settings


def exit_code_for(reports: List[ReputationReport], fail_on: Optional[str]) -> int:
    if not fail_on:
        return 0
    threshold = RISK_ORDER.index(fail_on)
    flagged = [r for r in reports if RISK_ORDER.index(r.risk_level) >= threshold]
    if flagged:
        logger.warning(f"{len(flagged)} report(s) at or above risk level {fail_on}")
        return 1
    return 0


def cmd_scan(args: argparse.Namespace, settings: ScannerSettings) -> int:
    network = args.network or settings.default_network
    scanner = ReputationScanner(settings=settings)

    if not args.json:
        print(f"🔍 Scanning {args.address} on {network}...\n")

    if args.quick:
        report = scanner.run_quick_scan(args.address, network)
    else:
        report = scanner.run_full_scan(args.address, network)

    if args.json:
        print(json.dumps(report.to_json_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_report(report), end='')

    if args.output:
        save_json_results([report], args.output)
        if not args.json:
            print(f"\n✅ Report saved to {args.output}")

    return exit_code_for([report], args.fail_on)


def cmd_batch(args: argparse.Namespace, settings: ScannerSettings) -> int:
    addresses = read_address_file(args.file)
    network = args.network or settings.default_network
    delay = args.delay if args.delay is not None else settings.batch_delay
    throttle = FixedDelayThrottle(delay)
    output = args.output or Path(settings.results_file)

    print(f"🔍 Batch scanning {len(addresses)} addresses...\n")

    reports = run_batch(
        ReputationScanner(settings=settings),
        addresses,
        network=network,
        throttle=throttle,
        full=args.full,
        on_report=lambda report: print(format_batch_line(report)),
    )

    save_json_results(reports, output)
    print(f"\n✅ Results saved to {output}")

    return exit_code_for(reports, args.fail_on)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        print_usage()
        return 1

    if args.command == 'version':
        print(f"agent-reputation-scanner v{__version__}")
        return 0

    configure_logging(args.debug)

    try:
        settings = resolve_settings(args)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot load configuration: {e}")
        print(f"❌ Cannot load configuration: {e}")
        return 1

    if args.command == 'scan':
        try:
            return cmd_scan(args, settings)
        except OSError as e:
            logger.error(f"Cannot write report: {e}")
            print(f"❌ Cannot write report: {e}")
            return 1

    try:
        return cmd_batch(args, settings)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Batch scan failed: {e}")
        print(f"❌ Cannot read or write file: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid batch options: {e}")
        print(f"❌ Invalid batch options: {e}")
        return 1


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()
