"""
Command Line Interface for Reader Config

Provides entry points for:
- reader-config init: Write a default configuration file
- reader-config show: Print the effective configuration
- reader-config bind: List the elements a click listener attaches to
"""

import sys
import json
import logging
import argparse
from pathlib import Path

from .config import default_configuration, load_config, save_config
from .binding import attribute_value, find_targets, parse_content
from .listeners import ClickListenerRegistration


def init_command(args: argparse.Namespace) -> int:
    """Execute init command."""
    try:
        config = default_configuration(identifier=args.identifier)
        if args.direction:
            config.direction = args.direction
        save_config(config, args.output)
        print(f"Wrote default configuration to {args.output}")
        return 0

    except Exception as e:
        print(f"\nError: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def show_command(args: argparse.Namespace) -> int:
    """Execute show command."""
    try:
        config = load_config(args.config)

        if args.json:
            print(json.dumps(config.model_dump(mode='json'), indent=2, ensure_ascii=False))
            return 0

        print("=" * 60)
        print("Reader Configuration")
        print("=" * 60)
        print(f"Identifier: {config.identifier or '(default)'}")
        print(f"Direction: {config.direction.value} (scrolls {config.direction.scroll_axis().value})")
        print(f"Store schema version: {config.store.schema_version}")
        print("\nFeatures:")
        for name, enabled in config.features:
            print(f"  {name}: {'on' if enabled else 'off'}")
        print("\nColors (day / night):")
        day = config.colors.for_mode(night=False)
        night = config.colors.for_mode(night=True)
        for name in day:
            print(f"  {name}: {day[name]} / {night[name]}")
        return 0

    except Exception as e:
        print(f"\nError: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def bind_command(args: argparse.Namespace) -> int:
    """Execute bind command."""
    try:
        registration = ClickListenerRegistration(
            scheme_name=args.scheme,
            query_selector=args.selector,
            attribute_name=args.attribute,
            select_all=not args.first,
            on_click=lambda value, point: None,
        )
        root = parse_content(Path(args.input).read_bytes())
        targets = find_targets(root, registration) if root is not None else []

        print(f"{len(targets)} element(s) matched {args.selector!r}")
        for element in targets:
            value = attribute_value(element, args.attribute)
            print(f"  <{element.tag}> {args.attribute}={value if value is not None else '(none)'}")
        return 0

    except Exception as e:
        print(f"\nError: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='reader-config',
        description='Reader Config - reader settings and content click listeners',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s init reader.yaml --identifier library
  %(prog)s show --config reader.yaml --json
  %(prog)s bind chapter1.xhtml --selector .quote --attribute id
        """
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Init command
    init_parser = subparsers.add_parser('init', help='Write a default configuration file')
    init_parser.add_argument('output', help='Output file (YAML or JSON)')
    init_parser.add_argument('--identifier', '-i', help='Reader instance identifier')
    init_parser.add_argument('--direction', '-d', help='Layout direction')
    init_parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    # Show command
    show_parser = subparsers.add_parser('show', help='Print the effective configuration')
    show_parser.add_argument('--config', '-c', required=True, help='Reader configuration file (YAML/JSON)')
    show_parser.add_argument('--json', action='store_true', help='Output as JSON')
    show_parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    # Bind command
    bind_parser = subparsers.add_parser('bind', help='List the elements a click listener attaches to')
    bind_parser.add_argument('input', help='XHTML/HTML chapter file')
    bind_parser.add_argument('--selector', '-s', required=True, help='Query selector')
    bind_parser.add_argument('--attribute', '-a', default='', help='Attribute passed to the listener')
    bind_parser.add_argument('--scheme', default='click', help='Listener scheme name')
    bind_parser.add_argument('--first', action='store_true', help='Only attach to the first match')
    bind_parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == 'init':
        return init_command(args)
    elif args.command == 'show':
        return show_command(args)
    elif args.command == 'bind':
        return bind_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
