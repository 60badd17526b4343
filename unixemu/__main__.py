# __main__.py

import argparse
from unixemu import Shell
from unixemu.transcript import MAX_LINES

def main():
    parser = argparse.ArgumentParser(description='Unix Emulator')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stderr)')
    parser.add_argument('--max-lines',
        type=int,
        default=MAX_LINES,
        help='Number of transcript lines kept on screen')
    parser.add_argument('--no-home',
        action='store_true',
        help='Stay in the current directory instead of the home directory')

    args = parser.parse_args()

    if args.max_lines < 1:
        parser.error('--max-lines must be at least 1')

    shell = Shell(
        logging_enabled=args.enable_logging,
        log_file=args.log_file,
        max_lines=args.max_lines,
        use_home_directory=not args.no_home
    )
    shell.start()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
