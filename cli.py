#!/usr/bin/env python3
import sys
import argparse
import traceback
from colorama import init as colorama_init, Fore, Style

from core.config import Config
from core.exceptions import ClipboardWriteError, ConfigurationError
from core.logger import ConsoleLogger
from core.models import Mode
from core.tokens import classify_arguments
from core.validation import SectionStyle
from commands.clear    import clear_main
from commands.copy     import copy_main
from commands.validate import validate_main

USAGE_EPILOG = """\
mode flags:
  --fresh    replace the clipboard with the selected files
  --append   add the selected files after the current clipboard (default)
  --clear    empty the clipboard and exit

IDE External Tool arguments:
  Fresh  : --fresh $FilePath$ $SelectedFiles$
  Append : --append $FilePath$ $SelectedFiles$
  Clear  : --clear
"""


def create_parser():
    p = argparse.ArgumentParser(
        prog="clipcopy",
        usage="%(prog)s [--fresh|--append|--clear] [options] <path-token>...",
        description="clipcopy: copy files and folders to the clipboard as formatted sections",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    p.add_argument('--config', dest='config', default=None,
                   help='Settings file (default: $CLIPCOPY_CONFIG or ~/.clipcopy.yaml)')
    p.add_argument('--style', choices=[s.value for s in SectionStyle], default=None,
                   help='Section layout for this run')
    p.add_argument('--check-config', dest='check_config', action='store_true',
                   help='Validate settings and exit without touching the clipboard')
    return p


def main(argv=None):
    colorama_init()
    parser = create_parser()
    # mode flags and path tokens are left in order for classify_arguments
    args, raw_args = parser.parse_known_args(argv)
    logger = ConsoleLogger()

    try:
        if args.check_config:
            return validate_main(args.config)

        mode, tokens = classify_arguments(raw_args, default_mode=None)
        if mode == Mode.CLEAR:
            clear_main(logger=logger)
            return 0

        config = Config.load(args.config).with_overrides(style=args.style)
        copy_main(tokens, mode or config.default_mode, config, logger=logger)
        return 0

    except ConfigurationError as e:
        logger.error(f"Invalid settings: {e}")
        for error in e.context.get('errors', []):
            logger.error(f"  {error}")
        return 1
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except ClipboardWriteError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        print(f"{Fore.RED}❌ Unexpected error: {e}{Style.RESET_ALL}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        return 1


if __name__=='__main__':
    sys.exit(main())
