#!/usr/bin/env python3
"""
Validate a settings file without touching the clipboard.

Useful for checking a hand-edited ~/.clipcopy.yaml before wiring the tool
into an IDE.
"""

import sys
from colorama import Fore

from core.config import Config
from core.exceptions import ConfigurationError
from core.validation import ConfigValidator, find_config_path


def validate_main(config_path: str = None):
    """
    Validate clipcopy settings.

    Args:
        config_path: Settings file; $CLIPCOPY_CONFIG or ~/.clipcopy.yaml when omitted

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    found = find_config_path(config_path)
    warnings = []

    try:
        if found:
            print(f"[validate] Checking settings in {found}")
            validator = ConfigValidator(found)
            settings, warnings = validator.validate_all()
            config = Config.from_settings(settings, source=validator.config_path)
        else:
            print("[validate] No settings file found, using built-in defaults")
            config = Config()

        if warnings:
            print(Fore.YELLOW + f"\n[validate] Found {len(warnings)} warning(s):")
            for warning in warnings:
                print(Fore.YELLOW + f"  ⚠ {warning}")

        print(Fore.GREEN + f"\n[validate] ✓ Settings are valid")
        print(f"  - Style: {config.style.value}")
        print(f"  - Default mode: {config.default_mode.value}")
        print(f"  - Header width: {config.separator_length}")
        print(f"  - Rule width: {config.rule_width}")
        print(f"  - Encoding: {config.encoding}")
        print(f"  - Extensions: {' '.join(config.allowed_extensions) or '(none)'}")
        return 0

    except ConfigurationError as e:
        print(Fore.RED + f"\n[validate] ✗ Validation failed:")
        print(Fore.RED + f"  {e}")

        if e.context.get('errors'):
            errors = e.context['errors']
            print(Fore.RED + f"\n[validate] Found {len(errors)} validation error(s):")
            for i, error in enumerate(errors, 1):
                print(Fore.RED + f"  {i}. {error}")
        return 1

    except FileNotFoundError as e:
        print(Fore.RED + f"\n[validate] ✗ Settings file not found:")
        print(Fore.RED + f"  {e}")
        return 1


if __name__ == "__main__":
    args = sys.argv[1:]
    sys.exit(validate_main(args[0] if args else None))
