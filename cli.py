#!/usr/bin/env python3
"""
Password validator CLI - management interface

Usage:
    python cli.py server                    # Start web server
    python cli.py validate PASSWORD         # Validate a password locally
    python cli.py validate PASSWORD --json  # Same, printing the API response body
    python cli.py rules                     # Show the active rule set
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Ensure .env is loaded before any imports
from dotenv import load_dotenv
load_dotenv()

# Make the src package importable when run from another directory
sys.path.insert(0, str(Path(__file__).parent))

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ============================================================================
# SERVER COMMANDS
# ============================================================================

def cmd_server(args: argparse.Namespace) -> None:
    """Start the web server."""
    import uvicorn

    logger.info("Starting password validation server...")

    env = os.getenv("ENVIRONMENT", "development")
    is_production = env == "production"

    if is_production:
        logger.info("Running in PRODUCTION mode")
        uvicorn.run(
            "src.main:app",
            host=args.host,
            port=args.port,
            workers=args.workers,
            log_level=args.loglevel,
            proxy_headers=True,
            forwarded_allow_ips="*",
        )
    else:
        logger.info("Running in DEVELOPMENT mode")
        logger.info(f"Validate: POST http://{args.host}:{args.port}/api/v1/validate-password")
        logger.info(f"API Docs: http://{args.host}:{args.port}/docs")
        uvicorn.run(
            "src.main:app",
            host=args.host,
            port=args.port,
            reload=True,
            log_level=args.loglevel,
        )


# ============================================================================
# VALIDATION COMMANDS
# ============================================================================

def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a password with the configured rules, without the HTTP layer."""
    from src.validators.password import get_password_validator

    result = get_password_validator().validate(args.password)

    if args.json:
        body = {"isValid": result.is_valid}
        if result.errors:
            body["errors"] = list(result.errors)
        print(json.dumps(body, ensure_ascii=False))
    elif result.is_valid:
        print("Password is valid")
    else:
        print(f"Password is invalid ({len(result.errors)} violations):")
        for message in result.errors:
            print(f"  - {message}")

    return 0 if result.is_valid else 1


def cmd_rules(args: argparse.Namespace) -> None:
    """Show the active rule set and transport policy."""
    from src.config.settings import get_settings
    from src.validators.password import get_password_validator

    policy = get_settings().password
    validator = get_password_validator()

    print("\n=== Password Policy ===")
    print(f"Minimum length: {policy.PASSWORD_MIN_LENGTH} ({policy.PASSWORD_LENGTH_UNIT})")
    print(f"Special characters: {policy.PASSWORD_SPECIAL_CHARS}")
    print(f"Reject empty at HTTP boundary: {policy.PASSWORD_REJECT_EMPTY}")
    print(f"Max request length: {policy.PASSWORD_MAX_REQUEST_LENGTH}")

    print("\nRules (evaluation order):")
    for index, description in enumerate(validator.get_requirements(), start=1):
        params = {key: value for key, value in description.items() if key != "name"}
        suffix = f" {params}" if params else ""
        print(f"  {index}. {description['name']}{suffix}")

    print()


# ============================================================================
# MAIN CLI
# ============================================================================

def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Password Validator Management CLI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Server command
    server_parser = subparsers.add_parser('server', help='Start web server')
    server_parser.add_argument('--host', default='0.0.0.0', help='Host to bind')
    server_parser.add_argument('--port', type=int, default=8080, help='Port to bind')
    server_parser.add_argument('--workers', type=int, default=4, help='Number of workers (production only)')
    server_parser.add_argument('--loglevel', default='info', choices=['debug', 'info', 'warning', 'error'])

    # Validate command
    validate_parser = subparsers.add_parser('validate', help='Validate a password locally')
    validate_parser.add_argument('password', help='Password to validate')
    validate_parser.add_argument('--json', action='store_true', help='Print the API response body as JSON')

    # Rules command
    subparsers.add_parser('rules', help='Show the active rule set')

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    try:
        if args.command == 'server':
            cmd_server(args)
        elif args.command == 'validate':
            sys.exit(cmd_validate(args))
        elif args.command == 'rules':
            cmd_rules(args)
        else:
            parser.print_help()

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
