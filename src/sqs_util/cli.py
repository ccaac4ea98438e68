"""
Module: cli.py
Description: Command-line entry point for sending a message to SQS.

Parses flags, validates the account and queue names, resolves each
queue name to its URL and sends the message.

Usage:
    sqs-util --account 123456789012 --queue orders --message '{"id": 1}'
    sqs-util --account 123456789012 --queue "orders audit" \\
        --message hello --attributes 'env=prod,team="core platform"' -v

Exit codes:
    0    message sent
    254  queue lookup or message send failed
    255  missing or invalid required flag
"""

import argparse
import sys
from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from sqs_util.config.settings import Settings
from sqs_util.models.message import SendRequest
from sqs_util.sqs_queue.sqs import send
from sqs_util.utils.logger import configure_logging, get_logger
from sqs_util.utils.options import parse_options, tokenize
from sqs_util.version import version_info

logger = get_logger(__name__)

APP_NAME = "sqs_util"

EXIT_SUCCESS = 0
EXIT_SEND_FAILURE = 254
EXIT_INVALID_INPUT = 255


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from settings."""
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Send a message to one or more named Amazon SQS queues",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sqs-util --account 123456789012 --queue vault-register --message hello
  sqs-util --account 123456789012 --queue "vault-register consul-register" \\
      --message hello --attributes 'foo=bar,bar=foo,hello=world'

Flag defaults can be set with SQS_UTIL_ACCOUNT_ID, SQS_UTIL_AWS_REGION
and SQS_UTIL_DELAY_SECONDS.
        """
    )

    parser.add_argument(
        '--account',
        type=str,
        default=settings.account_id,
        help="AWS account number, e.g. --account='123456789012'"
    )

    parser.add_argument(
        '--region',
        type=str,
        default=settings.aws_region,
        help=f"AWS region (default: {settings.aws_region})"
    )

    parser.add_argument(
        '--queue', '--destination',
        dest='queue',
        type=str,
        default='',
        help="Queue name(s), space separated, e.g. --queue='vault-register consul-register'"
    )

    parser.add_argument(
        '--message',
        type=str,
        default='',
        help='Literal message body'
    )

    parser.add_argument(
        '--attributes',
        type=str,
        default='',
        help="Message attributes, e.g. --attributes='foo=bar,bar=foo,hello=world'"
    )

    parser.add_argument(
        '--delay-seconds',
        type=int,
        default=settings.delay_seconds,
        help=f'Delay before the message becomes visible (default: {settings.delay_seconds})'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print debug output'
    )

    parser.add_argument(
        '--version',
        action='store_true',
        help='Print version and exit'
    )

    return parser


def _describe_error(error: dict) -> str:
    """Turn one pydantic error entry into a human-readable reason."""
    ctx = error.get('ctx') or {}
    if isinstance(ctx.get('error'), ValueError):
        return str(ctx['error'])
    field = '.'.join(str(part) for part in error['loc'])
    return f"invalid {field}: {error['msg']}"


def _exit_invalid_input(error: ValidationError, app_name: str = APP_NAME) -> None:
    """Print every validation failure and exit with EXIT_INVALID_INPUT."""
    for entry in error.errors():
        print(f"{app_name}: {_describe_error(entry)}")
    sys.exit(EXIT_INVALID_INPUT)


def main(argv: Optional[List[str]] = None) -> None:
    """Main script execution."""
    try:
        settings = Settings()
    except ValidationError as e:
        _exit_invalid_input(e)

    args = build_parser(settings).parse_args(argv)

    if args.version:
        print(version_info(settings.app_name, settings.app_version))
        sys.exit(EXIT_SUCCESS)

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    logger.debug("Using account", account_id=args.account)
    logger.debug("Using destination(s)", queue=args.queue)
    logger.debug("Using region", region=args.region)
    logger.debug("Raw attribute input", attributes=args.attributes)

    attributes = parse_options(args.attributes)
    for key, value in attributes.items():
        logger.debug("Mapped attribute", key=key, value=value)

    try:
        request = SendRequest(
            account_id=args.account,
            region=args.region,
            queue_names=tokenize(args.queue),
            body=args.message,
            attributes=attributes,
            delay_seconds=args.delay_seconds
        )
    except ValidationError as e:
        _exit_invalid_input(e, settings.app_name)

    try:
        results = send(request)
    except (ClientError, BotoCoreError) as e:
        print(f"[ERROR]: failed to send: {e}")
        logger.error("Message send failed", error=str(e), error_type=type(e).__name__)
        sys.exit(EXIT_SEND_FAILURE)

    for result in results:
        print(f"Successfully sent message to '{result.queue_name}' (MessageId: {result.message_id})")

    sys.exit(EXIT_SUCCESS)


if __name__ == '__main__':
    main()
