"""Allow running sqs_util with python -m sqs_util."""

from sqs_util.cli import main

main()
