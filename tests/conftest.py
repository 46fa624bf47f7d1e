"""Test configuration and fixtures."""

import logfire

# Keep spans local: nothing is exported and nothing is printed
logfire.configure(send_to_logfire=False, console=False)
